"""
Option chain pricing engine.

An OptionChainCalculator prices one option type over a three-dimensional
grid of asset price × strike price × days-to-expiry. It owns two caches:

- days-to-expiry → D1D2Calculator (the expiry-dependent constants)
- (asset, strike, days) → D1D2Calculation (the d1/d2 values)

Both caches live exactly as long as the instance. Build one calculator
per pricing request and never share an instance between threads.
"""

import logging
from typing import Dict, Union

from option_chain.core.black_scholes import PRICERS
from option_chain.core.d1d2 import D1D2Calculator
from option_chain.core.spans import skip_zero_expiry, span_values, validate_span
from option_chain.utils.types import (
    D1D2Calculation,
    OptionChain,
    OptionPosition,
    OptionType,
    PriceKey,
    ValueSpan,
)

logger = logging.getLogger(__name__)


class OptionChainCalculator:
    """
    Black-Scholes option chain calculator with request-scoped memoization.

    Attributes:
        option_type: Pricing strategy applied at every grid point
        volatility: Annualized volatility σ
        risk_free_rate: Annualized continuously compounded rate r
        expiry_in_days: Nominal expiry of the request (kept for reference,
            the grid takes its expiries from the days-to-expiry span)

    Example:
        >>> calc = OptionChainCalculator("Call", 0.20, 0.05, 30.0)
        >>> chain = calc.compute_option_chain(
        ...     ValueSpan(100, 100, 0), ValueSpan(95, 105, 5), ValueSpan(30, 30, 0)
        ... )
        >>> [len(strikes) for strikes in chain]
        [3]
    """

    def __init__(
        self,
        option_type: Union[OptionType, str],
        volatility: float,
        risk_free_rate: float,
        expiry_in_days: float,
    ) -> None:
        self.option_type = OptionType.parse(option_type)
        self.volatility = volatility
        self.risk_free_rate = risk_free_rate
        self.expiry_in_days = expiry_in_days

        self._pricer = PRICERS[self.option_type]
        self._calculators: Dict[float, D1D2Calculator] = {}
        self._d1d2_values: Dict[PriceKey, D1D2Calculation] = {}

    def __repr__(self) -> str:
        return (
            f"OptionChainCalculator(option_type={self.option_type.value!r}, "
            f"volatility={self.volatility}, risk_free_rate={self.risk_free_rate}, "
            f"expiry_in_days={self.expiry_in_days})"
        )

    def d1d2(self, asset_price: float, strike_price: float, days_to_expiry: float) -> D1D2Calculation:
        """
        Return d1/d2 for a grid point, computing it at most once.

        A calculator is built lazily for each new days-to-expiry value and
        reused for every later point with the same expiry. Failures are
        never cached.

        Raises:
            DegenerateInputError: If σ√T is zero for days_to_expiry
            NumericDomainError: If d1/d2 is undefined for the point
        """
        key = PriceKey(asset_price, strike_price, days_to_expiry)
        cached = self._d1d2_values.get(key)
        if cached is not None:
            return cached

        calculator = self._calculators.get(days_to_expiry)
        if calculator is None:
            calculator = D1D2Calculator.for_expiry(
                days_to_expiry, self.volatility, self.risk_free_rate
            )
            self._calculators[days_to_expiry] = calculator

        calculation = calculator.evaluate(asset_price, strike_price)
        self._d1d2_values[key] = calculation
        return calculation

    def price(self, asset_price: float, strike_price: float, days_to_expiry: float) -> OptionPosition:
        """Price one grid point with the engine's option type."""
        d1d2 = self.d1d2(asset_price, strike_price, days_to_expiry)
        return self._pricer(asset_price, strike_price, days_to_expiry, self.risk_free_rate, d1d2)

    def cache_info(self) -> Dict[str, int]:
        """Sizes of the calculator and d1/d2 value caches."""
        return {
            "calculators": len(self._calculators),
            "d1d2_values": len(self._d1d2_values),
        }

    def compute_option_chain(
        self,
        asset_price_span: ValueSpan,
        strike_price_span: ValueSpan,
        days_to_expiry_span: ValueSpan,
    ) -> OptionChain:
        """
        Price every point of the asset × strike × days grid.

        All three spans are validated before any pricing starts. A
        days-to-expiry span starting at 0 starts one step later instead,
        since the formula is undefined at expiry.

        Args:
            asset_price_span: Asset prices, iterated ascending (outer)
            strike_price_span: Strike prices, iterated ascending (middle)
            days_to_expiry_span: Days-to-expiry, iterated descending (inner)

        Returns:
            Nested list indexed [asset][strike][expiry] of OptionPosition

        Raises:
            ValidationError: If a span is malformed or holds no positive
                days-to-expiry
            DegenerateInputError: If σ√T is zero for some expiry
            NumericDomainError: If d1/d2 is undefined at some point
        """
        ap_low, ap_high, ap_step = validate_span("assetPriceSpan", asset_price_span)
        sp_low, sp_high, sp_step = validate_span("strikePriceSpan", strike_price_span)
        dte_low, dte_high, dte_step = validate_span("daysToExpirySpan", days_to_expiry_span)

        dte_low = skip_zero_expiry(dte_low, dte_high, dte_step)

        asset_prices = span_values(ap_low, ap_high, ap_step)
        strike_prices = span_values(sp_low, sp_high, sp_step)
        expiries = span_values(dte_low, dte_high, dte_step, descending=True)

        logger.debug(
            "Pricing %s chain over %d asset × %d strike × %d expiry points",
            self.option_type.value,
            len(asset_prices),
            len(strike_prices),
            len(expiries),
        )

        result: OptionChain = []
        for asset_price in asset_prices:
            positions_per_strike = []
            for strike_price in strike_prices:
                positions_per_strike.append(
                    [self.price(asset_price, strike_price, dte) for dte in expiries]
                )
            result.append(positions_per_strike)

        logger.debug("Chain priced, cache sizes %s", self.cache_info())
        return result
