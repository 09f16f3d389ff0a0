"""
Option chain request/response assembly.

This module sits between a transport (CLI, web app) and the engine: it
resolves the option type, bounds the grid size, runs one engine per
request, and labels the nested prices with the asset price and strike
price they belong to, rounded for display.
"""

import logging
from dataclasses import asdict, dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Dict, List, Union

from option_chain.core.engine import OptionChainCalculator
from option_chain.core.spans import skip_zero_expiry, span_point_count, span_values, validate_span
from option_chain.utils.constants import MAX_GRID_POINTS, PRICE_DECIMALS
from option_chain.utils.exceptions import ValidationError
from option_chain.utils.types import OptionType, ValueSpan

logger = logging.getLogger(__name__)


def round_price(value: float, places: int = PRICE_DECIMALS) -> float:
    """
    Round half-up to a fixed number of decimal places.

    The float is converted through its shortest repr, so 2.675 rounds
    to 2.68 rather than to the 2.67 that binary round() gives. Results
    that round to zero are returned as +0.0.
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP)) + 0.0


@dataclass(frozen=True)
class OptionChainRequest:
    """Echo of the parameters a chain was computed from."""

    option_type: str
    asset_price_low: float
    asset_price_high: float
    asset_price_step: float
    strike_price_low: float
    strike_price_high: float
    strike_price_step: float
    days_to_expiry_low: float
    days_to_expiry_high: float
    days_to_expiry_step: float
    risk_free_rate: float
    volatility: float


@dataclass(frozen=True)
class ExpiryPrice:
    """Price of an option for one days-to-expiry value."""

    days_to_expiry: float
    price: float


@dataclass(frozen=True)
class StrikeExpiryPrice:
    """Prices per days-to-expiry at one strike price."""

    strike_price: float
    expiry_prices: List[ExpiryPrice]


@dataclass(frozen=True)
class AssetStrikeExpiryPrice:
    """Strike and expiry prices at one asset price."""

    asset_price: float
    strike_expiry_prices: List[StrikeExpiryPrice]


def _camel_case(name: str) -> str:
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


def _camel_keys(value: Any) -> Any:
    if isinstance(value, dict):
        return {_camel_case(k): _camel_keys(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_camel_keys(v) for v in value]
    return value


@dataclass(frozen=True)
class OptionChainResponse:
    """
    Labeled option chain for one asset.

    Attributes:
        asset_name: Name of the underlying asset
        request: Parameters the chain was computed from
        values: Prices per asset price, then strike price, then expiry
    """
    asset_name: str
    request: OptionChainRequest
    values: List[AssetStrikeExpiryPrice]

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested dict with camelCase keys, ready for JSON encoding."""
        return _camel_keys(asdict(self))


def grid_size(asset_span: ValueSpan, strike_span: ValueSpan, days_span: ValueSpan) -> int:
    """
    Number of grid points the three spans produce.

    A days span starting at 0 is counted from one step later, matching
    the chain the engine builds.

    Raises:
        ValidationError: If any span is malformed or holds no positive
            days-to-expiry
    """
    asset_points = span_point_count(*validate_span("assetPriceSpan", asset_span))
    strike_points = span_point_count(*validate_span("strikePriceSpan", strike_span))
    dte_low, dte_high, dte_step = validate_span("daysToExpirySpan", days_span)
    dte_low = skip_zero_expiry(dte_low, dte_high, dte_step)
    return asset_points * strike_points * span_point_count(dte_low, dte_high, dte_step)


def build_option_chain_response(
    asset_name: str,
    option_type: Union[OptionType, str],
    asset_span: ValueSpan,
    strike_span: ValueSpan,
    days_span: ValueSpan,
    risk_free_rate: float,
    volatility: float,
    decimals: int = PRICE_DECIMALS,
    max_grid_points: int = MAX_GRID_POINTS,
) -> OptionChainResponse:
    """
    Compute a labeled, rounded option chain for one request.

    Args:
        asset_name: Name of the underlying asset
        option_type: "Call" or "Put"
        asset_span, strike_span, days_span: Grid spans
        risk_free_rate: Annualized risk-free rate
        volatility: Annualized volatility
        decimals: Decimal places kept in prices
        max_grid_points: Largest grid accepted

    Returns:
        OptionChainResponse echoing the request

    Raises:
        ConfigurationError: If option_type is not Call or Put
        ValidationError: If a span is malformed or the grid is too large
        DegenerateInputError, NumericDomainError: From the engine
    """
    calculator = OptionChainCalculator(option_type, volatility, risk_free_rate, days_span.high)

    points = grid_size(asset_span, strike_span, days_span)
    if points > max_grid_points:
        raise ValidationError(
            "optionChain", f"grid of {points} points exceeds the limit of {max_grid_points}"
        )

    logger.info(
        "Computing %s chain for %s (%d points)", calculator.option_type.value, asset_name, points
    )
    chain = calculator.compute_option_chain(asset_span, strike_span, days_span)

    asset_prices = span_values(asset_span.low, asset_span.high, asset_span.step)
    values = []
    for asset_price, positions_per_strike in zip(asset_prices, chain):
        strike_expiry_prices = [
            StrikeExpiryPrice(
                strike_price=positions[0].strike,
                expiry_prices=[
                    ExpiryPrice(days_to_expiry=p.days_to_expiry, price=round_price(p.price, decimals))
                    for p in positions
                ],
            )
            for positions in positions_per_strike
        ]
        values.append(
            AssetStrikeExpiryPrice(asset_price=asset_price, strike_expiry_prices=strike_expiry_prices)
        )

    request = OptionChainRequest(
        option_type=calculator.option_type.value,
        asset_price_low=asset_span.low,
        asset_price_high=asset_span.high,
        asset_price_step=asset_span.step,
        strike_price_low=strike_span.low,
        strike_price_high=strike_span.high,
        strike_price_step=strike_span.step,
        days_to_expiry_low=days_span.low,
        days_to_expiry_high=days_span.high,
        days_to_expiry_step=days_span.step,
        risk_free_rate=risk_free_rate,
        volatility=volatility,
    )
    return OptionChainResponse(asset_name=asset_name, request=request, values=values)
