"""
Black-Scholes pricing formulas for European options on a chain grid.

This module implements the classical Black-Scholes formula for European
calls and puts without dividends. The pricers take d1/d2 already
computed (and usually memoized) by the chain engine, so each call costs
two normal CDF evaluations and one exponential.

Mathematical Background:
    The Black-Scholes formula prices European options under assumptions:
    - Log-normal asset price distribution
    - Constant volatility and interest rate
    - No transaction costs or taxes
    - Continuous trading possible

References:
    Black, F., & Scholes, M. (1973). The Pricing of Options and Corporate Liabilities.
    Journal of Political Economy, 81(3), 637-654.
"""

import math
from typing import Callable, Dict

from option_chain.core.distributions import normal_cdf
from option_chain.utils.types import D1D2Calculation, OptionPosition, OptionType

Pricer = Callable[[float, float, float, float, D1D2Calculation], OptionPosition]


def black_scholes_call(
    asset_price: float,
    strike_price: float,
    days_to_expiry: float,
    risk_free_rate: float,
    d1d2: D1D2Calculation,
) -> OptionPosition:
    """
    Price a European call from precomputed d1/d2.

    Args:
        asset_price: Current asset price S
        strike_price: Strike price K
        days_to_expiry: Days until expiration, echoed into the position
        risk_free_rate: Risk-free interest rate r (annualized, continuous)
        d1d2: d1, d2 and T for this (S, K, days) point

    Returns:
        OptionPosition with the call price, strike and days-to-expiry

    Formula:
        C = S·N(d1) - K·e^(-rT)·N(d2)

    Examples:
        >>> from option_chain.core.d1d2 import D1D2Calculator
        >>> calc = D1D2Calculator.for_expiry(365.0, 0.20, 0.05)
        >>> position = black_scholes_call(100, 100, 365.0, 0.05, calc.evaluate(100, 100))
        >>> abs(position.price - 10.4506) < 0.01  # Known solution
        True
    """
    discount_strike = strike_price * math.exp(-risk_free_rate * d1d2.years_to_expiry)
    price = asset_price * normal_cdf(d1d2.d1) - discount_strike * normal_cdf(d1d2.d2)

    return OptionPosition(price=price, strike=strike_price, days_to_expiry=days_to_expiry)


def black_scholes_put(
    asset_price: float,
    strike_price: float,
    days_to_expiry: float,
    risk_free_rate: float,
    d1d2: D1D2Calculation,
) -> OptionPosition:
    """
    Price a European put from precomputed d1/d2.

    Args:
        asset_price: Current asset price S
        strike_price: Strike price K
        days_to_expiry: Days until expiration, echoed into the position
        risk_free_rate: Risk-free interest rate r (annualized, continuous)
        d1d2: d1, d2 and T for this (S, K, days) point

    Returns:
        OptionPosition with the put price, strike and days-to-expiry

    Formula:
        P = K·e^(-rT)·N(-d2) - S·N(-d1)

    Alternatively (via put-call parity):
        P = C - S + K·e^(-rT)
    """
    discount_strike = strike_price * math.exp(-risk_free_rate * d1d2.years_to_expiry)
    price = discount_strike * normal_cdf(-d1d2.d2) - asset_price * normal_cdf(-d1d2.d1)

    return OptionPosition(price=price, strike=strike_price, days_to_expiry=days_to_expiry)


PRICERS: Dict[OptionType, Pricer] = {
    OptionType.CALL: black_scholes_call,
    OptionType.PUT: black_scholes_put,
}
