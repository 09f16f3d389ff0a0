"""
Pytest configuration and shared fixtures.
"""

import pytest
import math
from scipy.stats import norm

from option_chain.core.engine import OptionChainCalculator
from option_chain.utils.types import ValueSpan


def reference_price(S, K, days, r, sigma, option_type="Call"):
    """Textbook Black-Scholes price computed independently of the engine."""
    T = days / 365.0
    d1 = (math.log(S / K) + (r + 0.5 * sigma * sigma) * T) / (sigma * math.sqrt(T))
    d2 = d1 - sigma * math.sqrt(T)
    if option_type == "Call":
        return S * norm.cdf(d1) - K * math.exp(-r * T) * norm.cdf(d2)
    return K * math.exp(-r * T) * norm.cdf(-d2) - S * norm.cdf(-d1)


@pytest.fixture
def market_params():
    """Standard volatility and rate for chain tests."""
    return {
        "volatility": 0.20,
        "risk_free_rate": 0.05,
    }


@pytest.fixture
def call_calculator(market_params):
    """Fresh call engine, 30 day nominal expiry."""
    return OptionChainCalculator("Call", expiry_in_days=30.0, **market_params)


@pytest.fixture
def put_calculator(market_params):
    """Fresh put engine, 30 day nominal expiry."""
    return OptionChainCalculator("Put", expiry_in_days=30.0, **market_params)


@pytest.fixture
def small_grid():
    """Three asset prices × five strikes × four expiries."""
    return {
        "asset_price_span": ValueSpan(95.0, 105.0, 5.0),
        "strike_price_span": ValueSpan(90.0, 110.0, 5.0),
        "days_to_expiry_span": ValueSpan(7.0, 28.0, 7.0),
    }


@pytest.fixture
def bs_reference():
    """Independent Black-Scholes reference pricer."""
    return reference_price
