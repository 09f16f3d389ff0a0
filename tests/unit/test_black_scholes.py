"""
Unit tests for the Black-Scholes chain pricers.

This module validates:
1. Known analytical solutions from textbooks
2. Put-call parity relationship
3. Strike and expiry echoing into positions
4. Monotonicity properties
"""

import pytest
import math
from option_chain.core.black_scholes import PRICERS, black_scholes_call, black_scholes_put
from option_chain.core.d1d2 import D1D2Calculator
from option_chain.utils.types import OptionType


def _price(pricer, S, K, days, r=0.05, sigma=0.20):
    d1d2 = D1D2Calculator.for_expiry(days, sigma, r).evaluate(S, K)
    return pricer(S, K, days, r, d1d2)


# ===========================
# Known Solutions Tests
# ===========================


def test_atm_call_known_solution():
    """
    Hull: S=100, K=100, T=1, r=5%, σ=20% → Call ≈ 10.4506
    """
    position = _price(black_scholes_call, 100.0, 100.0, 365.0)
    assert abs(position.price - 10.4506) < 0.01, f"Expected ~10.4506, got {position.price}"


def test_atm_put_known_solution():
    """
    S=100, K=100, T=1, r=5%, σ=20% → Put ≈ 5.5735
    """
    position = _price(black_scholes_put, 100.0, 100.0, 365.0)
    assert abs(position.price - 5.5735) < 0.01, f"Expected ~5.5735, got {position.price}"


@pytest.mark.parametrize("S,K,days", [(100, 100, 30), (110, 100, 90), (90, 105, 7.25)])
def test_matches_reference(bs_reference, S, K, days):
    for option_type, pricer in PRICERS.items():
        position = _price(pricer, S, K, days)
        expected = bs_reference(S, K, days, 0.05, 0.20, option_type.value)
        assert abs(position.price - expected) < 1e-9


# ===========================
# Put-Call Parity Tests
# ===========================


@pytest.mark.parametrize(
    "S,K,days,r,sigma",
    [
        (100, 100, 365.0, 0.05, 0.20),  # ATM
        (110, 100, 365.0, 0.05, 0.20),  # ITM call
        (90, 100, 365.0, 0.05, 0.20),  # OTM call
        (100, 100, 91.25, 0.05, 0.30),  # High vol, short expiry
        (100, 100, 730.0, 0.03, 0.15),  # Long expiry
    ],
)
def test_put_call_parity(S, K, days, r, sigma):
    """C - P = S - K·e^(-rT)"""
    d1d2 = D1D2Calculator.for_expiry(days, sigma, r).evaluate(S, K)

    call = black_scholes_call(S, K, days, r, d1d2).price
    put = black_scholes_put(S, K, days, r, d1d2).price

    rhs = S - K * math.exp(-r * days / 365.0)
    assert abs((call - put) - rhs) < 1e-9


# ===========================
# Position Tests
# ===========================


def test_position_echoes_strike_and_days():
    position = _price(black_scholes_put, 101.25, 97.5, 14.5)
    assert position.strike == 97.5
    assert position.days_to_expiry == 14.5


def test_pricer_per_option_type():
    assert PRICERS[OptionType.CALL] is black_scholes_call
    assert PRICERS[OptionType.PUT] is black_scholes_put
    assert set(PRICERS) == set(OptionType)


def test_deep_otm_call_near_zero():
    assert _price(black_scholes_call, 50.0, 100.0, 30.0).price < 1e-9


def test_deep_itm_put_near_intrinsic():
    position = _price(black_scholes_put, 50.0, 100.0, 30.0)
    intrinsic = 100.0 * math.exp(-0.05 * 30.0 / 365.0) - 50.0
    assert abs(position.price - intrinsic) < 1e-6


# ===========================
# Monotonicity Tests
# ===========================


def test_call_price_increases_with_spot():
    assert _price(black_scholes_call, 105, 100, 90).price > _price(black_scholes_call, 100, 100, 90).price


def test_call_price_decreases_with_strike():
    assert _price(black_scholes_call, 100, 105, 90).price < _price(black_scholes_call, 100, 100, 90).price


def test_call_price_increases_with_time():
    assert _price(black_scholes_call, 100, 100, 365).price > _price(black_scholes_call, 100, 100, 180).price


def test_put_price_increases_with_strike():
    assert _price(black_scholes_put, 100, 105, 90).price > _price(black_scholes_put, 100, 100, 90).price
