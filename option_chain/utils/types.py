"""
Data types and structures for option chain pricing.

This module defines the dataclasses and type aliases shared by the
span validator, the d1/d2 cache, the pricers and the chain assembler.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, NamedTuple, Union

from option_chain.utils.exceptions import ConfigurationError


class OptionType(str, Enum):
    """
    Option type selecting the pricing strategy of an engine.

    The value is the name used on the wire ("Call" or "Put").
    """

    CALL = "Call"
    PUT = "Put"

    @classmethod
    def parse(cls, value: Union["OptionType", str]) -> "OptionType":
        """
        Resolve an option type from a member or its name.

        Names are matched case-insensitively, so "call", "Call" and "CALL"
        all select OptionType.CALL.

        Raises:
            ConfigurationError: If value names no option type
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            for member in cls:
                if value.strip().lower() == member.value.lower():
                    return member
        raise ConfigurationError(value)


@dataclass(frozen=True)
class ValueSpan:
    """
    Inclusive numeric range iterated with a fixed increment.

    Attributes:
        low: First value of the range
        high: Last value of the range (inclusive)
        step: Increment between consecutive values
    """
    low: float
    high: float
    step: float


@dataclass(frozen=True)
class D1D2Calculation:
    """
    Black-Scholes intermediate terms for one grid point.

    Attributes:
        d1: [ln(S/K) + (r + σ²/2)T] / (σ√T)
        d2: d1 - σ√T
        years_to_expiry: T, the days-to-expiry expressed in years
    """
    d1: float
    d2: float
    years_to_expiry: float


class PriceKey(NamedTuple):
    """Exact (asset, strike, days) triple keying the d1/d2 value cache."""

    asset_price: float
    strike_price: float
    days_to_expiry: float


@dataclass(frozen=True)
class OptionPosition:
    """
    Price of one option at one grid point.

    Attributes:
        price: Theoretical Black-Scholes price
        strike: Strike price the option was priced at
        days_to_expiry: Days-to-expiry the option was priced at
    """
    price: float
    strike: float
    days_to_expiry: float


# Asset price (ascending) → strike price (ascending) → days-to-expiry (descending)
OptionChain = List[List[List[OptionPosition]]]
