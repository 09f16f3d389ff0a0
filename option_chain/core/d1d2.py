"""
Black-Scholes d1/d2 calculators specialized per days-to-expiry.

The drift (r + σ²/2)T and the volatility adjustment σ√T depend only on
the days-to-expiry once volatility and rate are fixed, so a chain builds
one calculator per distinct expiry and reuses it for every
(asset price, strike price) pair sharing that expiry.
"""

import math
from dataclasses import dataclass

from option_chain.utils.constants import DAYS_PER_YEAR
from option_chain.utils.exceptions import DegenerateInputError, NumericDomainError
from option_chain.utils.types import D1D2Calculation


@dataclass(frozen=True)
class D1D2Calculator:
    """
    Precomputed expiry-dependent terms of d1 and d2.

    Attributes:
        days_to_expiry: Expiry this calculator was built for
        years_to_expiry: T = days_to_expiry / 365
        drift: (r + σ²/2)·T
        vol_adjustment: σ·√T, never zero
    """
    days_to_expiry: float
    years_to_expiry: float
    drift: float
    vol_adjustment: float

    @classmethod
    def for_expiry(
        cls, days_to_expiry: float, volatility: float, risk_free_rate: float
    ) -> "D1D2Calculator":
        """
        Build the calculator for one days-to-expiry value.

        Args:
            days_to_expiry: Days until expiration
            volatility: Annualized volatility σ
            risk_free_rate: Annualized continuously compounded rate r

        Returns:
            Calculator holding T, the drift and σ√T

        Raises:
            DegenerateInputError: If σ√T is zero (zero volatility or zero
                time to expiry), in which case d1 is undefined
            NumericDomainError: If days_to_expiry is negative
        """
        if days_to_expiry < 0:
            raise NumericDomainError(
                f"days to expiry cannot be negative, got days={days_to_expiry}"
            )

        years_to_expiry = days_to_expiry / DAYS_PER_YEAR
        sqrt_T = math.sqrt(years_to_expiry)
        drift = (risk_free_rate + (volatility * volatility) / 2.0) * years_to_expiry
        vol_adjustment = volatility * sqrt_T

        if vol_adjustment == 0.0:
            raise DegenerateInputError(
                f"volatility adjustment σ√T is zero, got r={risk_free_rate}, "
                f"sigma={volatility}, days={days_to_expiry}, years={years_to_expiry}"
            )

        return cls(
            days_to_expiry=days_to_expiry,
            years_to_expiry=years_to_expiry,
            drift=drift,
            vol_adjustment=vol_adjustment,
        )

    def evaluate(self, asset_price: float, strike_price: float) -> D1D2Calculation:
        """
        Calculate d1 and d2 for one (asset price, strike price) pair.

        Formula:
            d1 = [ln(S/K) + drift] / σ√T
            d2 = d1 - σ√T

        Raises:
            NumericDomainError: If S or K is not positive, or d1/d2 is NaN
        """
        if not (asset_price > 0 and strike_price > 0):
            raise NumericDomainError(
                f"log moneyness undefined, got asset={asset_price}, strike={strike_price}"
            )

        log_moneyness = math.log(asset_price / strike_price)
        d1 = (log_moneyness + self.drift) / self.vol_adjustment
        d2 = d1 - self.vol_adjustment

        if math.isnan(d1) or math.isnan(d2):
            raise NumericDomainError(
                f"d1 or d2 is NaN, got d1={d1}, d2={d2}, asset={asset_price}, "
                f"strike={strike_price}, vol_adjustment={self.vol_adjustment}"
            )

        return D1D2Calculation(d1=d1, d2=d2, years_to_expiry=self.years_to_expiry)
