"""
Standard normal distribution with numerical safeguards.

This module provides the standard normal cumulative distribution
function used by the Black-Scholes pricers, expressed through the
error function and clamped in the far tails.
"""

import math
from scipy.special import erf

from option_chain.utils.constants import MAX_STANDARD_DEVIATIONS

_SQRT_2 = math.sqrt(2.0)


def normal_cdf(x: float) -> float:
    """
    Standard normal cumulative distribution function with bounds clamping.

    For |x| > 8, the CDF differs from 0 or 1 by less than 1e-15, so the
    value is clamped to prevent underflow. Infinite arguments therefore
    map to exactly 0 or 1.

    Args:
        x: Value at which to evaluate the CDF

    Returns:
        Probability that a standard normal random variable is less than x

    Formula:
        N(x) = ½ · [1 + erf(x / √2)]

    Examples:
        >>> normal_cdf(0.0)  # Median
        0.5
        >>> abs(normal_cdf(1.96) - 0.975) < 1e-3  # ~97.5th percentile
        True
        >>> normal_cdf(10.0)  # Deep in tail
        1.0
    """
    if x > MAX_STANDARD_DEVIATIONS:
        return 1.0
    if x < -MAX_STANDARD_DEVIATIONS:
        return 0.0

    return 0.5 * (1.0 + float(erf(x / _SQRT_2)))
