"""
Value span validation and expansion.

A span drives one dimension of the option chain grid. Spans are quoted
in quarter units, which are exactly representable in binary floating
point, so the grid values computed here compare bitwise-equal wherever
the same span produces them.

Step policy:
    - step == 0 is legal only for a single-point span (low == high)
    - step >= high - low is accepted and yields the points of the range
      that the step reaches (just low when step > high - low)
"""

import math
from typing import List, Tuple

from option_chain.utils.constants import SPAN_UNITS_PER_POINT
from option_chain.utils.exceptions import ValidationError
from option_chain.utils.types import ValueSpan


def _is_quarter_multiple(value: float) -> bool:
    scaled = value * SPAN_UNITS_PER_POINT
    return math.isfinite(scaled) and math.ceil(scaled) == math.floor(scaled)


def validate_span(name: str, span: ValueSpan) -> Tuple[float, float, float]:
    """
    Validate a value span before it drives a loop.

    Checks run in order and stop at the first failure.

    Args:
        name: Span name used to prefix error messages
        span: Span to validate

    Returns:
        The (low, high, step) triple, unchanged

    Raises:
        ValidationError: If a bound is negative, low > high, the step is
            negative or zero on a multi-point span, or any value is not a
            multiple of 0.25
    """
    low, high, step = span.low, span.high, span.step

    if low < 0 or high < 0:
        raise ValidationError(name, f"range cannot be negative, got low={low}, high={high}")
    if low > high:
        raise ValidationError(name, f"low greater than high, got low={low}, high={high}")
    if step < 0 or (step == 0 and high > low):
        raise ValidationError(name, f"step must be positive, got step={step}")
    for value in (low, high, step):
        if not _is_quarter_multiple(value):
            raise ValidationError(
                name, f"low, high, step must be a multiple of 0.25, got {value}"
            )

    return low, high, step


def span_point_count(low: float, high: float, step: float) -> int:
    """
    Number of grid points in a validated span.

    Returns:
        floor((high - low) / step) + 1, or 1 for a zero step
    """
    if step == 0:
        return 1
    return int(math.floor((high - low) / step)) + 1


def span_values(low: float, high: float, step: float, descending: bool = False) -> List[float]:
    """
    Expand a validated span into its grid values.

    Values are computed from an integer point count rather than by
    repeated addition, so long spans never gain or lose a point to
    accumulated rounding.

    Args:
        low, high, step: Validated span bounds
        descending: If True, start at high and walk down towards low

    Returns:
        Grid values, ascending from low or descending from high
    """
    count = span_point_count(low, high, step)
    if descending:
        return [high - i * step for i in range(count)]
    return [low + i * step for i in range(count)]


def skip_zero_expiry(low: float, high: float, step: float) -> float:
    """
    Lower bound of a validated days-to-expiry span with expiry itself removed.

    A span starting at 0 starts one step later.

    Raises:
        ValidationError: If no positive days-to-expiry remain
    """
    if low != 0.0:
        return low
    low += step
    if low == 0.0 or low > high:
        raise ValidationError(
            "daysToExpirySpan",
            f"no positive days to expiry in range, got low=0, high={high}, step={step}",
        )
    return low
