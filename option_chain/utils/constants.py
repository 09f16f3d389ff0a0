"""
Numerical constants and limits for option chain pricing.

This module defines the calendar convention, the quarter-unit grid
convention for spans, and the bounds applied by the request layer.
"""

# Calendar convention
DAYS_PER_YEAR = 365.0  # Days-to-expiry are converted with an ACT/365 year

# Span grid convention
SPAN_UNITS_PER_POINT = 4.0  # Low, high, step are quoted in 0.25 units

# Normal distribution bounds
MAX_STANDARD_DEVIATIONS = 8.0  # Beyond ±8σ, CDF is effectively 0 or 1

# Request limits
MAX_GRID_POINTS = 1_000_000  # Largest asset × strike × days grid accepted
PRICE_DECIMALS = 2  # Presentation rounding for prices

# Diagnostics tolerances
PARITY_TOLERANCE = 1e-9  # Put-call parity tolerance on the grid
