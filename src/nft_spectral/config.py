"""
Global configuration and numerical constants for nft_spectral.

These are the fixed design constants shared by the kernels, the array
toolbox and the discretization registry.
"""

from typing import Tuple
import math


# =============================================================================
# Numeric Kernels
# =============================================================================

SINC_THRESHOLD = 1e-8
"""Below this |x|, sinc(x) is evaluated as cos(x/√3) instead of sin(x)/x."""

MPMATH_PRECISION = 50
"""Number of decimal digits used when kernels are called with mpmath values."""


# =============================================================================
# Discretization Defaults
# =============================================================================

DEFAULT_BOUNDARY_COEFF = 0.5
"""Boundary coefficient shared by all supported splitting schemes (half a step)."""


# =============================================================================
# Filtering Defaults
# =============================================================================

DEFAULT_BOUNDING_BOX: Tuple[float, float, float, float] = (
    -math.inf, math.inf, 0.0, math.inf
)
"""(re_min, re_max, im_min, im_max): the closed upper half-plane."""

DEFAULT_NONREAL_TOLERANCE = 0.0
"""Default |Im| threshold for filter_reject_near_real_axis."""

DEFAULT_MERGE_TOLERANCE = 0.0
"""Default distance threshold for merge_close (no merging)."""


# =============================================================================
# Downsampling
# =============================================================================

MIN_SIGNAL_LENGTH = 3
"""Shortest signal that can be downsampled."""

MIN_DOWNSAMPLED_LENGTH = 2
"""Requested subsample counts are clamped to at least this value."""


# =============================================================================
# Utility Functions
# =============================================================================

def round_half_away(x: float) -> int:
    """
    Round a non-negative real to the nearest integer, ties away from zero.

    Python's built-in round() uses banker's rounding (round(2.5) == 2),
    which would change the downsampling stride for even ratios.

    Examples
    --------
    >>> round_half_away(2.5)
    3
    >>> round_half_away(1.49)
    1
    """
    if x < 0:
        return -int(math.floor(-x + 0.5))
    return int(math.floor(x + 0.5))


assert round_half_away(2.5) == 3, "Ties must round away from zero"
