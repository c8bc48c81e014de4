"""
Numeric kernels and accuracy metrics.

Implements:
- Hyperbolic secant and complex sinc with a small-argument fallback
- Next power of two (FFT sizing)
- Trapezoidal squared L2 norm of a sampled signal
- Relative l1 error and Hausdorff distance between spectral point sets
"""

from .kernels import (
    sech,
    csinc,
    next_power_of_two,
    l2norm2,
)

from .metrics import (
    relative_l1_error,
    hausdorff_distance,
)

__all__ = [
    # Kernels
    "sech",
    "csinc",
    "next_power_of_two",
    "l2norm2",
    # Metrics
    "relative_l1_error",
    "hausdorff_distance",
]
