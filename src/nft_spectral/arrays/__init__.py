"""
Spectral array toolbox.

Implements:
- In-place, order-preserving filters over complex arrays (bounding box
  inclusion/exclusion, near-real-axis rejection)
- Greedy merging of near-duplicate values
- Uniform-stride downsampling of long signals
- A MATLAB-style diagnostic printer

The filters are the post-processing stage applied to raw candidate
spectral values after root-finding.
"""

from .filters import (
    BoundingBox,
    DEFAULT_BOX,
    SpectralArray,
    filter_inside,
    filter_outside,
    filter_reject_near_real_axis,
    merge_close,
)

from .downsample import (
    DownsampledSignal,
    downsample,
)

from .debug import (
    format_buf,
    print_buf,
)

__all__ = [
    # Filters
    "BoundingBox",
    "DEFAULT_BOX",
    "SpectralArray",
    "filter_inside",
    "filter_outside",
    "filter_reject_near_real_axis",
    "merge_close",
    # Downsampling
    "DownsampledSignal",
    "downsample",
    # Debugging
    "format_buf",
    "print_buf",
]
