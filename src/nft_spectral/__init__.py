"""
nft_spectral: discretization bookkeeping and spectral post-processing
for nonlinear Fourier transforms.

Provides the λ <-> z mapping and scheme properties for NSE and KdV
discretizations, and the array toolbox (filtering, merging,
downsampling, accuracy metrics) applied to spectral data.
"""

from . import config
from . import errors
from . import numerics
from . import arrays
from . import discretization

__version__ = "0.1.0"
__all__ = ["config", "errors", "numerics", "arrays", "discretization"]
