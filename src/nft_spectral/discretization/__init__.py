"""
Discretization schemes and the spectral-parameter mapping.

Implements:
- The generic AKNS scheme table (degree, boundary coefficient)
- λ <-> z conversion z = exp(2i λ eps_t / degree)
- Per-family registries for the NSE and KdV schemes, which translate to
  the generic scheme and delegate to it

Main entry points:
- `NSE.degree(scheme)`, `KDV.boundary_coefficient(scheme)`
- `NSE.lambda_to_z(values, eps_t, scheme)` and the inverse `z_to_lambda`
"""

from .akns import (
    AKNSDiscretization,
    AKNS_TABLE,
    DiscretizationInfo,
)

from .registry import DiscretizationRegistry

from .nse import NSEDiscretization, NSE
from .kdv import KdVDiscretization, KDV

from . import akns, nse, kdv

__all__ = [
    # Generic table
    "AKNSDiscretization",
    "AKNS_TABLE",
    "DiscretizationInfo",
    "akns",
    # Registries
    "DiscretizationRegistry",
    "NSEDiscretization",
    "NSE",
    "nse",
    "KdVDiscretization",
    "KDV",
    "kdv",
]
