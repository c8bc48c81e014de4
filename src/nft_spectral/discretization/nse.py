"""
Discretizations of the nonlinear Schrödinger equation (NSE).

Every NSE scheme has an AKNS counterpart of the same name, so degree and
boundary coefficient come straight from the generic table.

Examples
--------
>>> degree(NSEDiscretization.TWOSPLIT_3A)
2
>>> to_akns_discretization("2SPLIT2_MODAL")
<AKNSDiscretization.TWOSPLIT_2_MODAL: '2SPLIT2_MODAL'>
"""

from enum import Enum

from .akns import AKNSDiscretization
from .registry import DiscretizationRegistry


class NSEDiscretization(Enum):
    """Discretization schemes offered for the NSE."""
    TWOSPLIT_1A = "2SPLIT1A"
    TWOSPLIT_1B = "2SPLIT1B"
    TWOSPLIT_2A = "2SPLIT2A"
    TWOSPLIT_2B = "2SPLIT2B"
    TWOSPLIT_2S = "2SPLIT2S"
    TWOSPLIT_2_MODAL = "2SPLIT2_MODAL"
    TWOSPLIT_3A = "2SPLIT3A"
    TWOSPLIT_3B = "2SPLIT3B"
    TWOSPLIT_3S = "2SPLIT3S"
    TWOSPLIT_4A = "2SPLIT4A"
    TWOSPLIT_4B = "2SPLIT4B"
    TWOSPLIT_5A = "2SPLIT5A"
    TWOSPLIT_5B = "2SPLIT5B"
    TWOSPLIT_6A = "2SPLIT6A"
    TWOSPLIT_6B = "2SPLIT6B"
    TWOSPLIT_7A = "2SPLIT7A"
    TWOSPLIT_7B = "2SPLIT7B"
    TWOSPLIT_8A = "2SPLIT8A"
    TWOSPLIT_8B = "2SPLIT8B"
    FOURSPLIT_4A = "4SPLIT4A"
    FOURSPLIT_4B = "4SPLIT4B"
    BO = "BO"
    CF4_2 = "CF4_2"
    CF4_3 = "CF4_3"
    CF5_3 = "CF5_3"
    CF6_4 = "CF6_4"
    ES4 = "ES4"
    TES4 = "TES4"


NSE = DiscretizationRegistry(
    "nse",
    NSEDiscretization,
    {scheme: AKNSDiscretization(scheme.value) for scheme in NSEDiscretization},
)
"""Registry for NSE schemes."""

degree = NSE.degree
boundary_coefficient = NSE.boundary_coefficient
to_akns_discretization = NSE.to_generic_descriptor
lambda_to_z = NSE.lambda_to_z
z_to_lambda = NSE.z_to_lambda
