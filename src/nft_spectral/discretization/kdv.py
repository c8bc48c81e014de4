"""
Discretizations of the Korteweg-de Vries equation (KdV).

Every KdV scheme has an AKNS counterpart of the same name, so degree and
boundary coefficient come straight from the generic table.

Examples
--------
>>> degree("2SPLIT5B")
15
>>> degree(KdVDiscretization.BO)
0
"""

from enum import Enum

from .akns import AKNSDiscretization
from .registry import DiscretizationRegistry


class KdVDiscretization(Enum):
    """Discretization schemes offered for the KdV equation."""
    TWOSPLIT_1A = "2SPLIT1A"
    TWOSPLIT_1B = "2SPLIT1B"
    TWOSPLIT_2A = "2SPLIT2A"
    TWOSPLIT_2B = "2SPLIT2B"
    TWOSPLIT_2S = "2SPLIT2S"
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


KDV = DiscretizationRegistry(
    "kdv",
    KdVDiscretization,
    {scheme: AKNSDiscretization(scheme.value) for scheme in KdVDiscretization},
)
"""Registry for KdV schemes."""

degree = KDV.degree
boundary_coefficient = KDV.boundary_coefficient
to_akns_discretization = KDV.to_generic_descriptor
lambda_to_z = KDV.lambda_to_z
z_to_lambda = KDV.z_to_lambda
