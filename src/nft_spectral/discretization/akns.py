"""
Generic (AKNS-type) discretization taxonomy and the λ <-> z mapping.

Every equation-specific scheme (NSE, KdV) is translated into one of the
AKNSDiscretization members below before its degree or boundary
coefficient is looked up, so this table is the single source of both.

The discrete-time spectral parameter is

    z = exp(2i λ eps_t / d)

with d the polynomial degree of one scattering matrix. The inverse uses
the principal branch of the complex logarithm,

    λ = d log(z) / (2i eps_t),

so λ is only recovered modulo π d / eps_t unless z stays near the unit
circle on the expected branch.

Schemes without a fast (polynomial) scattering form have degree 0 and
cannot be mapped to z.
"""

from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType
from typing import Optional, Union
import math

import numpy as np

from ..config import DEFAULT_BOUNDARY_COEFF
from ..errors import InvalidArgumentError, UnsupportedDiscretizationError


class AKNSDiscretization(Enum):
    """Generic discretization schemes understood by the scattering layer."""
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


@dataclass(frozen=True)
class DiscretizationInfo:
    """
    Static properties of one generic scheme.

    Attributes
    ----------
    degree : int
        Polynomial degree (in z) of a single scattering matrix, or 0 if
        the scheme has no fast scattering form.
    boundary_coeff : float
        Fraction of one step by which the discretized potential extends
        past the last sample, or NaN if unsupported.
    """
    degree: int
    boundary_coeff: float

    @property
    def is_fast(self) -> bool:
        return self.degree > 0


def _info(degree: int, boundary_coeff: float = DEFAULT_BOUNDARY_COEFF) -> DiscretizationInfo:
    return DiscretizationInfo(degree=degree, boundary_coeff=boundary_coeff)


_A = AKNSDiscretization

AKNS_TABLE = MappingProxyType({
    # Second-order splittings
    _A.TWOSPLIT_1A: _info(1),
    _A.TWOSPLIT_1B: _info(1),
    _A.TWOSPLIT_2A: _info(1),
    _A.TWOSPLIT_2B: _info(1),
    _A.TWOSPLIT_2S: _info(1),
    _A.TWOSPLIT_2_MODAL: _info(1),
    _A.TWOSPLIT_3A: _info(2),
    _A.TWOSPLIT_3B: _info(2),
    _A.TWOSPLIT_3S: _info(2),
    _A.TWOSPLIT_4A: _info(4),
    _A.TWOSPLIT_4B: _info(2),
    _A.TWOSPLIT_5A: _info(15),
    _A.TWOSPLIT_5B: _info(15),
    _A.TWOSPLIT_6A: _info(12),
    _A.TWOSPLIT_6B: _info(4),
    _A.TWOSPLIT_7A: _info(6),
    _A.TWOSPLIT_7B: _info(6),
    _A.TWOSPLIT_8A: _info(12),
    _A.TWOSPLIT_8B: _info(12),
    # Fourth-order splittings
    _A.FOURSPLIT_4A: _info(12),
    _A.FOURSPLIT_4B: _info(4),
    # Non-polynomial (slow) schemes: no z-mapping
    _A.BO: _info(0),
    _A.CF4_2: _info(0),
    _A.CF4_3: _info(0),
    _A.CF5_3: _info(0),
    _A.CF6_4: _info(0),
    _A.ES4: _info(0),
    _A.TES4: _info(0),
})
"""Immutable table AKNSDiscretization -> DiscretizationInfo."""

assert set(AKNS_TABLE) == set(AKNSDiscretization), "Every scheme needs a table entry"


DiscretizationLike = Union[AKNSDiscretization, str]


def resolve(discretization: DiscretizationLike) -> AKNSDiscretization:
    """
    Turn an enum member or scheme name ("2SPLIT2A", "TWOSPLIT_2A") into a member.

    Raises
    ------
    InvalidArgumentError
        For anything that is not a known generic scheme.
    """
    if isinstance(discretization, AKNSDiscretization):
        return discretization
    if isinstance(discretization, str):
        key = discretization.strip().upper()
        try:
            return AKNSDiscretization(key)
        except ValueError:
            pass
        if key in AKNSDiscretization.__members__:
            return AKNSDiscretization[key]
    raise InvalidArgumentError(f"Unknown AKNS discretization: {discretization!r}")


def degree(discretization: DiscretizationLike) -> int:
    """Polynomial degree of one scattering matrix, 0 if not fast."""
    return AKNS_TABLE[resolve(discretization)].degree


def boundary_coefficient(discretization: DiscretizationLike) -> float:
    """Boundary coefficient, NaN if unsupported."""
    return AKNS_TABLE[resolve(discretization)].boundary_coeff


def _mapping_args(values, eps_t: float, discretization, n: Optional[int]):
    """Shared validation for the two mapping directions."""
    if values is None:
        raise InvalidArgumentError("values must not be None")
    if not isinstance(values, np.ndarray) or values.ndim != 1:
        raise InvalidArgumentError("values must be a 1-D numpy array")
    if not np.iscomplexobj(values):
        raise InvalidArgumentError(
            f"values must have a complex dtype to be mapped in place, got {values.dtype}"
        )
    if n is None:
        n = values.shape[0]
    n = int(n)
    if n < 0 or n > values.shape[0]:
        raise InvalidArgumentError(f"Length n={n} out of range [0, {values.shape[0]}]")
    eps_t = float(eps_t)
    if not (math.isfinite(eps_t) and eps_t > 0):
        raise InvalidArgumentError(f"eps_t must be finite and positive, got {eps_t}")

    scheme = resolve(discretization)
    d = AKNS_TABLE[scheme].degree
    if d == 0:
        raise UnsupportedDiscretizationError(
            f"Discretization {scheme.value} has no polynomial degree; "
            f"it cannot be mapped to the z-domain"
        )
    return n, eps_t, d


def lambda_to_z(
    values: np.ndarray,
    eps_t: float,
    discretization: DiscretizationLike,
    n: Optional[int] = None,
) -> np.ndarray:
    """
    Replace λ by z = exp(2i λ eps_t / degree) in place.

    Parameters
    ----------
    values : ndarray
        Complex continuous-time spectral parameters. Overwritten.
    eps_t : float
        Sampling step size, > 0.
    discretization : AKNSDiscretization or str
        The generic scheme that fixes the degree.
    n : int, optional
        Only the first n values are mapped. Default is all.

    Returns
    -------
    ndarray
        The same array, for chaining.

    Raises
    ------
    InvalidArgumentError
        Invalid buffer, length or step size, or unknown scheme.
    UnsupportedDiscretizationError
        The scheme has degree 0.
    """
    n, eps_t, d = _mapping_args(values, eps_t, discretization, n)
    values[:n] = np.exp(2j * values[:n] * eps_t / d)
    return values


def z_to_lambda(
    values: np.ndarray,
    eps_t: float,
    discretization: DiscretizationLike,
    n: Optional[int] = None,
) -> np.ndarray:
    """
    Replace z by λ = degree · log(z) / (2i eps_t) in place.

    The principal branch of log is used. z = 0 maps to a non-finite λ.

    Parameters and exceptions are as for lambda_to_z.
    """
    n, eps_t, d = _mapping_args(values, eps_t, discretization, n)
    with np.errstate(divide="ignore", invalid="ignore"):
        values[:n] = d * np.log(values[:n]) / (2j * eps_t)
    return values
