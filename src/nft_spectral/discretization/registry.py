"""
Discretization registry for one family of evolution equations.

A registry is a pure lookup from a family-specific scheme enum (NSE, KdV)
to the generic AKNS scheme used by the scattering layer. Degree and
boundary coefficient are never stored per family: they are read from
the AKNS table after translation, and the λ <-> z maps delegate to
akns.lambda_to_z / akns.z_to_lambda.

Adding a scheme means adding one enum member and one entry in the
family's mapping.
"""

from enum import Enum
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Type, Union

import numpy as np

from . import akns
from .akns import AKNSDiscretization, AKNS_TABLE, DiscretizationInfo
from ..errors import InvalidArgumentError, UnsupportedDiscretizationError


class DiscretizationRegistry:
    """
    Lookup table for the schemes of one equation family.

    Parameters
    ----------
    family : str
        Short family name used in error messages, e.g. "nse".
    schemes : Enum subclass
        The family's scheme identifiers. Member values are scheme names.
    to_akns : mapping
        Scheme -> AKNSDiscretization. A scheme may map to None if it has
        no generic counterpart.

    Examples
    --------
    >>> from nft_spectral.discretization.nse import NSE
    >>> NSE.degree("2SPLIT4A")
    4
    """

    def __init__(
        self,
        family: str,
        schemes: Type[Enum],
        to_akns: Mapping[Enum, Optional[AKNSDiscretization]],
    ):
        missing = [s for s in schemes if s not in to_akns]
        if missing:
            raise ValueError(
                f"{family}: schemes without an AKNS mapping entry: {missing}"
            )
        self.family = family
        self.schemes = schemes
        self._to_akns = MappingProxyType(dict(to_akns))

    def __repr__(self) -> str:
        return f"DiscretizationRegistry({self.family!r}, {len(self._to_akns)} schemes)"

    def __contains__(self, discretization) -> bool:
        try:
            self.resolve(discretization)
        except InvalidArgumentError:
            return False
        return True

    def resolve(self, discretization: Union[Enum, str]) -> Enum:
        """
        Turn an enum member or scheme name into a member of this family.

        Both the value ("2SPLIT2A") and the member name ("TWOSPLIT_2A")
        are accepted, case-insensitively.

        Raises
        ------
        InvalidArgumentError
            For unknown names, members of another family, or None.
        """
        if isinstance(discretization, self.schemes):
            return discretization
        if isinstance(discretization, str):
            key = discretization.strip().upper()
            for scheme in self.schemes:
                if scheme.value == key or scheme.name == key:
                    return scheme
        raise InvalidArgumentError(
            f"Unknown {self.family} discretization: {discretization!r}"
        )

    def list_schemes(self) -> List[Enum]:
        """All schemes of this family, in declaration order."""
        return list(self.schemes)

    def _generic(self, discretization) -> Optional[AKNSDiscretization]:
        return self._to_akns[self.resolve(discretization)]

    def to_generic_descriptor(self, discretization) -> AKNSDiscretization:
        """
        The equivalent AKNS scheme.

        Raises
        ------
        InvalidArgumentError
            Unknown scheme.
        UnsupportedDiscretizationError
            The scheme has no AKNS counterpart.
        """
        scheme = self.resolve(discretization)
        generic = self._to_akns[scheme]
        if generic is None:
            raise UnsupportedDiscretizationError(
                f"{self.family} discretization {scheme.value} has no AKNS equivalent"
            )
        return generic

    def info(self, discretization) -> DiscretizationInfo:
        """Degree and boundary coefficient; sentinels if there is no AKNS scheme."""
        generic = self._generic(discretization)
        if generic is None:
            return DiscretizationInfo(degree=0, boundary_coeff=float("nan"))
        return AKNS_TABLE[generic]

    def degree(self, discretization) -> int:
        """Polynomial degree of one scattering matrix, or 0 if not supported."""
        return self.info(discretization).degree

    def boundary_coefficient(self, discretization) -> float:
        """Boundary coefficient, or NaN if not supported."""
        return self.info(discretization).boundary_coeff

    def lambda_to_z(
        self,
        values: np.ndarray,
        eps_t: float,
        discretization,
        n: Optional[int] = None,
    ) -> np.ndarray:
        """In place λ -> z = exp(2i λ eps_t / degree). See akns.lambda_to_z."""
        generic = self.to_generic_descriptor(discretization)
        return akns.lambda_to_z(values, eps_t, generic, n)

    def z_to_lambda(
        self,
        values: np.ndarray,
        eps_t: float,
        discretization,
        n: Optional[int] = None,
    ) -> np.ndarray:
        """In place z -> λ = degree log(z) / (2i eps_t). See akns.z_to_lambda."""
        generic = self.to_generic_descriptor(discretization)
        return akns.z_to_lambda(values, eps_t, generic, n)

    def table(self) -> Dict[str, dict]:
        """
        Summary of every scheme, keyed by scheme name.

        Returns
        -------
        dict
            name -> {'akns', 'degree', 'boundary_coeff'}
        """
        rows = {}
        for scheme in self.schemes:
            generic = self._to_akns[scheme]
            info = self.info(scheme)
            rows[scheme.value] = {
                "akns": generic.value if generic is not None else None,
                "degree": info.degree,
                "boundary_coeff": info.boundary_coeff,
            }
        return rows
