"""
Accuracy metrics for comparing computed spectral data with references.

These are used by automated correctness tests. Degenerate inputs (an
all-zero reference vector, an empty point set) are the caller's
responsibility and are not checked here.
"""

import numpy as np
from typing import Optional
from scipy.spatial.distance import cdist

from ..errors import InvalidArgumentError


def relative_l1_error(
    numerical: np.ndarray,
    exact: np.ndarray,
    n: Optional[int] = None,
) -> float:
    """
    Relative l1 error Σ|numerical_i - exact_i| / Σ|exact_i|.

    Parameters
    ----------
    numerical : ndarray
        Computed values.
    exact : ndarray
        Reference values.
    n : int, optional
        Only the first n entries are compared. Default is len(exact).

    Returns
    -------
    float
        The relative error. Non-finite if Σ|exact_i| == 0.

    Raises
    ------
    InvalidArgumentError
        If n is negative or exceeds the length of either array.
    """
    numerical = np.asarray(numerical)
    exact = np.asarray(exact)
    available = min(numerical.shape[0], exact.shape[0])
    if n is None:
        n = exact.shape[0]
    n = int(n)
    if n < 0 or n > available:
        raise InvalidArgumentError(
            f"Length n={n} out of range [0, {available}]"
        )

    num = np.sum(np.abs(numerical[:n] - exact[:n]))
    den = np.sum(np.abs(exact[:n]))
    with np.errstate(divide="ignore", invalid="ignore"):
        return float(np.float64(num) / np.float64(den))


def _as_points(values: np.ndarray) -> np.ndarray:
    """Complex vector -> (N, 2) array of (Re, Im) rows."""
    z = np.asarray(values, dtype=complex).ravel()
    return np.column_stack((z.real, z.imag))


def hausdorff_distance(a: np.ndarray, b: np.ndarray) -> float:
    """
    Two-sided Hausdorff distance between two sets of complex numbers.

        d_H(A, B) = max( max_{a∈A} min_{b∈B} |a - b|,
                         max_{b∈B} min_{a∈A} |a - b| )

    The full |A| x |B| distance matrix is formed, which is fine for
    spectral sets of tens to a few hundred points. Neither set may be
    empty; the result is undefined in that case.

    Points with NaN coordinates are never anybody's nearest neighbor, so
    a set containing one yields inf.

    Parameters
    ----------
    a, b : ndarray
        Complex point sets, in any order. Lengths may differ.

    Returns
    -------
    float
        The Hausdorff distance (>= 0).

    Examples
    --------
    >>> hausdorff_distance([0j, 1j], [0j])
    1.0
    """
    dist = cdist(_as_points(a), _as_points(b))
    # NaN distances never win a minimum; a point with no finite distance is inf away
    dist[np.isnan(dist)] = np.inf
    a_to_b = dist.min(axis=1).max()
    b_to_a = dist.min(axis=0).max()
    return float(max(a_to_b, b_to_a))
