"""
In-place filtering of complex spectral arrays.

Every filter here follows the same contract: the first n entries of a
caller-owned 1-D array are scanned front to back, survivors are packed
into a dense prefix in their original relative order, and the number of
survivors is returned. Nothing is reallocated. Entries past the returned
length are left in an unspecified state.

An optional companion array is permuted in lock-step, so that index i of
the companion still belongs to index i of the primary array afterwards.

All arguments are validated before anything is written, so a raised
InvalidArgumentError leaves both arrays untouched.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

import numpy as np

from ..config import (
    DEFAULT_BOUNDING_BOX,
    DEFAULT_MERGE_TOLERANCE,
    DEFAULT_NONREAL_TOLERANCE,
)
from ..errors import InvalidArgumentError


@dataclass(frozen=True)
class BoundingBox:
    """
    Axis-aligned rectangle in the complex plane.

    Attributes
    ----------
    re_min, re_max : float
        Bounds on the real part.
    im_min, im_max : float
        Bounds on the imaginary part.

    Bounds may be infinite. A box with re_min > re_max, im_min > im_max
    or a NaN bound is malformed and rejected by the filters.
    """
    re_min: float
    re_max: float
    im_min: float
    im_max: float

    @classmethod
    def from_sequence(cls, bounds: Sequence[float]) -> "BoundingBox":
        """Build from (re_min, re_max, im_min, im_max)."""
        if bounds is None or len(bounds) != 4:
            raise InvalidArgumentError(
                f"Bounding box needs exactly 4 bounds, got {bounds!r}"
            )
        return cls(*(float(b) for b in bounds))

    def is_valid(self) -> bool:
        """True if both intervals are ordered (NaN bounds are invalid)."""
        # Written as positive comparisons so that NaN fails
        return self.re_min <= self.re_max and self.im_min <= self.im_max

    def as_tuple(self) -> tuple:
        return (self.re_min, self.re_max, self.im_min, self.im_max)


DEFAULT_BOX = BoundingBox(*DEFAULT_BOUNDING_BOX)
"""The closed upper half-plane."""


# =============================================================================
# Validation
# =============================================================================

def _check_buffer(values, name: str = "values") -> None:
    if values is None:
        raise InvalidArgumentError(f"{name} must not be None")
    if not isinstance(values, np.ndarray):
        raise InvalidArgumentError(
            f"{name} must be a numpy array to be filtered in place, "
            f"got {type(values).__name__}"
        )
    if values.ndim != 1:
        raise InvalidArgumentError(f"{name} must be 1-D, got shape {values.shape}")


def _check_length(values: np.ndarray, n: Optional[int]) -> int:
    if n is None:
        return values.shape[0]
    n = int(n)
    if n < 0 or n > values.shape[0]:
        raise InvalidArgumentError(
            f"Length n={n} out of range [0, {values.shape[0]}]"
        )
    return n


def _check_companion(companion: Optional[np.ndarray], n: int) -> None:
    if companion is None:
        return
    _check_buffer(companion, "companion")
    if companion.shape[0] < n:
        raise InvalidArgumentError(
            f"Companion array has {companion.shape[0]} entries, need at least {n}"
        )


def _check_box(box) -> BoundingBox:
    if box is None:
        raise InvalidArgumentError("Bounding box must not be None")
    if not isinstance(box, BoundingBox):
        box = BoundingBox.from_sequence(box)
    if not box.is_valid():
        raise InvalidArgumentError(f"Malformed bounding box: {box.as_tuple()}")
    return box


def _check_tolerance(tol: float, name: str) -> float:
    tol = float(tol)
    if not tol >= 0:
        raise InvalidArgumentError(f"{name} must be non-negative, got {tol}")
    return tol


# =============================================================================
# Shared compaction
# =============================================================================

def _retain_if(
    values: np.ndarray,
    n: int,
    keep: Callable[[np.ndarray], np.ndarray],
    companion: Optional[np.ndarray] = None,
    label: str = "filter",
    verbose: bool = False,
) -> int:
    """
    Pack the entries of values[:n] selected by keep() into values[:k].

    keep receives the live prefix values[:n] and returns a boolean mask
    of the same length. Survivors keep their relative order; companion
    entries move with their primary entries.

    Returns
    -------
    int
        k, the number of survivors.
    """
    mask = np.asarray(keep(values[:n]), dtype=bool)
    kept = int(np.count_nonzero(mask))

    # Fancy indexing copies before assignment, so overlapping is safe
    values[:kept] = values[:n][mask]
    if companion is not None:
        companion[:kept] = companion[:n][mask]

    if verbose:
        print(f"  {label}: kept {kept}/{n} values")
    return kept


# =============================================================================
# Public filters
# =============================================================================

def filter_inside(
    values: np.ndarray,
    box=DEFAULT_BOX,
    companion: Optional[np.ndarray] = None,
    n: Optional[int] = None,
    verbose: bool = False,
) -> int:
    """
    Keep only values inside a closed bounding box.

    A value survives if re_min <= Re <= re_max and im_min <= Im <= im_max.
    Every comparison with NaN is false, so NaN entries are always dropped.

    Parameters
    ----------
    values : ndarray
        Complex array, filtered in place.
    box : BoundingBox or sequence of 4 floats
        (re_min, re_max, im_min, im_max). Default is the upper half-plane.
    companion : ndarray, optional
        Rearranged together with values.
    n : int, optional
        Number of live entries. Default is len(values).
    verbose : bool
        Print a one-line summary.

    Returns
    -------
    int
        Number of surviving values, now stored in values[:k].

    Raises
    ------
    InvalidArgumentError
        If values is None or not a 1-D array, n is out of range, the
        companion is too short, or the box is malformed.

    Examples
    --------
    >>> v = np.array([0j, 5 + 5j, -1 - 1j])
    >>> filter_inside(v, (-2, 2, -2, 2))
    2
    """
    _check_buffer(values)
    n = _check_length(values, n)
    _check_companion(companion, n)
    box = _check_box(box)

    def keep(v):
        re, im = v.real, v.imag
        return (
            (re >= box.re_min) & (re <= box.re_max)
            & (im >= box.im_min) & (im <= box.im_max)
        )

    return _retain_if(values, n, keep, companion, "filter_inside", verbose)


def filter_outside(
    values: np.ndarray,
    box=DEFAULT_BOX,
    companion: Optional[np.ndarray] = None,
    n: Optional[int] = None,
    verbose: bool = False,
) -> int:
    """
    Keep only values outside the open interior of a bounding box.

    A value survives if at least one of Re > re_min, Re < re_max,
    Im > im_min, Im < im_max fails. Each axis is tested on its own, so a
    NaN coordinate counts as "outside" and the value is kept.

    This is not the negation of filter_inside: points on the boundary are
    kept by both, and so is a value with one NaN coordinate and the other
    coordinate outside the box.

    Parameters and return value are as for filter_inside.
    """
    _check_buffer(values)
    n = _check_length(values, n)
    _check_companion(companion, n)
    box = _check_box(box)

    def keep(v):
        re, im = v.real, v.imag
        return (
            ~(re > box.re_min) | ~(re < box.re_max)
            | ~(im > box.im_min) | ~(im < box.im_max)
        )

    return _retain_if(values, n, keep, companion, "filter_outside", verbose)


def filter_reject_near_real_axis(
    values: np.ndarray,
    tol_im: float = DEFAULT_NONREAL_TOLERANCE,
    companion: Optional[np.ndarray] = None,
    n: Optional[int] = None,
    verbose: bool = False,
) -> int:
    """
    Discard values whose imaginary part is within tol_im of zero.

    Only values with |Im| > tol_im (strictly) survive. Used to drop
    spurious near-real roots below the numerical noise floor.

    Parameters
    ----------
    values : ndarray
        Complex array, filtered in place.
    tol_im : float
        Non-negative tolerance.
    companion, n, verbose
        As for filter_inside.

    Returns
    -------
    int
        Number of surviving values.

    Raises
    ------
    InvalidArgumentError
        If tol_im is negative or NaN, or the buffers are invalid.
    """
    _check_buffer(values)
    n = _check_length(values, n)
    _check_companion(companion, n)
    tol_im = _check_tolerance(tol_im, "tol_im")

    def keep(v):
        return np.abs(v.imag) > tol_im

    return _retain_if(
        values, n, keep, companion, "filter_reject_near_real_axis", verbose
    )


def merge_close(
    values: np.ndarray,
    tol: float = DEFAULT_MERGE_TOLERANCE,
    companion: Optional[np.ndarray] = None,
    n: Optional[int] = None,
    verbose: bool = False,
) -> int:
    """
    Greedy removal of near-duplicates.

    Values are visited in their current order. The first value is always
    kept; every later value is kept only if its distance to each value
    kept so far is >= tol. This is O(n²). A value is only dropped when a
    distance is below tol, so NaN entries are never merged away.

    The outcome depends on the input order: of two nearby values, the one
    that comes first survives. No canonical representative is chosen.

    Parameters
    ----------
    values : ndarray
        Complex array, merged in place.
    tol : float
        Non-negative merge distance. tol = 0 keeps everything, tol = inf
        keeps only the first value.
    companion, n, verbose
        As for filter_inside.

    Returns
    -------
    int
        Number of surviving values.

    Raises
    ------
    InvalidArgumentError
        If tol is negative or NaN, or the buffers are invalid.
    """
    _check_buffer(values)
    n = _check_length(values, n)
    _check_companion(companion, n)
    tol = _check_tolerance(tol, "tol")

    def keep(v):
        mask = np.zeros(v.shape[0], dtype=bool)
        kept = []
        for i, z in enumerate(v):
            if not any(abs(z - w) < tol for w in kept):
                kept.append(z)
                mask[i] = True
        return mask

    return _retain_if(values, n, keep, companion, "merge_close", verbose)


# =============================================================================
# Convenience wrapper
# =============================================================================

@dataclass
class SpectralArray:
    """
    A caller-owned complex buffer with a live logical length.

    The filter methods compact the buffer in place and update n; the
    buffer itself is never reallocated.

    Attributes
    ----------
    buffer : ndarray
        Complex storage, len(buffer) is the capacity.
    n : int
        Number of live entries, 0 <= n <= len(buffer).
    companion : ndarray, optional
        Permuted together with buffer by every filter.
    """
    buffer: np.ndarray
    n: Optional[int] = None
    companion: Optional[np.ndarray] = None

    def __post_init__(self):
        _check_buffer(self.buffer)
        self.n = _check_length(self.buffer, self.n)
        _check_companion(self.companion, self.n)

    def __len__(self) -> int:
        return self.n

    @property
    def values(self) -> np.ndarray:
        """View of the live entries."""
        return self.buffer[:self.n]

    def filter_inside(self, box=DEFAULT_BOX, verbose: bool = False) -> "SpectralArray":
        self.n = filter_inside(self.buffer, box, self.companion, self.n, verbose)
        return self

    def filter_outside(self, box=DEFAULT_BOX, verbose: bool = False) -> "SpectralArray":
        self.n = filter_outside(self.buffer, box, self.companion, self.n, verbose)
        return self

    def reject_near_real_axis(
        self, tol_im: float = DEFAULT_NONREAL_TOLERANCE, verbose: bool = False
    ) -> "SpectralArray":
        self.n = filter_reject_near_real_axis(
            self.buffer, tol_im, self.companion, self.n, verbose
        )
        return self

    def merge_close(
        self, tol: float = DEFAULT_MERGE_TOLERANCE, verbose: bool = False
    ) -> "SpectralArray":
        self.n = merge_close(self.buffer, tol, self.companion, self.n, verbose)
        return self
