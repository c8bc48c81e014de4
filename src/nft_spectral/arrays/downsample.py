"""
Uniform-stride downsampling of long sampled signals.

The stride is an integer, so the achieved number of samples is derived
from it and may differ from the request. A uniform stride takes
precedence over hitting the requested count exactly.
"""

from dataclasses import dataclass

import numpy as np

from ..config import MIN_SIGNAL_LENGTH, MIN_DOWNSAMPLED_LENGTH, round_half_away
from ..errors import InvalidArgumentError


@dataclass(frozen=True)
class DownsampledSignal:
    """
    Result of downsample().

    Attributes
    ----------
    values : ndarray
        Newly allocated array of the retained samples. It is owned by the
        caller and shares no memory with the input.
    first_index : int
        Index in the original signal of values[0] (always 0).
    last_index : int
        Index in the original signal of values[-1].
    skip : int
        Stride between retained samples.
    """
    values: np.ndarray
    first_index: int
    last_index: int
    skip: int

    def __len__(self) -> int:
        return self.values.shape[0]

    @property
    def first_last_index(self) -> tuple:
        return (self.first_index, self.last_index)

    @property
    def indices(self) -> np.ndarray:
        """Original indices of all retained samples."""
        return np.arange(self.first_index, self.last_index + 1, self.skip)


def downsample(signal: np.ndarray, desired: int) -> DownsampledSignal:
    """
    Pick every skip-th sample of a signal.

    With D = len(signal), the request is silently clamped into [2, D], then

        skip = round(D / desired)
        Dsub = round(D / skip)

    where ties round away from zero. The samples at 0, skip, ...,
    (Dsub - 1)·skip are copied into a new array.

    Parameters
    ----------
    signal : ndarray
        Complex samples, D >= 3.
    desired : int
        Requested number of samples.

    Returns
    -------
    DownsampledSignal
        The new samples and their original first/last indices.

    Raises
    ------
    InvalidArgumentError
        If signal is None or has fewer than 3 samples, or desired is not
        an integer.
    MemoryError
        If the output cannot be allocated.

    Examples
    --------
    >>> out = downsample(np.arange(10, dtype=complex), 4)
    >>> out.skip, len(out), out.last_index
    (3, 3, 6)
    """
    if signal is None:
        raise InvalidArgumentError("signal must not be None")
    q = np.asarray(signal)
    if q.ndim != 1:
        raise InvalidArgumentError(f"signal must be 1-D, got shape {q.shape}")
    D = q.shape[0]
    if D < MIN_SIGNAL_LENGTH:
        raise InvalidArgumentError(
            f"Need at least {MIN_SIGNAL_LENGTH} samples to downsample, got {D}"
        )

    if desired is None:
        raise InvalidArgumentError("desired must not be None")
    try:
        requested = int(desired)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(
            f"desired must be an integer, got {desired!r}"
        ) from e
    clamped = min(max(requested, MIN_DOWNSAMPLED_LENGTH), D)

    skip = round_half_away(D / clamped)
    n_sub = round_half_away(D / skip)

    values = np.empty(n_sub, dtype=q.dtype)
    values[:] = q[0:n_sub * skip:skip]

    return DownsampledSignal(
        values=values,
        first_index=0,
        last_index=(n_sub - 1) * skip,
        skip=skip,
    )
