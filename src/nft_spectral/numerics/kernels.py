"""
Elementary complex-valued kernels used by discretization setup and
scattering code.

All scalar kernels accept Python/numpy complex values or numpy arrays
(evaluated elementwise). When called with mpmath numbers they evaluate
in mpmath at MPMATH_PRECISION digits instead, which is how reference
values are produced in the tests. The precision is set only for the
duration of the call; mpmath's global working precision is left alone.
"""

import numpy as np
from mpmath import mp
from typing import Union

from ..config import SINC_THRESHOLD, MPMATH_PRECISION
from ..errors import InvalidArgumentError

Number = Union[complex, float, np.ndarray]

_MP_TYPES = (mp.mpf, mp.mpc)


def _is_mp(x) -> bool:
    return isinstance(x, _MP_TYPES)


def sech(z: Number) -> Number:
    """
    Hyperbolic secant, sech(z) = 2 / (e^z + e^{-z}).

    No domain restriction. For large |Re(z)| the exponentials overflow and
    the result follows floating-point semantics (it underflows to 0).

    Parameters
    ----------
    z : complex, ndarray, mpf or mpc
        The argument.

    Returns
    -------
    Same kind as z.

    Examples
    --------
    >>> float(sech(0.0))
    1.0
    """
    if _is_mp(z):
        with mp.workdps(MPMATH_PRECISION):
            return 2 / (mp.exp(z) + mp.exp(-z))
    with np.errstate(over="ignore"):
        return 2.0 / (np.exp(z) + np.exp(-z))


def csinc(x: Number) -> Number:
    """
    Complex sinc, sin(x)/x.

    For |x| < SINC_THRESHOLD the quotient loses all precision, so
    cos(x/√3) is returned instead. Its Taylor series agrees with sinc up
    to O(x^4), and sinc(0) = 1.

    Parameters
    ----------
    x : complex, ndarray, mpf or mpc
        The argument.

    Returns
    -------
    Same kind as x.
    """
    if _is_mp(x):
        with mp.workdps(MPMATH_PRECISION):
            if abs(x) >= SINC_THRESHOLD:
                return mp.sin(x) / x
            return mp.cos(x / mp.sqrt(3))

    if np.ndim(x) == 0:
        if abs(x) >= SINC_THRESHOLD:
            return np.sin(x) / x
        return np.cos(x / np.sqrt(3))

    x = np.asarray(x)
    small = np.abs(x) < SINC_THRESHOLD
    # Dividing by a placeholder keeps 0/0 out of the large branch
    safe_x = np.where(small, 1.0, x)
    return np.where(small, np.cos(x / np.sqrt(3)), np.sin(safe_x) / safe_x)


def next_power_of_two(n: int) -> int:
    """
    Smallest power of two that is >= n.

    Returns 0 for n = 0, which is treated as a degenerate request rather
    than an error.

    Examples
    --------
    >>> next_power_of_two(0)
    0
    >>> next_power_of_two(5)
    8
    """
    n = int(n)
    if n < 0:
        raise InvalidArgumentError(f"n must be non-negative, got {n}")
    if n == 0:
        return 0
    result = 1
    while result < n:
        result *= 2
    return result


def l2norm2(values: np.ndarray, a: float, b: float) -> float:
    """
    Squared L2 norm of a sampled signal via the trapezoidal rule.

    With N samples on [a, b] and h = (b - a)/N:

        h/2 (|q_0|² + |q_{N-1}|²) + h Σ_{i=1}^{N-2} |q_i|²

    Parameters
    ----------
    values : ndarray
        Complex samples q_0, ..., q_{N-1}.
    a, b : float
        Time interval covered by the samples.

    Returns
    -------
    float
        The approximate energy, or NaN if N < 2 or a >= b.
    """
    q = np.asarray(values)
    N = q.shape[0]
    if N < 2 or not a < b:
        return float("nan")

    h = (b - a) / N
    power = np.abs(q) ** 2
    return float(0.5 * h * (power[0] + power[-1]) + h * np.sum(power[1:-1]))
