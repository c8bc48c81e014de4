"""Diagnostic printing of complex arrays."""

import sys
from typing import Optional, TextIO

import numpy as np


def format_buf(values: np.ndarray, name: str, n: Optional[int] = None) -> str:
    """Render values[:n] as a MATLAB-style assignment, e.g. 'q = [1+0j, 0+2j];'."""
    z = np.asarray(values, dtype=complex).ravel()
    if n is not None:
        z = z[:n]
    entries = ", ".join("%g+%gj" % (v.real, v.imag) for v in z)
    return f"{name} = [{entries}];"


def print_buf(
    values: np.ndarray,
    name: str = "buf",
    n: Optional[int] = None,
    file: Optional[TextIO] = None,
) -> None:
    """Print an array for interactive debugging. Not part of any numerical contract."""
    print(format_buf(values, name, n), file=file if file is not None else sys.stdout)
