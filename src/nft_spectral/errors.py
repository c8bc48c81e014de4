"""
Error taxonomy for nft_spectral.

- InvalidArgumentError: malformed input (None buffer, inverted bounding
  box, negative tolerance, out-of-range length, unknown discretization).
- UnsupportedDiscretizationError: a known scheme that lacks the data an
  operation needs (e.g. a degree for the z-mapping).

Allocation failures surface as the builtin MemoryError.
"""


class InvalidArgumentError(ValueError):
    """An argument failed validation; nothing was modified."""


class UnsupportedDiscretizationError(InvalidArgumentError):
    """The discretization scheme does not support the requested operation."""
