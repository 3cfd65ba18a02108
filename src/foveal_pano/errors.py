"""Exception types raised by the foveation pipeline."""
from __future__ import annotations


class ContractViolationError(ValueError):
    """Raised when an input breaks a precondition of encode/decode.

    Subclasses :class:`ValueError` so callers can keep catching the builtin.
    """
