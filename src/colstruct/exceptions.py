"""Typed errors raised while analyzing a single structure record."""


class ColstructError(Exception):
    """Base class for all record-level analysis errors."""


class DecodeError(ColstructError, ValueError):
    """Raised when a columnar structure record has inconsistent arrays.

    Only the offending record is rejected; batch runners catch this per record.
    """


class InvalidSequenceError(ColstructError, ValueError):
    """Raised when a sequence contains letters outside the amino-acid alphabet."""
