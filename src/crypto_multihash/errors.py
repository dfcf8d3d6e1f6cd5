"""
Exceptions raised by the multihash codec.

Every failure is a ``MultihashError``, itself a ``ValueError``, so callers that
only care about "bad input" can catch either. None of these are transient:
the same input always fails the same way.
"""

from crypto_multihash.config import CORRUPTED_PREFIX


class MultihashError(ValueError):
    """Base class for all multihash errors."""


class InvalidLength(MultihashError):
    """A digest was built with a declared length outside 1..len(digest)."""


class CorruptedHeader(MultihashError):
    """The two-byte header of a decoded multihash does not describe its body."""

    def __init__(self, reason: str = "invalid length"):
        self.reason = reason
        super().__init__(f"{CORRUPTED_PREFIX}: {reason}")


class UnknownAlgorithm(MultihashError):
    """A hash name or code is not in the algorithm registry."""


class UnsupportedBase(MultihashError):
    """The requested text base is declared but has no codec (base32)."""


class DecodeError(MultihashError):
    """Text is not valid for the base it was decoded with."""


class AmbiguousOrUnknown(MultihashError):
    """The text base could not be inferred from the characters used."""
