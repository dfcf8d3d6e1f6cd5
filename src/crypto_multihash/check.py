"""
Verify encoded multihashes against payloads.

Checking runs Decode -> Parse -> Recompute -> Compare. Any stage before
Compare that fails raises: a multihash that cannot be read is an error, never
a mismatch. Only a well-formed multihash produces ``True`` or ``False``.
"""

from typing import Iterable, Tuple

from crypto_multihash.bases import decode, infer_base
from crypto_multihash.digest import multihash_stream, truncated_multihash
from crypto_multihash.envelope import MultihashDigest
from crypto_multihash.log import get_logger, log

_logger = get_logger("check")


def _read(text: str) -> Tuple[bytes, MultihashDigest]:
    """Decode and parse multihash text, returning the raw bytes too."""
    base = infer_base(text)
    log(_logger, "debug", "inferred base", base=base)
    raw = decode(base, text)
    expected = MultihashDigest.from_bytes(raw)
    log(
        _logger,
        "debug",
        "parsed multihash",
        algorithm=expected.algorithm.name,
        length=expected.length,
    )
    return raw, expected


def check_multihash(text: str, payload: bytes) -> bool:
    """
    Does the multihash ``text`` describe ``payload``?

    The base and hash algorithm are inferred from ``text``; truncated
    multihashes are compared on their declared prefix.

    Raises:
        AmbiguousOrUnknown: If the base cannot be inferred
        UnsupportedBase: If the text is base32
        DecodeError: If the text is not valid in its base
        CorruptedHeader: If the header does not match the body
    """
    raw, expected = _read(text)
    actual = truncated_multihash(expected.algorithm, payload, expected.length)
    matched = actual.to_bytes() == raw
    log(_logger, "debug", "compared multihash", matched=matched)
    return matched


def check_multihash_stream(text: str, chunks: Iterable[bytes]) -> bool:
    """
    ``check_multihash`` over a payload delivered in chunks.

    The text is decoded and parsed before any chunk is read, so a corrupted
    multihash fails without consuming the stream.
    """
    raw, expected = _read(text)
    actual = multihash_stream(expected.algorithm, chunks).truncate(expected.length)
    matched = actual.to_bytes() == raw
    log(_logger, "debug", "compared multihash", matched=matched)
    return matched


def check_encoding(text: str, multihash: MultihashDigest) -> bool:
    """
    Is ``text`` a rendering of ``multihash`` in its inferred base?

    Bytes are compared after decoding, so uppercase hex still matches.
    """
    base = infer_base(text)
    return decode(base, text) == multihash.to_bytes()
