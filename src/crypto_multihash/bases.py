"""
Base Dispatcher

Uniform ``encode(base, data)`` / ``decode(base, text)`` over the text codecs a
multihash can be rendered with, plus ``infer_base`` for text that arrives
without a base tag.

Inference is an ordered cascade, first match wins:

1. hex digits (either case) of even length -> HEX
2. RFC 4648 base32 alphabet, optional ``=`` padding -> BASE32
3. bitcoin base58 alphabet -> BASE58
4. standard base64 alphabet including ``=`` -> BASE64; padding placement
   is left to the decoder

The alphabets overlap, so the order decides. A short all-digit string is both
valid hex and valid base58 and is always read as hex. This is a known
limitation of unprefixed multihash text.

BASE32 is declared so that inference can name it, but it has no codec:
encoding or decoding with it raises ``UnsupportedBase``.
"""

import base64
import binascii
import re
from enum import Enum

import based58

from crypto_multihash.errors import AmbiguousOrUnknown, DecodeError, UnsupportedBase

BASE58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"

_HEX_RE = re.compile(r"(?:[0-9a-fA-F]{2})*")
_BASE32_RE = re.compile(r"[A-Z2-7]*=*")
_BASE58_RE = re.compile(f"[{BASE58_ALPHABET}]*")
_BASE64_RE = re.compile(r"[A-Za-z0-9+/=]*")


class Base(Enum):
    """Text encodings a multihash can be rendered in."""

    HEX = "base16"
    BASE32 = "base32"
    BASE58 = "base58"
    BASE64 = "base64"

    def __str__(self):
        return self.value


def encode(base: Base, data: bytes) -> str:
    """Render ``data`` as text in ``base``."""
    if base is Base.HEX:
        return data.hex()
    if base is Base.BASE58:
        return based58.b58encode(data).decode("ascii")
    if base is Base.BASE64:
        return base64.b64encode(data).decode("ascii")
    raise UnsupportedBase(f"{base} encoding is not supported")


def decode(base: Base, text: str) -> bytes:
    """
    Parse ``text`` written in ``base`` back to bytes.

    Raises:
        DecodeError: If the text has characters, padding or a length that
            ``base`` cannot produce
        UnsupportedBase: For BASE32
    """
    if base is Base.HEX:
        try:
            return binascii.unhexlify(text)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f"Invalid base16 text: {e}") from e
    if base is Base.BASE58:
        if not _BASE58_RE.fullmatch(text):
            raise DecodeError("Invalid base58 text: character outside alphabet")
        try:
            return based58.b58decode(text.encode("ascii"))
        except ValueError as e:
            raise DecodeError(f"Invalid base58 text: {e}") from e
    if base is Base.BASE64:
        try:
            return base64.b64decode(text, validate=True)
        except (binascii.Error, ValueError) as e:
            raise DecodeError(f"Invalid base64 text: {e}") from e
    raise UnsupportedBase(f"{base} decoding is not supported")


def infer_base(text: str) -> Base:
    """
    Guess which base ``text`` was written in from its characters.

    Raises:
        AmbiguousOrUnknown: If the text fits none of the alphabets
    """
    if _HEX_RE.fullmatch(text):
        return Base.HEX
    if _BASE32_RE.fullmatch(text):
        return Base.BASE32
    if _BASE58_RE.fullmatch(text):
        return Base.BASE58
    if _BASE64_RE.fullmatch(text):
        return Base.BASE64
    raise AmbiguousOrUnknown(f"Cannot infer the base of {text!r}")
