"""
crypto_multihash - self-describing digests.

A multihash prefixes a digest with one byte naming the hash function and one
byte giving the digest length:

    [code][length][digest bytes]

The binary form can be rendered as hex, base58 or base64 text and read back
without being told which base or hash function was used.

Example Usage:
    from crypto_multihash import SHA256, Base, multihash, check_multihash

    m = multihash(SHA256, b"test")
    text = m.encode(Base.BASE58)     # QmZ5NmGeStdit7tV6gdak1F8FyZhPsfA843YS9f2ywKH6w
    check_multihash(text, b"test")   # True
    check_multihash(text, b"test1")  # False

    # Algorithm picked at runtime
    from crypto_multihash import weak_multihash
    weak_multihash("sha3-512", b"test")

Note: Base32 is declared but not implemented, and SHAKE-128/256 are not
supported.
"""

__version__ = "0.4.0"

from .algorithms import (
    HashAlgorithm,
    SHA1,
    SHA256,
    SHA512,
    SHA3_512,
    SHA3_384,
    SHA3_256,
    SHA3_224,
    BLAKE2B_512,
    BLAKE2S_256,
    supported_algorithms,
    lookup_by_code,
    lookup_by_name,
)
from .bases import Base, encode, decode, infer_base
from .envelope import MultihashDigest, build, serialize, parse
from .digest import (
    multihash,
    multihash_stream,
    multihash_stream_many,
    multihash_file,
    truncated_multihash,
)
from .weak import (
    weak_multihash,
    weak_multihash_stream,
    to_weak_multihash,
    check_weak_multihash,
)
from .check import check_multihash, check_multihash_stream, check_encoding
from .errors import (
    MultihashError,
    InvalidLength,
    CorruptedHeader,
    UnknownAlgorithm,
    UnsupportedBase,
    DecodeError,
    AmbiguousOrUnknown,
)

__all__ = [
    "HashAlgorithm",
    "SHA1",
    "SHA256",
    "SHA512",
    "SHA3_512",
    "SHA3_384",
    "SHA3_256",
    "SHA3_224",
    "BLAKE2B_512",
    "BLAKE2S_256",
    "supported_algorithms",
    "lookup_by_code",
    "lookup_by_name",
    "Base",
    "encode",
    "decode",
    "infer_base",
    "MultihashDigest",
    "build",
    "serialize",
    "parse",
    "multihash",
    "multihash_stream",
    "multihash_stream_many",
    "multihash_file",
    "truncated_multihash",
    "weak_multihash",
    "weak_multihash_stream",
    "to_weak_multihash",
    "check_weak_multihash",
    "check_multihash",
    "check_multihash_stream",
    "check_encoding",
    "MultihashError",
    "InvalidLength",
    "CorruptedHeader",
    "UnknownAlgorithm",
    "UnsupportedBase",
    "DecodeError",
    "AmbiguousOrUnknown",
]
