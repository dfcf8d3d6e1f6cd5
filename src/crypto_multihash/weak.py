"""
Weak multihash helpers: the hash algorithm is chosen at runtime by name.

These produce exactly the same ``MultihashDigest`` values as the helpers in
``crypto_multihash.digest``; only the way the algorithm is resolved differs.

    weak_multihash("sha3-256", b"test").encode(Base.BASE58)
    to_weak_multihash("5dt9CqvXK9qs7vazf7k7ZRqe28VPTg").algorithm.name  # sha1
"""

from typing import Iterable

from crypto_multihash.algorithms import lookup_by_name
from crypto_multihash.digest import multihash, multihash_stream
from crypto_multihash.envelope import MultihashDigest


def weak_multihash(name: str, payload: bytes) -> MultihashDigest:
    """
    Hash ``payload`` with the algorithm called ``name``.

    Raises:
        UnknownAlgorithm: If ``name`` is not registered
    """
    return multihash(lookup_by_name(name), payload)


def weak_multihash_stream(name: str, chunks: Iterable[bytes]) -> MultihashDigest:
    """Streaming variant of ``weak_multihash``."""
    return multihash_stream(lookup_by_name(name), chunks)


def to_weak_multihash(text: str) -> MultihashDigest:
    """Decode multihash text of any supported base."""
    return MultihashDigest.decode(text)


def check_weak_multihash(text: str, payload: bytes) -> bool:
    """
    Check ``text`` against ``payload``, re-resolving the header's algorithm
    through its registered name.
    """
    decoded = to_weak_multihash(text)
    algorithm = lookup_by_name(decoded.algorithm.name)
    return multihash(algorithm, payload).truncate(decoded.length) == decoded
