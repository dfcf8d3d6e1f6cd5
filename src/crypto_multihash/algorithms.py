"""
Hash Algorithm Registry

The closed set of hash functions a multihash may name, each identified by a
one-byte multicodec code. Digests themselves come from ``hashlib``.

    code  name          length
    0x11  sha1          20
    0x12  sha256        32
    0x13  sha512        64
    0x14  sha3-512      64
    0x15  sha3-384      48
    0x16  sha3-256      32
    0x17  sha3-224      28
    0x40  blake2b-512   64
    0x41  blake2s-256   32

Callers that know the algorithm up front use the module constants (``SHA1``,
``SHA256``, ...). Callers that only have a name or a header byte go through
``lookup_by_name`` / ``lookup_by_code``; both paths return the same objects.
"""

import hashlib
from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

from crypto_multihash.errors import UnknownAlgorithm


@dataclass(frozen=True, eq=False)
class HashAlgorithm:
    """Registry entry for one supported hash function."""

    code: int
    digest_length: int
    name: str
    hashlib_name: str

    def __eq__(self, other):
        if not isinstance(other, HashAlgorithm):
            return NotImplemented
        return self.code == other.code

    def __hash__(self):
        return hash(self.code)

    def __str__(self):
        return self.name

    def new(self):
        """Return a fresh hashlib object for this algorithm."""
        return hashlib.new(self.hashlib_name)

    def hash(self, data: bytes) -> bytes:
        """Digest ``data`` in one call."""
        hasher = self.new()
        hasher.update(data)
        return hasher.digest()

    def hash_stream(self, chunks: Iterable[bytes]) -> bytes:
        """
        Digest an iterable of byte chunks.

        The iterable is consumed once, in order. If it raises, no digest is
        returned.
        """
        hasher = self.new()
        for chunk in chunks:
            hasher.update(chunk)
        return hasher.digest()


SHA1 = HashAlgorithm(0x11, 20, "sha1", "sha1")
SHA256 = HashAlgorithm(0x12, 32, "sha256", "sha256")
SHA512 = HashAlgorithm(0x13, 64, "sha512", "sha512")
SHA3_512 = HashAlgorithm(0x14, 64, "sha3-512", "sha3_512")
SHA3_384 = HashAlgorithm(0x15, 48, "sha3-384", "sha3_384")
SHA3_256 = HashAlgorithm(0x16, 32, "sha3-256", "sha3_256")
SHA3_224 = HashAlgorithm(0x17, 28, "sha3-224", "sha3_224")
BLAKE2B_512 = HashAlgorithm(0x40, 64, "blake2b-512", "blake2b")
BLAKE2S_256 = HashAlgorithm(0x41, 32, "blake2s-256", "blake2s")

_REGISTRY: Tuple[HashAlgorithm, ...] = (
    SHA1,
    SHA256,
    SHA512,
    SHA3_512,
    SHA3_384,
    SHA3_256,
    SHA3_224,
    BLAKE2B_512,
    BLAKE2S_256,
)

_BY_CODE: Dict[int, HashAlgorithm] = {alg.code: alg for alg in _REGISTRY}
_BY_NAME: Dict[str, HashAlgorithm] = {alg.name: alg for alg in _REGISTRY}


def supported_algorithms() -> Tuple[HashAlgorithm, ...]:
    """All registered algorithms, in code order."""
    return _REGISTRY


def lookup_by_code(code: int) -> HashAlgorithm:
    """
    Resolve a multihash header byte to its algorithm.

    Raises:
        UnknownAlgorithm: If no registered algorithm uses ``code``
    """
    try:
        return _BY_CODE[code]
    except KeyError:
        raise UnknownAlgorithm(f"Unknown algorithm code 0x{code:02x}") from None


def lookup_by_name(name: str) -> HashAlgorithm:
    """
    Resolve an algorithm name such as ``"sha3-512"``. Names are case-sensitive.

    Raises:
        UnknownAlgorithm: If ``name`` is not registered
    """
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownAlgorithm(
            f"Unknown algorithm '{name}'. Valid algorithms: {list(_BY_NAME.keys())}"
        ) from None
