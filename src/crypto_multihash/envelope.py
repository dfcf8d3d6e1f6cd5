"""
Multihash envelope: ``[code][length][digest[:length]]``.

A ``MultihashDigest`` always keeps the full native digest it was built from,
so a truncated envelope can be widened again with ``truncate``. Only the first
``length`` bytes are serialized, compared or hashed.
"""

from dataclasses import dataclass
from typing import Optional

from crypto_multihash import config
from crypto_multihash.algorithms import HashAlgorithm, lookup_by_code
from crypto_multihash.bases import Base, decode, encode, infer_base
from crypto_multihash.errors import CorruptedHeader, InvalidLength, UnknownAlgorithm
from crypto_multihash.log import get_logger, log

_logger = get_logger("envelope")

HEADER_SIZE = 2
MAX_LENGTH = 0xFF


@dataclass(frozen=True, eq=False)
class MultihashDigest:
    """
    An immutable multihash value.

    Attributes:
        algorithm: Hash function named in the header
        length: Declared length, as written in the header
        digest: The full digest this envelope was built from
    """

    algorithm: HashAlgorithm
    length: int
    digest: bytes

    def __post_init__(self):
        object.__setattr__(self, "digest", bytes(self.digest))
        if self.length <= 0 or self.length > len(self.digest):
            raise InvalidLength(
                f"Invalid multihash length {self.length} "
                f"for a {len(self.digest)} byte digest"
            )
        if self.length > self.algorithm.digest_length:
            raise InvalidLength(
                f"Invalid multihash length {self.length}: "
                f"{self.algorithm.name} digests are {self.algorithm.digest_length} bytes"
            )
        if self.length > MAX_LENGTH:
            raise InvalidLength(
                f"Invalid multihash length {self.length}: does not fit in one byte"
            )

    @property
    def truncated_digest(self) -> bytes:
        """The digest bytes that are actually serialized."""
        return self.digest[: self.length]

    @property
    def is_truncated(self) -> bool:
        return self.length < self.algorithm.digest_length

    def _key(self):
        return (self.algorithm.code, self.length, self.truncated_digest)

    def __eq__(self, other):
        if not isinstance(other, MultihashDigest):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self):
        return hash(self._key())

    def __repr__(self):
        return (
            f"MultihashDigest(algorithm={self.algorithm.name!r}, "
            f"length={self.length}, digest={self.truncated_digest.hex()!r})"
        )

    def __str__(self):
        return self.encode(Base(config.DEFAULT_BASE))

    def __bytes__(self):
        return self.to_bytes()

    def truncate(self, length: int) -> "MultihashDigest":
        """Return the same digest with a different declared length."""
        return MultihashDigest(self.algorithm, length, self.digest)

    def to_bytes(self) -> bytes:
        """Serialize to the binary multihash layout."""
        return bytes([self.algorithm.code, self.length]) + self.truncated_digest

    def encode(self, base: Base) -> str:
        """Serialize and render as text in ``base``."""
        return encode(base, self.to_bytes())

    @classmethod
    def from_bytes(cls, data: bytes) -> "MultihashDigest":
        """
        Parse a binary multihash.

        The declared length is validated before the algorithm code is looked
        up, so a shifted or cut header reports a length error.

        Raises:
            CorruptedHeader: If the declared length does not match the body,
                or the algorithm code is not registered
        """
        data = bytes(data)
        if len(data) < HEADER_SIZE:
            log(_logger, "debug", "multihash shorter than its header", size=len(data))
            raise CorruptedHeader("invalid length")

        code, length = data[0], data[1]
        body = data[HEADER_SIZE:]
        if length == 0 or len(body) != length:
            log(
                _logger,
                "debug",
                "declared length does not match body",
                declared=length,
                actual=len(body),
            )
            raise CorruptedHeader("invalid length")

        try:
            algorithm = lookup_by_code(code)
        except UnknownAlgorithm as e:
            log(_logger, "debug", "unknown algorithm in header", code=f"0x{code:02x}")
            raise CorruptedHeader(f"unknown algorithm code 0x{code:02x}") from e

        if length > algorithm.digest_length:
            log(
                _logger,
                "debug",
                "declared length exceeds native digest",
                algorithm=algorithm.name,
                declared=length,
            )
            raise CorruptedHeader("invalid length")

        return cls(algorithm, length, body)

    @classmethod
    def decode(cls, text: str, base: Optional[Base] = None) -> "MultihashDigest":
        """Parse multihash text, inferring the base when none is given."""
        if base is None:
            base = infer_base(text)
        return cls.from_bytes(decode(base, text))


def build(algorithm: HashAlgorithm, digest: bytes, length: int) -> MultihashDigest:
    """Wrap ``digest`` in an envelope declaring ``length`` bytes."""
    return MultihashDigest(algorithm, length, digest)


def serialize(multihash: MultihashDigest) -> bytes:
    return multihash.to_bytes()


def parse(data: bytes) -> MultihashDigest:
    return MultihashDigest.from_bytes(data)
