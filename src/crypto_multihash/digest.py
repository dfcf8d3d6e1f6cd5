"""
Digest builders for callers that know the hash algorithm up front.

    from crypto_multihash import SHA1, multihash, Base

    m = multihash(SHA1, b"test")
    m.encode(Base.HEX)  # 1114a94a8fe5ccb19ba61c4c0873d391e987982fbbd3
"""

from typing import BinaryIO, Iterable, Iterator, List, Optional

from crypto_multihash import config
from crypto_multihash.algorithms import HashAlgorithm
from crypto_multihash.envelope import MultihashDigest, build


def multihash(algorithm: HashAlgorithm, payload: bytes) -> MultihashDigest:
    """Hash ``payload`` and wrap the full digest."""
    digest = algorithm.hash(payload)
    return build(algorithm, digest, len(digest))


def multihash_stream(
    algorithm: HashAlgorithm, chunks: Iterable[bytes]
) -> MultihashDigest:
    """
    Hash a payload delivered as an iterable of byte chunks.

    Gives the same result as ``multihash`` over the concatenated chunks. The
    envelope only exists once the iterable is exhausted; an exception raised
    by the iterable propagates and nothing is returned.
    """
    digest = algorithm.hash_stream(chunks)
    return build(algorithm, digest, len(digest))


def multihash_stream_many(
    algorithms: Iterable[HashAlgorithm], chunks: Iterable[bytes]
) -> List[MultihashDigest]:
    """Hash one pass over ``chunks`` with several algorithms at once."""
    algorithms = list(algorithms)
    hashers = [algorithm.new() for algorithm in algorithms]
    for chunk in chunks:
        for hasher in hashers:
            hasher.update(chunk)

    results = []
    for algorithm, hasher in zip(algorithms, hashers):
        digest = hasher.digest()
        results.append(build(algorithm, digest, len(digest)))
    return results


def truncated_multihash(
    algorithm: HashAlgorithm, payload: bytes, length: int
) -> MultihashDigest:
    """
    Hash ``payload`` and declare only its first ``length`` bytes.

    Raises:
        InvalidLength: If ``length`` is not in 1..native digest length
    """
    return build(algorithm, algorithm.hash(payload), length)


def iter_chunks(fileobj: BinaryIO, chunk_size: Optional[int] = None) -> Iterator[bytes]:
    """Yield successive reads from a binary file object until EOF."""
    size = chunk_size or config.STREAM_CHUNK_SIZE
    while True:
        chunk = fileobj.read(size)
        if not chunk:
            return
        yield chunk


def multihash_file(
    algorithm: HashAlgorithm, fileobj: BinaryIO, chunk_size: Optional[int] = None
) -> MultihashDigest:
    """Stream a binary file object through ``multihash_stream``."""
    return multihash_stream(algorithm, iter_chunks(fileobj, chunk_size))
