"""
Tests for the strict digest builders.
"""

import io

import pytest

from crypto_multihash.algorithms import SHA1, SHA256, lookup_by_name, supported_algorithms
from crypto_multihash.bases import Base
from crypto_multihash.digest import (
    iter_chunks,
    multihash,
    multihash_file,
    multihash_stream,
    multihash_stream_many,
    truncated_multihash,
)
from crypto_multihash.envelope import parse
from crypto_multihash.errors import InvalidLength

from multihash_vectors import TEST_PAYLOAD, VECTORS

ALGORITHMS = supported_algorithms()


def test_sha1_reference():
    m = multihash(SHA1, b"test")
    assert m.encode(Base.HEX) == "1114a94a8fe5ccb19ba61c4c0873d391e987982fbbd3"
    assert m.encode(Base.BASE58) == "5dt9CqvXK9qs7vazf7k7ZRqe28VPTg"


@pytest.mark.parametrize("vector", VECTORS, ids=lambda v: v[0])
def test_reference_encodings(vector):
    name, b16, _b32, b58, b64 = vector
    m = multihash(lookup_by_name(name), TEST_PAYLOAD)
    assert m.encode(Base.HEX) == b16
    assert m.encode(Base.BASE58) == b58
    assert m.encode(Base.BASE64) == b64


@pytest.mark.parametrize("alg", ALGORITHMS, ids=lambda a: a.name)
@pytest.mark.parametrize("payload", [b"", b"test", bytes(range(256)) * 3])
def test_round_trip(alg, payload):
    m = multihash(alg, payload)
    assert m.length == alg.digest_length
    for base in (Base.HEX, Base.BASE58, Base.BASE64):
        assert parse(m.to_bytes()) == m
        assert type(m).decode(m.encode(base), base) == m


@pytest.mark.parametrize("alg", ALGORITHMS, ids=lambda a: a.name)
def test_stream_matches_one_shot(alg):
    payload = b"The quick brown fox jumps over the lazy dog" * 10
    chunks = (payload[i : i + 7] for i in range(0, len(payload), 7))
    assert multihash_stream(alg, chunks) == multihash(alg, payload)


def test_stream_failure_yields_no_digest():
    def broken():
        yield b"te"
        raise IOError("disk went away")

    with pytest.raises(IOError):
        multihash_stream(SHA256, broken())


def test_stream_many_single_pass():
    consumed = []

    def chunks():
        for c in (b"te", b"st"):
            consumed.append(c)
            yield c

    results = multihash_stream_many(ALGORITHMS, chunks())
    assert consumed == [b"te", b"st"]
    assert results == [multihash(alg, b"test") for alg in ALGORITHMS]


def test_file_helpers(small_chunks):
    f = io.BytesIO(b"test payload")
    assert list(iter_chunks(f)) == [b"tes", b"t p", b"ayl", b"oad"]
    f.seek(0)
    assert multihash_file(SHA1, f) == multihash(SHA1, b"test payload")


@pytest.mark.parametrize("alg", ALGORITHMS, ids=lambda a: a.name)
def test_truncation_validity(alg):
    for length in (1, alg.digest_length // 2, alg.digest_length):
        m = truncated_multihash(alg, b"test", length)
        assert len(m.to_bytes()) == 2 + length
        assert m.truncated_digest == alg.hash(b"test")[:length]


@pytest.mark.parametrize("alg", ALGORITHMS, ids=lambda a: a.name)
def test_truncation_rejection(alg):
    for length in (0, -5, alg.digest_length + 1):
        with pytest.raises(InvalidLength):
            truncated_multihash(alg, b"test", length)
