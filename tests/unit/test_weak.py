"""
Tests for the runtime-resolved (weak) multihash helpers.
"""

import pytest

from crypto_multihash.algorithms import lookup_by_name
from crypto_multihash.bases import Base
from crypto_multihash.digest import multihash
from crypto_multihash.errors import (
    CorruptedHeader,
    UnknownAlgorithm,
    UnsupportedBase,
)
from crypto_multihash.weak import (
    check_weak_multihash,
    to_weak_multihash,
    weak_multihash,
    weak_multihash_stream,
)

from multihash_vectors import FAIL_PAYLOAD, NAMES, TEST_PAYLOAD, VECTORS


@pytest.mark.parametrize("name", NAMES)
def test_weak_equals_strict(name):
    weak = weak_multihash(name, TEST_PAYLOAD)
    strict = multihash(lookup_by_name(name), TEST_PAYLOAD)
    assert weak == strict
    assert weak.to_bytes() == strict.to_bytes()


@pytest.mark.parametrize("name", NAMES)
def test_weak_stream(name):
    assert weak_multihash_stream(name, [b"t", b"es", b"t"]) == weak_multihash(
        name, TEST_PAYLOAD
    )


def test_unknown_name():
    with pytest.raises(UnknownAlgorithm):
        weak_multihash("shake-128", TEST_PAYLOAD)


@pytest.mark.parametrize("vector", VECTORS, ids=lambda v: v[0])
def test_weak_encodings(vector):
    name, b16, _b32, b58, b64 = vector
    m = weak_multihash(name, TEST_PAYLOAD)
    assert m.encode(Base.HEX) == b16
    assert m.encode(Base.BASE58) == b58
    assert m.encode(Base.BASE64) == b64


@pytest.mark.parametrize("vector", VECTORS, ids=lambda v: v[0])
def test_weak_decoding(vector):
    name, b16, b32, b58, b64 = vector
    m = weak_multihash(name, TEST_PAYLOAD)
    assert to_weak_multihash(b16) == m
    assert to_weak_multihash(b58) == m
    assert to_weak_multihash(b64) == m
    with pytest.raises(UnsupportedBase):
        to_weak_multihash(b32)


@pytest.mark.parametrize("vector", VECTORS, ids=lambda v: v[0])
def test_weak_check(vector):
    for text in (vector[1], vector[3], vector[4]):
        assert check_weak_multihash(text, TEST_PAYLOAD) is True
        assert check_weak_multihash(text, FAIL_PAYLOAD) is False


def test_weak_check_truncated():
    text = weak_multihash("sha256", TEST_PAYLOAD).truncate(6).encode(Base.BASE58)
    assert check_weak_multihash(text, TEST_PAYLOAD) is True
    assert check_weak_multihash(text, FAIL_PAYLOAD) is False


@pytest.mark.parametrize(
    "text", ["1340ee26b0dd4af7e749aa1a8e", "dd4af7e749aa1a8e1340ee26b0"]
)
def test_weak_check_corrupted(text):
    with pytest.raises(CorruptedHeader) as exc_info:
        check_weak_multihash(text, TEST_PAYLOAD)
    assert str(exc_info.value) == "Corrupted MultihasDigest: invalid length"
