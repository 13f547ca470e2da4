import logging

import pytest

from hashengine import (
    ALGORITHMS,
    Algorithm,
    Digest,
    KeyLengthError,
    Message,
    ParameterError,
    hash_message,
    hexdigest,
    new,
)
from hashengine.dispatch import _PIPELINES

DIGEST_BITS = {
    Algorithm.MD2: 128,
    Algorithm.MD4: 128,
    Algorithm.MD5: 128,
    Algorithm.SHA0: 160,
    Algorithm.SHA1: 160,
    Algorithm.SHA224: 224,
    Algorithm.SHA256: 256,
    Algorithm.SHA384: 384,
    Algorithm.SHA512: 512,
    Algorithm.SHA512_224: 224,
    Algorithm.SHA512_256: 256,
    Algorithm.SHA3_224: 224,
    Algorithm.SHA3_256: 256,
    Algorithm.SHA3_384: 384,
    Algorithm.SHA3_512: 512,
    Algorithm.MD6_160: 160,
    Algorithm.MD6_224: 224,
    Algorithm.MD6_256: 256,
    Algorithm.MD6_384: 384,
    Algorithm.MD6_512: 512,
}


def test_every_algorithm_has_a_pipeline():
    assert set(_PIPELINES) == set(Algorithm)
    assert set(DIGEST_BITS) == set(Algorithm)


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_fixed_length_output(algorithm):
    for data in (b"", b"abc", bytes(130)):
        digest = hash_message(Message(data), algorithm)
        assert isinstance(digest, Digest)
        assert digest.digest_size == DIGEST_BITS[algorithm]
        assert len(digest.to_hex()) == DIGEST_BITS[algorithm] // 4


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_deterministic(algorithm):
    message = Message.from_string("The quick brown fox jumps over the lazy dog")
    assert hash_message(message, algorithm) == hash_message(message, algorithm)


@pytest.mark.parametrize("algorithm", list(Algorithm))
def test_hasher_reports_its_name(algorithm):
    hasher = new(algorithm)
    assert hasher.name == algorithm.value
    assert hasher.digest_size == DIGEST_BITS[algorithm]


@pytest.mark.parametrize(
    "name,expected",
    [
        ("sha256", Algorithm.SHA256),
        ("SHA256", Algorithm.SHA256),
        ("sha3-256", Algorithm.SHA3_256),
        ("SHA3_512", Algorithm.SHA3_512),
        ("sha512/224", Algorithm.SHA512_224),
        ("md6-160", Algorithm.MD6_160),
        (Algorithm.MD5, Algorithm.MD5),
    ],
)
def test_parse_names(name, expected):
    assert Algorithm.parse(name) is expected


def test_unknown_algorithm():
    with pytest.raises(ParameterError):
        new("whirlpool")


def test_known_vectors_through_facade():
    assert hexdigest(b"", "md5") == "d41d8cd98f00b204e9800998ecf8427e"
    assert hexdigest("abc", "sha1") == "a9993e364706816aba3e25717850c26c9cd0d89d"
    assert (
        hexdigest("abc", "sha256")
        == "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )
    assert (
        hexdigest("abc", "sha3_256")
        == "3a985da74fe225b2045c172d6bd390bd855f086e3e9d525b46bfe24511431532"
    )


def test_str_and_bytes_inputs_agree():
    assert hash_message("héllo", "md5") == hash_message("héllo".encode("utf-8"), "md5")
    assert hash_message(Message.from_hex("616263"), "sha1") == hash_message(b"abc", "sha1")


@pytest.mark.parametrize("algorithm", ["md5", "sha256", "sha3_256", "md6_256"])
def test_int_input_is_a_type_error(algorithm):
    with pytest.raises(TypeError):
        hash_message(5, algorithm)


def test_int_key_is_a_type_error():
    with pytest.raises(TypeError):
        hash_message(b"abc", "md6_256", key=5)


def test_md6_key_through_facade():
    plain = hash_message(b"abc", Algorithm.MD6_256)
    keyed = hash_message(b"abc", Algorithm.MD6_256, key=b"secret")
    assert plain != keyed
    with pytest.raises(KeyLengthError):
        hash_message(b"abc", "md6_256", key=bytes(65))


def test_key_rejected_for_other_algorithms():
    with pytest.raises(ParameterError):
        new("sha256", key=b"secret")


def test_algorithm_names_exported():
    assert "sha512_256" in ALGORITHMS
    assert len(ALGORITHMS) == len(Algorithm)


def test_dispatch_logs_at_debug(caplog):
    with caplog.at_level(logging.DEBUG, logger="hashengine"):
        hash_message(b"abc", "md5")
    assert any("md5" in record.getMessage() for record in caplog.records)
    assert all("abc" not in record.getMessage() for record in caplog.records)


def test_word_list_search():
    words = ["password", "letmein", "hunter2", "letmein"]
    target = hexdigest("hunter2", "sha256")
    found = next((w for w in words if hexdigest(Message.from_string(w), "sha256") == target), None)
    assert found == "hunter2"
