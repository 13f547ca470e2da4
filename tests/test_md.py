import hashlib

import pytest

from hashengine import MD2, MD4, MD5, SHA0, SHA1, Message
from hashengine.md5 import RoundConstants, md5_hex
from hashengine.sha1 import sha0_hex, sha1_hex

RFC_INPUTS = [
    "",
    "a",
    "abc",
    "message digest",
    "abcdefghijklmnopqrstuvwxyz",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789",
    "12345678901234567890123456789012345678901234567890123456789012345678901234567890",
]

MD2_VECTORS = [
    "8350e5a3e24c153df2275c9f80692773",
    "32ec01ec4a6dac72c0ab96fb34c0b5d1",
    "da853b0d3f88d99b30283a69e6ded6bb",
    "ab4f496bfb2a530b219ff33031fe06b0",
    "4e8ddff3650292ab5a4108c3aa47940b",
    "da33def2a42df13975352846c30338cd",
    "d5976f79d83d3a0dc9806c3c66f3efd8",
]

MD4_VECTORS = [
    "31d6cfe0d16ae931b73c59d7e0c089c0",
    "bde52cb31de33e46245e05fbdbd6fb24",
    "a448017aaf21d8525fc10ae87aa6729d",
    "d9130a8164549fe818874806e1c7014b",
    "d79e1c308aa5bbcdeea8ed63df412da9",
    "043f8582f241db351ce627e153e7f0e4",
    "e33b4ddc9c38f2199c3e7b164fcc0536",
]

MD5_VECTORS = [
    "d41d8cd98f00b204e9800998ecf8427e",
    "0cc175b9c0f1b6a831c399e269772661",
    "900150983cd24fb0d6963f7d28e17f72",
    "f96b697d7cb7938d525a2f31aaf161d0",
    "c3fcd3d76192e4007dfb496cca67e13b",
    "d174ab98d277d9f5a5611c2c9f419d9f",
    "57edf4a22be3c955ac49da2e2107b67a",
]

# Lengths around the one- and two-block padding thresholds.
BOUNDARY_LENGTHS = [0, 1, 54, 55, 56, 57, 63, 64, 65, 119, 120, 127, 128, 200]


def _data(length):
    return bytes((i * 31 + 7) % 256 for i in range(length))


# === MD2 / MD4 / MD5 ===


@pytest.mark.parametrize("text,expected", list(zip(RFC_INPUTS, MD2_VECTORS)))
def test_md2_rfc1319_suite(text, expected):
    assert MD2().hash(Message.from_string(text)).to_hex() == expected


@pytest.mark.parametrize("text,expected", list(zip(RFC_INPUTS, MD4_VECTORS)))
def test_md4_rfc1320_suite(text, expected):
    assert MD4().hash(Message.from_string(text)).to_hex() == expected


@pytest.mark.parametrize("text,expected", list(zip(RFC_INPUTS, MD5_VECTORS)))
def test_md5_rfc1321_suite(text, expected):
    assert MD5().hash(Message.from_string(text)).to_hex() == expected


def test_md5_empty():
    assert md5_hex(b"") == "d41d8cd98f00b204e9800998ecf8427e"


def test_md5_sine_table():
    assert RoundConstants[0] == 0xD76AA478
    assert RoundConstants[1] == 0xE8C7B756
    assert RoundConstants[63] == 0xEB86D391


@pytest.mark.parametrize("length", BOUNDARY_LENGTHS)
def test_md5_matches_hashlib(length):
    data = _data(length)
    assert MD5().hash(Message(data)).buffer == hashlib.md5(data).digest()


# === SHA-0 / SHA-1 ===


def test_sha1_abc():
    assert sha1_hex(b"abc") == "a9993e364706816aba3e25717850c26c9cd0d89d"


def test_sha1_two_blocks():
    msg = b"abcdbcdecdefdefgefghfghighijhijkijkljklmklmnlmnomnopnopq"
    assert sha1_hex(msg) == "84983e441c3bd26ebaae4aa1f95129e5e54670f1"


def test_sha0_abc():
    assert sha0_hex(b"abc") == "0164b8a914cd2a5e74c4f7ff082c4d97f1edf880"


def test_sha0_differs_from_sha1_only_after_schedule_expansion():
    assert SHA0().hash(Message(b"abc")) != SHA1().hash(Message(b"abc"))
    assert SHA0().digest_size == SHA1().digest_size == 160


@pytest.mark.parametrize("length", BOUNDARY_LENGTHS)
def test_sha1_matches_hashlib(length):
    data = _data(length)
    assert SHA1().hash(Message(data)).buffer == hashlib.sha1(data).digest()


def test_sha1_many_blocks():
    data = b"a" * 1000
    assert SHA1().hash(Message(data)).to_hex() == hashlib.sha1(data).hexdigest()
