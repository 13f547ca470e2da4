import pytest

from hashengine import Digest, Endianness, MalformedHexError, Message, RangeError

# === Message ===


def test_bit_len_tracks_buffer():
    assert Message.from_bytes(b"").bit_len == 0
    assert Message.from_bytes(b"abc").bit_len == 24
    assert Message.from_string("é").bit_len == 16


def test_from_string_is_utf8():
    assert Message.from_string("héllo").buffer == "héllo".encode("utf-8")


def test_from_hex_accepts_mixed_case():
    m = Message.from_hex("00FFaB")
    assert m.buffer == b"\x00\xff\xab"
    assert m.to_hex() == "00ffab"


@pytest.mark.parametrize("text", ["0", "abc", "0g", "zz", " 0", "0 ", "0x00"])
def test_from_hex_rejects_malformed(text):
    with pytest.raises(MalformedHexError):
        Message.from_hex(text)


def test_hex_errors_are_value_errors():
    with pytest.raises(ValueError):
        Message.from_hex("123")


@pytest.mark.parametrize("text", ["", "00", "DEADbeef", "0123456789abcdefABCDEF"])
def test_hex_round_trip_lowercases(text):
    assert Message.from_hex(text).to_hex() == text.lower()
    assert Digest.from_hex(text).to_hex() == text.lower()


def test_message_is_immutable():
    m = Message.from_bytes(b"abc")
    with pytest.raises(AttributeError):
        m._buffer = b"xyz"
    with pytest.raises(AttributeError):
        m.buffer = b"xyz"


def test_message_rejects_str_in_constructor():
    with pytest.raises(TypeError):
        Message("abc")


@pytest.mark.parametrize("data", [5, 0, None, 1.5, object()])
def test_message_rejects_non_buffers(data):
    with pytest.raises(TypeError):
        Message(data)


def test_message_accepts_buffers():
    assert Message(bytearray(b"abc")) == Message(b"abc")
    assert Message(memoryview(b"abc")) == Message(b"abc")
    assert type(Message(bytearray(b"abc")).buffer) is bytes


def test_to_words():
    m = Message.from_hex("0102030405060708")
    assert m.to_words(32, Endianness.BIG) == [0x01020304, 0x05060708]
    assert m.to_words(32, Endianness.LITTLE) == [0x04030201, 0x08070605]
    assert m.to_words(64, Endianness.BIG) == [0x0102030405060708]


def test_to_words_requires_whole_words():
    with pytest.raises(RangeError):
        Message.from_bytes(b"abc").to_words(32, Endianness.BIG)


# === Digest ===


def test_digest_from_words_endianness():
    words = [0x01020304, 0xA0B0C0D0]
    assert Digest.from_u32_words(words, Endianness.BIG).to_hex() == "01020304a0b0c0d0"
    assert Digest.from_u32_words(words, Endianness.LITTLE).to_hex() == "04030201d0c0b0a0"
    assert Digest.from_u64_words([1], Endianness.LITTLE).to_hex() == "0100000000000000"


def test_digest_from_words_range():
    d = Digest.from_u32_words([0x00112233, 0x44556677], Endianness.BIG, 1, 6)
    assert d.to_hex() == "1122334455"
    assert d.digest_size == 40
    assert len(d) == 5


def test_digest_range_full_buffer_is_allowed():
    d = Digest.from_u64_words([0, 0], Endianness.BIG, 0, 16)
    assert len(d) == 16


@pytest.mark.parametrize("start,end", [(5, 4), (0, 9), (-1, 4), (8, 9)])
def test_digest_range_out_of_bounds(start, end):
    with pytest.raises(RangeError):
        Digest.from_u32_words([1, 2], Endianness.BIG, start, end)


def test_digest_value_semantics():
    a = Digest.from_hex("abcd")
    b = Digest.from_bytes(b"\xab\xcd")
    assert a == b
    assert hash(a) == hash(b)
    assert str(a) == "abcd"
    assert bytes(a) == b"\xab\xcd"
    assert a != Digest.from_hex("abce")


def test_digest_size_must_fit_buffer():
    assert Digest(b"\xff\xe0", 11).digest_size == 11
    with pytest.raises(RangeError):
        Digest(b"\xff\xe0", 17)
    with pytest.raises(RangeError):
        Digest(b"\xff\xe0", 8)


def test_digest_rejects_non_buffers():
    with pytest.raises(TypeError):
        Digest(5)
    with pytest.raises(TypeError):
        Digest("abcd")
