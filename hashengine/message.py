"""
Message and Digest containers.

Both are plain byte holders with hex/word conversions; neither knows anything
about a particular algorithm.
"""

from __future__ import annotations

import enum
import string

from .errors import MalformedHexError, ParameterError, RangeError

_HEX_CHARS = frozenset(string.hexdigits)

WORD_WIDTHS = (32, 64)


class Endianness(enum.Enum):
    BIG = "big"
    LITTLE = "little"


def _parse_hex(text):
    if not isinstance(text, str):
        raise TypeError("hex input must be str, not %s" % type(text).__name__)
    if len(text) % 2:
        raise MalformedHexError("odd-length hex string (%d characters)" % len(text))
    for pos, ch in enumerate(text):
        if ch not in _HEX_CHARS:
            raise MalformedHexError("invalid hex character %r at position %d" % (ch, pos))
    return bytes.fromhex(text)


def as_bytes(data):
    """Copy a bytes-like object; ``int`` and other non-buffers raise TypeError."""
    return bytes(memoryview(data))


def _check_width(word_bits):
    if word_bits not in WORD_WIDTHS:
        raise ParameterError("unsupported word width: %r" % (word_bits,))
    return word_bits // 8


def words_to_bytes(words, word_bits, endianness):
    width = _check_width(word_bits)
    order = Endianness(endianness).value
    return b"".join(w.to_bytes(width, order) for w in words)


def bytes_to_words(data, word_bits, endianness):
    width = _check_width(word_bits)
    if len(data) % width:
        raise RangeError(
            "buffer of %d bytes is not a whole number of %d-bit words" % (len(data), word_bits)
        )
    order = Endianness(endianness).value
    return [int.from_bytes(data[i : i + width], order) for i in range(0, len(data), width)]


class Message:
    """An immutable byte message; ``bit_len`` is always ``len(buffer) * 8``."""

    __slots__ = ("_buffer",)

    def __init__(self, data=b""):
        if isinstance(data, str):
            raise TypeError("use Message.from_string() for text input")
        object.__setattr__(self, "_buffer", as_bytes(data))

    def __setattr__(self, name, value):
        raise AttributeError("Message is immutable")

    @classmethod
    def from_bytes(cls, data: bytes) -> Message:
        return cls(data)

    @classmethod
    def from_string(cls, text: str) -> Message:
        return cls(text.encode("utf-8"))

    @classmethod
    def from_hex(cls, text: str) -> Message:
        return cls(_parse_hex(text))

    @property
    def buffer(self) -> bytes:
        return self._buffer

    @property
    def bit_len(self) -> int:
        return len(self._buffer) * 8

    def to_words(self, word_bits, endianness):
        return bytes_to_words(self._buffer, word_bits, endianness)

    def to_hex(self) -> str:
        return self._buffer.hex()

    def __len__(self):
        return len(self._buffer)

    def __bytes__(self):
        return self._buffer

    def __eq__(self, other):
        if isinstance(other, Message):
            return self._buffer == other._buffer
        return NotImplemented

    def __hash__(self):
        return hash((Message, self._buffer))

    def __repr__(self):
        return "Message(bit_len=%d)" % self.bit_len


class Digest:
    """A finished hash value.

    ``digest_size`` is in bits. It equals ``len(buffer) * 8`` except for MD6
    outputs whose bit length is not a multiple of 8, where the trailing bits
    of the last byte are zero.
    """

    __slots__ = ("_buffer", "_digest_size")

    def __init__(self, data, digest_size=None):
        data = as_bytes(data)
        if digest_size is None:
            digest_size = len(data) * 8
        if data and not (len(data) - 1) * 8 < digest_size <= len(data) * 8:
            raise RangeError("digest_size %d does not match %d bytes" % (digest_size, len(data)))
        object.__setattr__(self, "_buffer", data)
        object.__setattr__(self, "_digest_size", digest_size)

    def __setattr__(self, name, value):
        raise AttributeError("Digest is immutable")

    @classmethod
    def from_bytes(cls, data: bytes) -> Digest:
        return cls(data)

    @classmethod
    def from_hex(cls, text: str) -> Digest:
        return cls(_parse_hex(text))

    @classmethod
    def from_words(cls, words, word_bits, endianness, start=None, end=None) -> Digest:
        """Serialize ``words`` and keep the byte range ``[start, end)``.

        The range is checked against the serialized buffer; it is never
        clamped.
        """
        data = words_to_bytes(words, word_bits, endianness)
        if start is None:
            start = 0
        if end is None:
            end = len(data)
        if start < 0 or start > end or end > len(data):
            raise RangeError(
                "byte range [%d, %d) outside %d-byte word buffer" % (start, end, len(data))
            )
        return cls(data[start:end])

    @classmethod
    def from_u32_words(cls, words, endianness, start=None, end=None) -> Digest:
        return cls.from_words(words, 32, endianness, start, end)

    @classmethod
    def from_u64_words(cls, words, endianness, start=None, end=None) -> Digest:
        return cls.from_words(words, 64, endianness, start, end)

    @property
    def buffer(self) -> bytes:
        return self._buffer

    @property
    def digest_size(self) -> int:
        return self._digest_size

    def to_hex(self) -> str:
        return self._buffer.hex()

    def __str__(self):
        return self.to_hex()

    def __len__(self):
        return len(self._buffer)

    def __bytes__(self):
        return self._buffer

    def __eq__(self, other):
        if isinstance(other, Digest):
            return self._buffer == other._buffer and self._digest_size == other._digest_size
        return NotImplemented

    def __hash__(self):
        return hash((Digest, self._buffer, self._digest_size))

    def __repr__(self):
        return "Digest(%r)" % self.to_hex()


def as_message(data):
    """Wrap raw input for hashing; ``str`` is encoded as UTF-8."""
    if isinstance(data, Message):
        return data
    if isinstance(data, str):
        return Message.from_string(data)
    return Message.from_bytes(data)
