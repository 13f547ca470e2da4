"""
MD6 (Rivest et al., 2008).

The message is reduced level by level: each level zero-pads its input to
whole 64-word chunks, compresses every chunk to 16 words, and hands the
concatenated outputs to the next level. Reduction stops once a level fits in
a single chunk. If the tree would grow taller than the mode parameter ``L``,
the remaining input is instead chained sequentially (SEQ mode).

Words are 64-bit and big-endian throughout.
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Optional, Union

from .bits import Mask64, bits2bytes, rol
from .errors import KeyLengthError, ParameterError
from .message import Digest, Endianness, as_bytes, as_message, bytes_to_words, words_to_bytes
from .padding import MD6_WORD_BITS, md6_message_words, md6_pad

logger = logging.getLogger(__name__)

# --------------------------------------------------------------------
#                          Constants & Helpers
# --------------------------------------------------------------------

# Fractional part of sqrt(6).
Q = (
    0x7311C2812425CFA0, 0x6432286434AAC8E7, 0xB60450E9EF68B7C1, 0xE8FB23908D9F06F1,
    0xDD2E76CBA691E5BF, 0x0CD0D63B2C30BC41, 0x1F8CCF6823058F8A, 0x54E5ED5B88E3775D,
    0x4AD12AAE0A6D6031, 0x3E7F16BB88222E0D, 0x8AF8671D3FB50C2C, 0x995AD1178BD25C31,
    0xC878C1DD04C4B633, 0x3B72066C7A1552AC, 0x0D6F3522631EFFCB,
)

# Feedback tap positions, counted back from the word being computed.
T0, T1, T2, T3, T4 = 17, 18, 21, 31, 67

RightShifts = (10, 5, 13, 10, 11, 12, 2, 7, 14, 15, 7, 13, 11, 7, 6, 12)
LeftShifts = (11, 24, 9, 16, 15, 9, 27, 15, 6, 2, 29, 8, 15, 5, 31, 9)

S0 = 0x0123456789ABCDEF
SMASK = 0x7311C2812425CFA0

Q_WORDS = len(Q)
KEY_WORDS = 8
CHAIN_WORDS = 16      # c: compression output
BLOCK_WORDS = 64      # b: data words per compression input
INPUT_WORDS = Q_WORDS + KEY_WORDS + 1 + 1 + BLOCK_WORDS  # n = 89

BLOCK_BITS = BLOCK_WORDS * MD6_WORD_BITS
SEQ_BLOCK_BITS = (BLOCK_WORDS - CHAIN_WORDS) * MD6_WORD_BITS

MAX_KEY_BYTES = KEY_WORDS * 8
MAX_DIGEST_BITS = 512
MAX_ROUNDS = (1 << 12) - 1
MAX_MODE = 64
DEFAULT_MODE = 64


def default_rounds(d, key_len=0):
    r = 40 + d // 4
    if key_len > 0:
        r = max(80, r)
    return r


def round_constants(r):
    """S_0 .. S_{r-1}: rotate left by one and fold in the masked bits."""
    out = [0] * r
    s = S0
    for j in range(r):
        out[j] = s
        s = rol(s, 1, 64) ^ (s & SMASK)
    return out


def control_word(r, mode, z, p, key_len, d):
    """V: r (12 bits) | L (8) | z (4) | p (16) | keylen (8) | d (12)."""
    return (r << 48) | (mode << 40) | (z << 36) | (p << 20) | (key_len << 12) | d


def node_id(level, index):
    """U: level (8 bits) | index within the level (56 bits)."""
    return (level << 56) | index


# --------------------------------------------------------------------
#                          Key & Configuration
# --------------------------------------------------------------------


class MD6Key:
    """Up to 64 key bytes, kept alongside their zero-padded 8-word form."""

    __slots__ = ("key", "key_len", "words")

    def __init__(self, key=b""):
        if isinstance(key, str):
            key = key.encode("utf-8")
        key = as_bytes(key)
        if len(key) > MAX_KEY_BYTES:
            raise KeyLengthError(
                "MD6 key is %d bytes; at most %d allowed" % (len(key), MAX_KEY_BYTES)
            )
        padded = key + b"\x00" * (MAX_KEY_BYTES - len(key))
        object.__setattr__(self, "key", key)
        object.__setattr__(self, "key_len", len(key))
        object.__setattr__(self, "words", tuple(bytes_to_words(padded, MD6_WORD_BITS, Endianness.BIG)))

    def __setattr__(self, name, value):
        raise AttributeError("MD6Key is immutable")

    def __eq__(self, other):
        if isinstance(other, MD6Key):
            return self.key == other.key
        return NotImplemented

    def __hash__(self):
        return hash((MD6Key, self.key))

    def __repr__(self):
        return "MD6Key(key_len=%d)" % self.key_len


@dataclasses.dataclass(frozen=True)
class MD6Config:
    """Validated MD6 parameters. ``r=None`` selects the published default."""

    d: int = 256
    key: Optional[Union[MD6Key, bytes]] = None
    r: Optional[int] = None
    mode: int = DEFAULT_MODE

    def __post_init__(self):
        if not isinstance(self.d, int) or not 1 <= self.d <= MAX_DIGEST_BITS:
            raise ParameterError("MD6 digest length must be 1..%d bits, got %r" % (MAX_DIGEST_BITS, self.d))
        if not isinstance(self.mode, int) or not 0 <= self.mode <= MAX_MODE:
            raise ParameterError("MD6 mode L must be 0..%d, got %r" % (MAX_MODE, self.mode))
        key = self.key
        if key is None:
            key = MD6Key()
        elif not isinstance(key, MD6Key):
            key = MD6Key(key)
        object.__setattr__(self, "key", key)
        if self.r is None:
            object.__setattr__(self, "r", default_rounds(self.d, key.key_len))
        elif not isinstance(self.r, int) or not 0 <= self.r <= MAX_ROUNDS:
            raise ParameterError("MD6 round count must be 0..%d, got %r" % (MAX_ROUNDS, self.r))


# --------------------------------------------------------------------
#                            Compression
# --------------------------------------------------------------------


def compress(n_words, r, constants=None):
    """Run ``16 * r`` feedback steps over the 89 input words; return the last 16."""
    assert len(n_words) == INPUT_WORDS
    if constants is None:
        constants = round_constants(r)
    n = INPUT_WORDS
    t = r * CHAIN_WORDS
    a = [0] * (n + t)
    a[:n] = n_words
    i = n
    for j in range(r):
        s = constants[j]
        for step in range(CHAIN_WORDS):
            x = s ^ a[i - n] ^ a[i - T0]
            x ^= (a[i - T1] & a[i - T2]) ^ (a[i - T3] & a[i - T4])
            x ^= x >> RightShifts[step]
            a[i] = x ^ ((x << LeftShifts[step]) & Mask64)
            i += 1
    return a[n + t - CHAIN_WORDS :]


# --------------------------------------------------------------------
#                              Reducer
# --------------------------------------------------------------------


class MD6:
    output_bits = 256

    def __init__(self, d=None, key=None, rounds=None, mode=DEFAULT_MODE, config=None):
        if config is None:
            config = MD6Config(d=self.output_bits if d is None else d, key=key, r=rounds, mode=mode)
        self.config = config
        self.output_bits = config.d
        self.name = "md6_%d" % config.d
        self._constants = round_constants(config.r)

    @property
    def digest_size(self):
        return self.config.d

    @property
    def block_size(self):
        return BLOCK_BITS // 8

    def _compress_node(self, level, index, z, p, data):
        cfg = self.config
        v = control_word(cfg.r, cfg.mode, z, p, cfg.key.key_len, cfg.d)
        n_words = list(Q) + list(cfg.key.words) + [node_id(level, index), v] + data
        return compress(n_words, cfg.r, self._constants)

    def par(self, words, bit_len, level):
        """One tree level: every 64-word chunk becomes 16 words."""
        padded, pad_bits = md6_pad(words, bit_len, BLOCK_BITS)
        chunks = len(padded) // BLOCK_WORDS
        logger.debug("md6 level %d: %d chunk(s)", level, chunks)
        z = 1 if chunks == 1 else 0
        out = [0] * (chunks * CHAIN_WORDS)
        for i in range(chunks):
            p = pad_bits if i == chunks - 1 else 0
            block = padded[i * BLOCK_WORDS : (i + 1) * BLOCK_WORDS]
            out[i * CHAIN_WORDS : (i + 1) * CHAIN_WORDS] = self._compress_node(level, i, z, p, block)
        return out

    def seq(self, words, bit_len, level):
        """Chain 48-word blocks through a 16-word value starting at zero."""
        padded, pad_bits = md6_pad(words, bit_len, SEQ_BLOCK_BITS)
        step = BLOCK_WORDS - CHAIN_WORDS
        blocks = len(padded) // step
        logger.debug("md6 sequential level %d: %d block(s)", level, blocks)
        chain = [0] * CHAIN_WORDS
        for i in range(blocks):
            last = i == blocks - 1
            data = chain + padded[i * step : (i + 1) * step]
            chain = self._compress_node(level, i, 1 if last else 0, pad_bits if last else 0, data)
        return chain

    def reduce(self, message):
        """Return the final 16-word chaining value for ``message``."""
        words = md6_message_words(message)
        bit_len = message.bit_len
        level = 0
        while True:
            level += 1
            if level == self.config.mode + 1:
                return self.seq(words, bit_len, level)
            words = self.par(words, bit_len, level)
            bit_len = len(words) * MD6_WORD_BITS
            if len(words) == CHAIN_WORDS:
                return words

    def hash(self, message) -> Digest:
        chain = self.reduce(as_message(message))
        d = self.config.d
        raw = words_to_bytes(chain, MD6_WORD_BITS, Endianness.BIG)
        value = int.from_bytes(raw, "big") & ((1 << d) - 1)
        size = bits2bytes(d)
        return Digest((value << (size * 8 - d)).to_bytes(size, "big"), d)

    def __repr__(self):
        return "<MD6 %s r=%d L=%d>" % (self.name, self.config.r, self.config.mode)


class MD6_160(MD6):
    output_bits = 160


class MD6_224(MD6):
    output_bits = 224


class MD6_256(MD6):
    output_bits = 256


class MD6_384(MD6):
    output_bits = 384


class MD6_512(MD6):
    output_bits = 512


def md6(data, d=256, key=None) -> bytes:
    return MD6(d, key=key).hash(as_message(data)).buffer


def md6_hex(data, d=256, key=None) -> str:
    return md6(data, d, key).hex()
