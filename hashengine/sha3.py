"""
SHA-3 family (FIPS 202): SHA3-224, SHA3-256, SHA3-384, SHA3-512.

Sponge over Keccak-f[1600]. Each variant picks a rate; the capacity is the
rest of the 1600-bit state, and twice the digest length.
"""

from functools import reduce
from math import log
from operator import xor

from .bits import bits2bytes, rol
from .errors import ParameterError
from .message import Digest, Endianness, as_message
from .padding import sha3_pad

# --------------------------------------------------------------------
#                          Constants & Helpers
# --------------------------------------------------------------------

RoundConstants = [
    0x0000000000000001, 0x0000000000008082, 0x800000000000808A, 0x8000000080008000,
    0x000000000000808B, 0x0000000080000001, 0x8000000080008081, 0x8000000000008009,
    0x000000000000008A, 0x0000000000000088, 0x0000000080008009, 0x000000008000000A,
    0x000000008000808B, 0x800000000000008B, 0x8000000000008089, 0x8000000000008003,
    0x8000000000008002, 0x8000000000000080, 0x000000000000800A, 0x800000008000000A,
    0x8000000080008081, 0x8000000000008080, 0x0000000080000001, 0x8000000080008008,
]

# Indexed [y][x].
RotationConstants = [
    [0, 1, 62, 28, 27],
    [36, 44, 6, 55, 20],
    [3, 10, 43, 25, 39],
    [41, 45, 15, 21, 8],
    [18, 2, 61, 56, 14],
]

STATE_BITS = 1600

# Rate in bytes per output size; capacity is twice the output.
RATES = {224: 144, 256: 136, 384: 104, 512: 72}

# --------------------------------------------------------------------
#                          Keccak Permutation
# --------------------------------------------------------------------


def keccak_round(state, rc):
    a = state.s
    w, h = state.W, state.H
    rangew, rangeh = state.rangeW, state.rangeH
    lanew = state.lanew

    # Theta
    c = [reduce(xor, a[x]) for x in rangew]
    for x in rangew:
        d = c[(x - 1) % w] ^ rol(c[(x + 1) % w], 1, lanew)
        for y in rangeh:
            a[x][y] ^= d

    # Rho & Pi
    b = KeccakState.zero()
    for x in rangew:
        for y in rangeh:
            b[y % w][(2 * x + 3 * y) % h] = rol(a[x][y], RotationConstants[y][x], lanew)

    # Chi
    for x in rangew:
        for y in rangeh:
            a[x][y] = b[x][y] ^ ((~b[(x + 1) % w][y]) & b[(x + 2) % w][y])

    # Iota
    a[0][0] ^= rc


def keccak_f(state):
    nr = 12 + 2 * int(log(state.lanew, 2))
    for ir in range(nr):
        keccak_round(state, RoundConstants[ir])


# --------------------------------------------------------------------
#                          Keccak State & Sponge
# --------------------------------------------------------------------


class KeccakState:
    """5x5 lanes, ``s[x][y]``; lane ``i`` of a byte stream is ``x = i % 5, y = i // 5``."""

    W = 5
    H = 5
    rangeW = range(W)
    rangeH = range(H)

    @staticmethod
    def zero():
        return [[0] * KeccakState.H for _ in KeccakState.rangeW]

    def __init__(self, bitrate, b=STATE_BITS):
        assert bitrate % 64 == 0 and 0 < bitrate < b
        self.bitrate = bitrate
        self.b = b
        self.bitrate_bytes = bits2bytes(bitrate)
        self.rate_lanes = bitrate // 64
        self.lanew = b // 25
        self.s = KeccakState.zero()

    def absorb(self, lanes):
        assert len(lanes) == self.rate_lanes
        for i, lane in enumerate(lanes):
            self.s[i % self.W][i // self.W] ^= lane

    def squeeze(self):
        return [self.s[i % self.W][i // self.W] for i in range(self.rate_lanes)]


class KeccakSponge:
    def __init__(self, bitrate, permfn=keccak_f):
        self.state = KeccakState(bitrate)
        self.permfn = permfn

    def absorb(self, lanes):
        """Absorb already padded input, one rate-sized block at a time."""
        step = self.state.rate_lanes
        assert len(lanes) % step == 0
        for i in range(0, len(lanes), step):
            self.state.absorb(lanes[i : i + step])
            self.permfn(self.state)

    def squeeze(self, n_lanes):
        out = []
        while True:
            out += self.state.squeeze()
            if len(out) >= n_lanes:
                return out[:n_lanes]
            self.permfn(self.state)


# --------------------------------------------------------------------
#                              SHA-3
# --------------------------------------------------------------------


class SHA3:
    def __init__(self, output_bits):
        if output_bits not in RATES:
            raise ParameterError("no SHA-3 variant with a %r-bit output" % (output_bits,))
        self.output_bits = output_bits
        self.name = "sha3_%d" % output_bits
        self.bitrate = RATES[output_bits] * 8

    @property
    def digest_size(self):
        return self.output_bits

    @property
    def block_size(self):
        return bits2bytes(self.bitrate)

    def hash(self, message) -> Digest:
        sponge = KeccakSponge(self.bitrate)
        sponge.absorb(sha3_pad(as_message(message), self.block_size))
        lanes = sponge.squeeze(-(-self.output_bits // 64))
        return Digest.from_u64_words(lanes, Endianness.LITTLE, 0, self.output_bits // 8)

    def __repr__(self):
        return "<SHA3 %s>" % self.name


def sha3_224(data) -> bytes:
    return SHA3(224).hash(as_message(data)).buffer


def sha3_256(data) -> bytes:
    return SHA3(256).hash(as_message(data)).buffer


def sha3_384(data) -> bytes:
    return SHA3(384).hash(as_message(data)).buffer


def sha3_512(data) -> bytes:
    return SHA3(512).hash(as_message(data)).buffer


def sha3_256_hex(data) -> str:
    return sha3_256(data).hex()
