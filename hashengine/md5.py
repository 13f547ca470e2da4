"""
MD5 (RFC 1321).
"""

import math

from .bits import add32, rol32
from .merkle import MerkleDamgardHash
from .message import Endianness, as_message

# --------------------------------------------------------------------
#                          Constants & Helpers
# --------------------------------------------------------------------

InitialState = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# T[i] = floor(2^32 * |sin(i + 1)|)
RoundConstants = tuple(int(2**32 * abs(math.sin(i + 1))) for i in range(64))

ShiftAmounts = (
    (7, 12, 17, 22),
    (5, 9, 14, 20),
    (4, 11, 16, 23),
    (6, 10, 15, 21),
)

MessageIndex = tuple(
    [i for i in range(16)]
    + [(5 * i + 1) % 16 for i in range(16)]
    + [(3 * i + 5) % 16 for i in range(16)]
    + [(7 * i) % 16 for i in range(16)]
)

ROUNDS = 64


def f(x, y, z):
    return (x & y) | (~x & z)


def g(x, y, z):
    return (x & z) | (y & ~z)


def h(x, y, z):
    return x ^ y ^ z


def i_(x, y, z):
    return (y ^ (x | ~z)) & 0xFFFFFFFF


def round_function(i):
    if i < 16:
        return f
    if i < 32:
        return g
    if i < 48:
        return h
    return i_


# --------------------------------------------------------------------
#                                MD5
# --------------------------------------------------------------------


class MD5(MerkleDamgardHash):
    name = "md5"
    word_bits = 32
    endianness = Endianness.LITTLE
    initial_state = InitialState
    output_bits = 128

    def compress(self, state, block):
        a, b, c, d = state
        for i in range(ROUNDS):
            fn = round_function(i)
            t = add32(a, fn(b, c, d), block[MessageIndex[i]], RoundConstants[i])
            a, b, c, d = d, add32(b, rol32(t, ShiftAmounts[i // 16][i % 4])), b, c
        return [add32(x, y) for x, y in zip(state, (a, b, c, d))]


def md5(data) -> bytes:
    return MD5().hash(as_message(data)).buffer


def md5_hex(data) -> str:
    return md5(data).hex()
