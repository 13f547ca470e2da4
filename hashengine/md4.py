"""
MD4 (RFC 1320).
"""

from .bits import add32, rol32
from .merkle import MerkleDamgardHash
from .message import Endianness, as_message

# --------------------------------------------------------------------
#                          Constants & Helpers
# --------------------------------------------------------------------

InitialState = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

RoundConstants = (0x00000000, 0x5A827999, 0x6ED9EBA1)

ShiftAmounts = (
    (3, 7, 11, 19),
    (3, 5, 9, 13),
    (3, 9, 11, 15),
)

MessageIndex = (
    tuple(range(16)),
    (0, 4, 8, 12, 1, 5, 9, 13, 2, 6, 10, 14, 3, 7, 11, 15),
    (0, 8, 4, 12, 2, 10, 6, 14, 1, 9, 5, 13, 3, 11, 7, 15),
)

ROUNDS = 48


def f(x, y, z):
    return (x & y) | (~x & z)


def g(x, y, z):
    return (x & y) | (x & z) | (y & z)


def h(x, y, z):
    return x ^ y ^ z


def round_function(i):
    if i < 16:
        return f
    if i < 32:
        return g
    return h


# --------------------------------------------------------------------
#                                MD4
# --------------------------------------------------------------------


class MD4(MerkleDamgardHash):
    name = "md4"
    word_bits = 32
    endianness = Endianness.LITTLE
    initial_state = InitialState
    output_bits = 128

    def compress(self, state, block):
        a, b, c, d = state
        for i in range(ROUNDS):
            stage, j = divmod(i, 16)
            fn = round_function(i)
            t = add32(a, fn(b, c, d), block[MessageIndex[stage][j]], RoundConstants[stage])
            a, b, c, d = d, rol32(t, ShiftAmounts[stage][j % 4]), b, c
        return [add32(x, y) for x, y in zip(state, (a, b, c, d))]


def md4(data) -> bytes:
    return MD4().hash(as_message(data)).buffer


def md4_hex(data) -> str:
    return md4(data).hex()
