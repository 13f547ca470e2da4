"""
SHA-0 and SHA-1 (FIPS 180-1).

The two differ only in the message schedule: SHA-1 rotates each expanded
word left by one bit, SHA-0 does not.
"""

from .bits import add32, rol32
from .merkle import MerkleDamgardHash
from .message import Endianness, as_message

# --------------------------------------------------------------------
#                          Constants & Helpers
# --------------------------------------------------------------------

InitialState = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476, 0xC3D2E1F0)

RoundConstants = (0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xCA62C1D6)

ROUNDS = 80


def choose(x, y, z):
    return (x & y) | (~x & z)


def parity(x, y, z):
    return x ^ y ^ z


def majority(x, y, z):
    return (x & y) | (x & z) | (y & z)


def round_function(i):
    if i < 20:
        return choose
    if i < 40:
        return parity
    if i < 60:
        return majority
    return parity


def expand(block, rotate):
    w = [0] * ROUNDS
    w[:16] = block
    for t in range(16, ROUNDS):
        x = w[t - 3] ^ w[t - 8] ^ w[t - 14] ^ w[t - 16]
        w[t] = rol32(x, 1) if rotate else x
    return w


# --------------------------------------------------------------------
#                            SHA-0 / SHA-1
# --------------------------------------------------------------------


class SHA1(MerkleDamgardHash):
    name = "sha1"
    word_bits = 32
    endianness = Endianness.BIG
    initial_state = InitialState
    output_bits = 160
    schedule_rotate = True

    def compress(self, state, block):
        w = expand(block, self.schedule_rotate)
        a, b, c, d, e = state
        for t in range(ROUNDS):
            fn = round_function(t)
            temp = add32(rol32(a, 5), fn(b, c, d), e, RoundConstants[t // 20], w[t])
            a, b, c, d, e = temp, a, rol32(b, 30), c, d
        return [add32(x, y) for x, y in zip(state, (a, b, c, d, e))]


class SHA0(SHA1):
    name = "sha0"
    schedule_rotate = False


def sha0(data) -> bytes:
    return SHA0().hash(as_message(data)).buffer


def sha0_hex(data) -> str:
    return sha0(data).hex()


def sha1(data) -> bytes:
    return SHA1().hash(as_message(data)).buffer


def sha1_hex(data) -> str:
    return sha1(data).hex()
