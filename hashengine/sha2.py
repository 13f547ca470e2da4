"""
SHA-2 family (FIPS 180-4): SHA-224, SHA-256, SHA-384, SHA-512,
SHA-512/224 and SHA-512/256.

The 32-bit and 64-bit variants share one round structure and differ in word
width, round count, rotation amounts and constant tables. Truncated variants
run the full state and keep a leading byte range of it.
"""

from .bits import Mask32, Mask64, ror
from .merkle import MerkleDamgardHash
from .message import Endianness, as_message

# --------------------------------------------------------------------
#                             Constants
# --------------------------------------------------------------------

RoundConstants64 = (
    0x428A2F98D728AE22, 0x7137449123EF65CD, 0xB5C0FBCFEC4D3B2F, 0xE9B5DBA58189DBBC,
    0x3956C25BF348B538, 0x59F111F1B605D019, 0x923F82A4AF194F9B, 0xAB1C5ED5DA6D8118,
    0xD807AA98A3030242, 0x12835B0145706FBE, 0x243185BE4EE4B28C, 0x550C7DC3D5FFB4E2,
    0x72BE5D74F27B896F, 0x80DEB1FE3B1696B1, 0x9BDC06A725C71235, 0xC19BF174CF692694,
    0xE49B69C19EF14AD2, 0xEFBE4786384F25E3, 0x0FC19DC68B8CD5B5, 0x240CA1CC77AC9C65,
    0x2DE92C6F592B0275, 0x4A7484AA6EA6E483, 0x5CB0A9DCBD41FBD4, 0x76F988DA831153B5,
    0x983E5152EE66DFAB, 0xA831C66D2DB43210, 0xB00327C898FB213F, 0xBF597FC7BEEF0EE4,
    0xC6E00BF33DA88FC2, 0xD5A79147930AA725, 0x06CA6351E003826F, 0x142929670A0E6E70,
    0x27B70A8546D22FFC, 0x2E1B21385C26C926, 0x4D2C6DFC5AC42AED, 0x53380D139D95B3DF,
    0x650A73548BAF63DE, 0x766A0ABB3C77B2A8, 0x81C2C92E47EDAEE6, 0x92722C851482353B,
    0xA2BFE8A14CF10364, 0xA81A664BBC423001, 0xC24B8B70D0F89791, 0xC76C51A30654BE30,
    0xD192E819D6EF5218, 0xD69906245565A910, 0xF40E35855771202A, 0x106AA07032BBD1B8,
    0x19A4C116B8D2D0C8, 0x1E376C085141AB53, 0x2748774CDF8EEB99, 0x34B0BCB5E19B48A8,
    0x391C0CB3C5C95A63, 0x4ED8AA4AE3418ACB, 0x5B9CCA4F7763E373, 0x682E6FF3D6B2B8A3,
    0x748F82EE5DEFB2FC, 0x78A5636F43172F60, 0x84C87814A1F0AB72, 0x8CC702081A6439EC,
    0x90BEFFFA23631E28, 0xA4506CEBDE82BDE9, 0xBEF9A3F7B2C67915, 0xC67178F2E372532B,
    0xCA273ECEEA26619C, 0xD186B8C721C0C207, 0xEADA7DD6CDE0EB1E, 0xF57D4F7FEE6ED178,
    0x06F067AA72176FBA, 0x0A637DC5A2C898A6, 0x113F9804BEF90DAE, 0x1B710B35131C471B,
    0x28DB77F523047D84, 0x32CAAB7B40C72493, 0x3C9EBE0A15C9BEBC, 0x431D67C49C100D4C,
    0x4CC5D4BECB3E42B6, 0x597F299CFC657E2A, 0x5FCB6FAB3AD6FAEC, 0x6C44198C4A475817,
)

# Same cube-root fractions, first 32 bits.
RoundConstants32 = tuple(k >> 32 for k in RoundConstants64[:64])

SHA512Initial = (
    0x6A09E667F3BCC908, 0xBB67AE8584CAA73B, 0x3C6EF372FE94F82B, 0xA54FF53A5F1D36F1,
    0x510E527FADE682D1, 0x9B05688C2B3E6C1F, 0x1F83D9ABFB41BD6B, 0x5BE0CD19137E2179,
)

SHA384Initial = (
    0xCBBB9D5DC1059ED8, 0x629A292A367CD507, 0x9159015A3070DD17, 0x152FECD8F70E5939,
    0x67332667FFC00B31, 0x8EB44A8768581511, 0xDB0C2E0D64F98FA7, 0x47B5481DBEFA4FA4,
)

SHA512_224Initial = (
    0x8C3D37C819544DA2, 0x73E1996689DCD4D6, 0x1DFAB7AE32FF9C82, 0x679DD514582F9FCF,
    0x0F6D2B697BD44DA8, 0x77E36F7304C48942, 0x3F9D85A86A1D36C8, 0x1112E6AD91D692A1,
)

SHA512_256Initial = (
    0x22312194FC2BF72C, 0x9F555FA3C84C64C2, 0x2393B86B6F53B151, 0x963877195940EABD,
    0x96283EE2A88EFFE3, 0xBE5E1E2553863992, 0x2B0199FC2C85B8AA, 0x0EB72DDC81C52CA2,
)

SHA256Initial = tuple(v >> 32 for v in SHA512Initial)

# Second 32 bits of the SHA-384 fractions.
SHA224Initial = tuple(v & Mask32 for v in SHA384Initial)

# (Sigma0, Sigma1, sigma0, sigma1); the last entry of each small sigma is a shift.
Rotations32 = ((2, 13, 22), (6, 11, 25), (7, 18, 3), (17, 19, 10))
Rotations64 = ((28, 34, 39), (14, 18, 41), (1, 8, 7), (19, 61, 6))


def ch(x, y, z):
    return (x & y) ^ (~x & z)


def maj(x, y, z):
    return (x & y) ^ (x & z) ^ (y & z)


# --------------------------------------------------------------------
#                              Core
# --------------------------------------------------------------------


class SHA2Hash(MerkleDamgardHash):
    endianness = Endianness.BIG
    rounds = 64
    round_constants = RoundConstants32
    rotations = Rotations32

    def _big_sigma(self, x, which):
        r0, r1, r2 = self.rotations[which]
        bits = self.word_bits
        return ror(x, r0, bits) ^ ror(x, r1, bits) ^ ror(x, r2, bits)

    def _small_sigma(self, x, which):
        r0, r1, s = self.rotations[2 + which]
        bits = self.word_bits
        return ror(x, r0, bits) ^ ror(x, r1, bits) ^ (x >> s)

    def schedule(self, block):
        mask = Mask64 if self.word_bits == 64 else Mask32
        w = [0] * self.rounds
        w[:16] = block
        for t in range(16, self.rounds):
            w[t] = (
                self._small_sigma(w[t - 2], 1) + w[t - 7] + self._small_sigma(w[t - 15], 0) + w[t - 16]
            ) & mask
        return w

    def compress(self, state, block):
        mask = Mask64 if self.word_bits == 64 else Mask32
        w = self.schedule(block)
        k = self.round_constants
        a, b, c, d, e, f, g, h = state
        for t in range(self.rounds):
            t1 = h + self._big_sigma(e, 1) + ch(e, f, g) + k[t] + w[t]
            t2 = self._big_sigma(a, 0) + maj(a, b, c)
            h, g, f, e = g, f, e, (d + t1) & mask
            d, c, b, a = c, b, a, (t1 + t2) & mask
        return [(x + y) & mask for x, y in zip(state, (a, b, c, d, e, f, g, h))]


class SHA256(SHA2Hash):
    name = "sha256"
    word_bits = 32
    initial_state = SHA256Initial
    output_bits = 256


class SHA224(SHA256):
    name = "sha224"
    initial_state = SHA224Initial
    output_bits = 224


class SHA512(SHA2Hash):
    name = "sha512"
    word_bits = 64
    rounds = 80
    round_constants = RoundConstants64
    rotations = Rotations64
    initial_state = SHA512Initial
    output_bits = 512


class SHA384(SHA512):
    name = "sha384"
    initial_state = SHA384Initial
    output_bits = 384


class SHA512_224(SHA512):
    name = "sha512_224"
    initial_state = SHA512_224Initial
    output_bits = 224


class SHA512_256(SHA512):
    name = "sha512_256"
    initial_state = SHA512_256Initial
    output_bits = 256


def sha224(data) -> bytes:
    return SHA224().hash(as_message(data)).buffer


def sha256(data) -> bytes:
    return SHA256().hash(as_message(data)).buffer


def sha384(data) -> bytes:
    return SHA384().hash(as_message(data)).buffer


def sha512(data) -> bytes:
    return SHA512().hash(as_message(data)).buffer


def sha256_hex(data) -> str:
    return sha256(data).hex()


def sha512_hex(data) -> str:
    return sha512(data).hex()
