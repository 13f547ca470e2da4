"""
MD2 (RFC 1319).

Byte-oriented: no words and no length field. Padding is followed by a
16-byte checksum, and each 16-byte block runs 18 passes over a 48-byte state.
"""

from .message import Digest, as_message
from .padding import MD2_BLOCK_BYTES, md2_pad

# Permutation of 0..255 built from the digits of pi.
S = (
    41, 46, 67, 201, 162, 216, 124, 1, 61, 54, 84, 161, 236, 240, 6, 19, 98, 167, 5, 243, 192, 199,
    115, 140, 152, 147, 43, 217, 188, 76, 130, 202, 30, 155, 87, 60, 253, 212, 224, 22, 103, 66,
    111, 24, 138, 23, 229, 18, 190, 78, 196, 214, 218, 158, 222, 73, 160, 251, 245, 142, 187, 47,
    238, 122, 169, 104, 121, 145, 21, 178, 7, 63, 148, 194, 16, 137, 11, 34, 95, 33, 128, 127, 93,
    154, 90, 144, 50, 39, 53, 62, 204, 231, 191, 247, 151, 3, 255, 25, 48, 179, 72, 165, 181, 209,
    215, 94, 146, 42, 172, 86, 170, 198, 79, 184, 56, 210, 150, 164, 125, 182, 118, 252, 107, 226,
    156, 116, 4, 241, 69, 157, 112, 89, 100, 113, 135, 32, 134, 91, 207, 101, 230, 45, 168, 2, 27,
    96, 37, 173, 174, 176, 185, 246, 28, 70, 97, 105, 52, 64, 126, 15, 85, 71, 163, 35, 221, 81,
    175, 58, 195, 92, 249, 206, 186, 197, 234, 38, 44, 83, 13, 110, 133, 40, 132, 9, 211, 223, 205,
    244, 65, 129, 77, 82, 106, 220, 55, 200, 108, 193, 171, 250, 36, 225, 123, 8, 12, 189, 177, 74,
    120, 136, 149, 139, 227, 99, 232, 109, 233, 203, 213, 254, 59, 0, 29, 57, 242, 239, 183, 14,
    102, 88, 208, 228, 166, 119, 114, 248, 235, 117, 75, 10, 49, 68, 80, 180, 143, 237, 31, 26,
    219, 153, 141, 51, 159, 17, 131, 20,
)

PASSES = 18


def checksum(data):
    c = [0] * MD2_BLOCK_BYTES
    last = 0
    for i in range(0, len(data), MD2_BLOCK_BYTES):
        for j in range(MD2_BLOCK_BYTES):
            c[j] ^= S[data[i + j] ^ last]
            last = c[j]
    return bytes(c)


class MD2:
    name = "md2"
    output_bits = 128
    block_size = MD2_BLOCK_BYTES

    @property
    def digest_size(self):
        return self.output_bits

    def hash(self, message) -> Digest:
        data = md2_pad(as_message(message))
        data += checksum(data)
        x = [0] * 48
        for i in range(0, len(data), MD2_BLOCK_BYTES):
            for j in range(MD2_BLOCK_BYTES):
                x[16 + j] = data[i + j]
                x[32 + j] = x[16 + j] ^ x[j]
            t = 0
            for j in range(PASSES):
                for k in range(48):
                    t = x[k] ^ S[t]
                    x[k] = t
                t = (t + j) & 0xFF
        return Digest.from_bytes(bytes(x[:16]))

    def __repr__(self):
        return "<MD2 md2>"


def md2(data) -> bytes:
    return MD2().hash(as_message(data)).buffer


def md2_hex(data) -> str:
    return md2(data).hex()
