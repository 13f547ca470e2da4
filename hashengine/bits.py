"""
Word-level helpers shared by every compression core.
"""

Masks = [(1 << i) - 1 for i in range(65)]

Mask32 = Masks[32]
Mask64 = Masks[64]


def bits2bytes(x):
    return (x + 7) // 8


def rol(value, left, bits):
    left %= bits
    if left == 0:
        return value
    top = value >> (bits - left)
    bot = (value & Masks[bits - left]) << left
    return bot | top


def ror(value, right, bits):
    return rol(value, bits - (right % bits), bits)


def rol32(value, left):
    return rol(value, left, 32)


def add32(*values):
    return sum(values) & Mask32
