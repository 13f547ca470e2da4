"""
Padding rules.

Each rule maps a Message onto fixed-width words (or bytes, for MD2) whose
total length is a whole number of blocks for the algorithm using it.
"""

from .message import Endianness, bytes_to_words

# --------------------------------------------------------------------
#                     Merkle-Damgard strengthening
# --------------------------------------------------------------------

MD_BLOCK_WORDS = 16


def md_block_bytes(word_bits):
    return MD_BLOCK_WORDS * word_bits // 8


def md_strengthen(message, word_bits, endianness):
    """0x80, zeros, then the bit length in a field two words wide.

    Returns the padded message as ``word_bits`` words in ``endianness``.
    """
    block = md_block_bytes(word_bits)
    length_field = 2 * word_bits // 8
    data = message.buffer
    zeros = (block - length_field - 1 - len(data)) % block
    padded = b"".join(
        [
            data,
            b"\x80",
            b"\x00" * zeros,
            (message.bit_len % (1 << (8 * length_field))).to_bytes(
                length_field, Endianness(endianness).value
            ),
        ]
    )
    return bytes_to_words(padded, word_bits, endianness)


# --------------------------------------------------------------------
#                           SHA-3 pad10*1
# --------------------------------------------------------------------

SHA3_SUFFIX = 0x06
SHA3_FINAL = 0x80


def multirate_padding(used_bytes, align_bytes):
    padlen = align_bytes - (used_bytes % align_bytes)
    if padlen == 1:
        return [SHA3_SUFFIX | SHA3_FINAL]
    return [SHA3_SUFFIX] + ([0x00] * (padlen - 2)) + [SHA3_FINAL]


def sha3_pad(message, rate_bytes):
    """Domain bits 01, then pad10*1 up to a multiple of the rate, as lanes."""
    data = message.buffer + bytes(multirate_padding(len(message), rate_bytes))
    return bytes_to_words(data, 64, Endianness.LITTLE)


# --------------------------------------------------------------------
#                          MD6 zero padding
# --------------------------------------------------------------------

MD6_WORD_BITS = 64


def md6_message_words(message):
    """Big-endian 64-bit words of the message, last word zero-filled."""
    data = message.buffer
    data += b"\x00" * (-len(data) % 8)
    return bytes_to_words(data, MD6_WORD_BITS, Endianness.BIG)


def md6_pad(words, bit_len, block_bits):
    """Zero-extend to a positive multiple of ``block_bits``.

    Returns ``(padded_words, padding_bits)``.
    """
    blocks = max(1, -(-bit_len // block_bits))
    total_bits = blocks * block_bits
    needed = total_bits // MD6_WORD_BITS
    padded = list(words[:needed])
    padded.extend([0] * (needed - len(padded)))
    return padded, total_bits - bit_len


# --------------------------------------------------------------------
#                              MD2
# --------------------------------------------------------------------

MD2_BLOCK_BYTES = 16


def md2_pad(message):
    """Append ``n`` bytes of value ``n`` (1..16); always at least one."""
    n = MD2_BLOCK_BYTES - len(message) % MD2_BLOCK_BYTES
    return message.buffer + bytes([n]) * n
