"""
Iterated (Merkle-Damgard) hashing shared by MD4, MD5, SHA-0/1 and SHA-2.
"""

from .message import Digest, as_message
from .padding import MD_BLOCK_WORDS, md_block_bytes, md_strengthen


class MerkleDamgardHash:
    """One-shot iterated hash.

    Subclasses provide the chaining-value constants and ``compress``; the
    padding, block loop and final serialization live here.
    """

    name = None
    word_bits = 32
    endianness = None
    initial_state = ()
    output_bits = 0

    @property
    def digest_size(self):
        return self.output_bits

    @property
    def block_size(self):
        return md_block_bytes(self.word_bits)

    def compress(self, state, block):
        raise NotImplementedError

    def hash(self, message) -> Digest:
        words = md_strengthen(as_message(message), self.word_bits, self.endianness)
        state = list(self.initial_state)
        for i in range(0, len(words), MD_BLOCK_WORDS):
            state = self.compress(state, words[i : i + MD_BLOCK_WORDS])
        return Digest.from_words(state, self.word_bits, self.endianness, 0, self.output_bits // 8)

    def __repr__(self):
        return "<%s %s>" % (type(self).__name__, self.name)
