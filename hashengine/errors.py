"""
Exceptions raised by the digest engine.

All of them are validation failures on caller input; a well-formed Message
never makes a hash computation fail.
"""


class HashError(ValueError):
    """Base class for every engine error."""


class MalformedHexError(HashError):
    """Odd-length hex string or a character outside [0-9a-fA-F]."""


class RangeError(HashError):
    """Requested byte sub-range does not fit the word-derived buffer."""


class KeyLengthError(HashError):
    """MD6 key longer than 64 bytes."""


class ParameterError(HashError):
    """Invalid algorithm parameter (MD6 d/r/L, word width, algorithm name)."""
