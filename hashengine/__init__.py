"""
hashengine: pure-Python message digests.

    >>> from hashengine import Message, hash_message
    >>> hash_message(Message.from_string("abc"), "sha256").to_hex()[:16]
    'ba7816bf8f01cfea'
"""

import logging

from .dispatch import ALGORITHMS, Algorithm, hash_message, hexdigest, new
from .errors import HashError, KeyLengthError, MalformedHexError, ParameterError, RangeError
from .md2 import MD2
from .md4 import MD4
from .md5 import MD5
from .md6 import MD6, MD6_160, MD6_224, MD6_256, MD6_384, MD6_512, MD6Config, MD6Key
from .message import Digest, Endianness, Message
from .sha1 import SHA0, SHA1
from .sha2 import SHA224, SHA256, SHA384, SHA512, SHA512_224, SHA512_256
from .sha3 import SHA3

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ALGORITHMS",
    "Algorithm",
    "Digest",
    "Endianness",
    "HashError",
    "KeyLengthError",
    "MD2",
    "MD4",
    "MD5",
    "MD6",
    "MD6Config",
    "MD6Key",
    "MD6_160",
    "MD6_224",
    "MD6_256",
    "MD6_384",
    "MD6_512",
    "MalformedHexError",
    "Message",
    "ParameterError",
    "RangeError",
    "SHA0",
    "SHA1",
    "SHA224",
    "SHA256",
    "SHA3",
    "SHA384",
    "SHA512",
    "SHA512_224",
    "SHA512_256",
    "hash_message",
    "hexdigest",
    "new",
]
