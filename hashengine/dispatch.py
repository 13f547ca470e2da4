"""
Algorithm selection.

``Algorithm`` is the closed set of supported digests; ``new`` maps a member
to its hasher and ``hash_message`` is the single entry point callers use.
"""

from __future__ import annotations

import enum
import logging

from .errors import ParameterError
from .md2 import MD2
from .md4 import MD4
from .md5 import MD5
from .md6 import MD6
from .message import Digest, as_message
from .sha1 import SHA0, SHA1
from .sha2 import SHA224, SHA256, SHA384, SHA512, SHA512_224, SHA512_256
from .sha3 import SHA3

logger = logging.getLogger(__name__)


class Algorithm(enum.Enum):
    MD2 = "md2"
    MD4 = "md4"
    MD5 = "md5"
    SHA0 = "sha0"
    SHA1 = "sha1"
    SHA224 = "sha224"
    SHA256 = "sha256"
    SHA384 = "sha384"
    SHA512 = "sha512"
    SHA512_224 = "sha512_224"
    SHA512_256 = "sha512_256"
    SHA3_224 = "sha3_224"
    SHA3_256 = "sha3_256"
    SHA3_384 = "sha3_384"
    SHA3_512 = "sha3_512"
    MD6_160 = "md6_160"
    MD6_224 = "md6_224"
    MD6_256 = "md6_256"
    MD6_384 = "md6_384"
    MD6_512 = "md6_512"

    @classmethod
    def parse(cls, name) -> Algorithm:
        """Accept a member or a name such as ``SHA3-256`` or ``sha512/224``."""
        if isinstance(name, cls):
            return name
        key = str(name).strip().lower().replace("-", "_").replace("/", "_")
        try:
            return cls(key)
        except ValueError:
            raise ParameterError("unknown hash algorithm: %r" % (name,)) from None

    @property
    def is_md6(self) -> bool:
        return self.value.startswith("md6_")


_PIPELINES = {
    Algorithm.MD2: MD2,
    Algorithm.MD4: MD4,
    Algorithm.MD5: MD5,
    Algorithm.SHA0: SHA0,
    Algorithm.SHA1: SHA1,
    Algorithm.SHA224: SHA224,
    Algorithm.SHA256: SHA256,
    Algorithm.SHA384: SHA384,
    Algorithm.SHA512: SHA512,
    Algorithm.SHA512_224: SHA512_224,
    Algorithm.SHA512_256: SHA512_256,
    Algorithm.SHA3_224: lambda: SHA3(224),
    Algorithm.SHA3_256: lambda: SHA3(256),
    Algorithm.SHA3_384: lambda: SHA3(384),
    Algorithm.SHA3_512: lambda: SHA3(512),
    Algorithm.MD6_160: lambda key=None: MD6(160, key=key),
    Algorithm.MD6_224: lambda key=None: MD6(224, key=key),
    Algorithm.MD6_256: lambda key=None: MD6(256, key=key),
    Algorithm.MD6_384: lambda key=None: MD6(384, key=key),
    Algorithm.MD6_512: lambda key=None: MD6(512, key=key),
}

ALGORITHMS = tuple(a.value for a in Algorithm)


def new(algorithm, key=None):
    """Return a hasher for ``algorithm``; ``key`` is accepted for MD6 only."""
    algorithm = Algorithm.parse(algorithm)
    factory = _PIPELINES[algorithm]
    if algorithm.is_md6:
        return factory(key)
    if key is not None:
        raise ParameterError("%s does not take a key" % algorithm.value)
    return factory()


def hash_message(message, algorithm, key=None) -> Digest:
    message = as_message(message)
    hasher = new(algorithm, key)
    logger.debug("hashing %d-bit message with %s", message.bit_len, hasher.name)
    return hasher.hash(message)


def hexdigest(message, algorithm, key=None) -> str:
    return hash_message(message, algorithm, key).to_hex()
