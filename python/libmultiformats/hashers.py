"""Running-digest accumulators behind the multihash registry.

Every hasher speaks the ``hashlib`` vocabulary (``update``, ``digest``,
``digest_size``, ``block_size``) plus ``reset``, and ``update`` reports the
number of bytes consumed.
"""

import hashlib
from typing import Callable, Protocol, Union

from Crypto.Hash import keccak
from blake3 import blake3

from .errors import DigestLengthError

BytesLike = Union[bytes, bytearray, memoryview]


class Hasher(Protocol):
    digest_size: int
    block_size: int

    def update(self, data: BytesLike) -> int: ...

    def digest(self) -> bytes: ...

    def reset(self) -> None: ...


class HashlibHasher:
    """Any fixed-size algorithm ``hashlib.new`` knows about."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._hash = hashlib.new(name)
        self.digest_size = self._hash.digest_size
        self.block_size = self._hash.block_size

    def update(self, data: BytesLike) -> int:
        self._hash.update(data)
        return len(data)

    def digest(self) -> bytes:
        return self._hash.digest()

    def reset(self) -> None:
        self._hash = hashlib.new(self.name)


class DoubleSha256Hasher:
    """sha2-256 applied to the sha2-256 digest of the input."""

    digest_size = 32
    block_size = 64

    def __init__(self) -> None:
        self._hash = hashlib.sha256()

    def update(self, data: BytesLike) -> int:
        self._hash.update(data)
        return len(data)

    def digest(self) -> bytes:
        return hashlib.sha256(self._hash.digest()).digest()

    def reset(self) -> None:
        self._hash = hashlib.sha256()


class IdentityHasher:
    """Pass-through: the digest is the input itself."""

    block_size = 32

    def __init__(self) -> None:
        self._buffer = bytearray()

    @property
    def digest_size(self) -> int:
        return len(self._buffer)

    def update(self, data: BytesLike) -> int:
        self._buffer += data
        return len(data)

    def digest(self) -> bytes:
        return bytes(self._buffer)

    def reset(self) -> None:
        self._buffer = bytearray()


class ShakeHasher:
    def __init__(self, name: str, size: int) -> None:
        self.name = name
        self.digest_size = size
        self._hash = hashlib.new(name)
        self.block_size = self._hash.block_size

    def update(self, data: BytesLike) -> int:
        self._hash.update(data)
        return len(data)

    def digest(self) -> bytes:
        return self._hash.digest(self.digest_size)

    def reset(self) -> None:
        self._hash = hashlib.new(self.name)


class Blake2Hasher:
    def __init__(self, constructor: Callable, size: int) -> None:
        self._constructor = constructor
        self._hash = constructor(digest_size=size)
        self.digest_size = size
        self.block_size = self._hash.block_size

    def update(self, data: BytesLike) -> int:
        self._hash.update(data)
        return len(data)

    def digest(self) -> bytes:
        return self._hash.digest()

    def reset(self) -> None:
        self._hash = self._constructor(digest_size=self.digest_size)


class Blake3Hasher:
    block_size = 64

    def __init__(self, size: int = 32) -> None:
        self.digest_size = size
        self._hash = blake3()

    def update(self, data: BytesLike) -> int:
        self._hash.update(data)
        return len(data)

    def digest(self) -> bytes:
        return self._hash.digest(length=self.digest_size)

    def reset(self) -> None:
        self._hash = blake3()


class KeccakHasher:
    """Original Keccak padding (pre-FIPS 202), as used by Ethereum."""

    def __init__(self, bits: int) -> None:
        self.bits = bits
        self.digest_size = bits // 8
        self.block_size = 200 - 2 * self.digest_size
        self._hash = keccak.new(digest_bits=bits, update_after_digest=True)

    def update(self, data: BytesLike) -> int:
        self._hash.update(data)
        return len(data)

    def digest(self) -> bytes:
        return self._hash.digest()

    def reset(self) -> None:
        self._hash = keccak.new(digest_bits=self.bits, update_after_digest=True)


def identity(size: int = -1) -> IdentityHasher:
    return IdentityHasher()


def blake3_hasher(size: int = -1) -> Blake3Hasher:
    if size == -1:
        return Blake3Hasher(32)
    if 1 <= size <= 128:
        return Blake3Hasher(size)
    raise DigestLengthError(f'Unsupported size for blake3: {size}')


def shake_hasher(name: str, default_size: int) -> Callable[[int], ShakeHasher]:
    def factory(size: int = -1) -> ShakeHasher:
        if size == -1:
            return ShakeHasher(name, default_size)
        if size >= 1:
            return ShakeHasher(name, size)
        raise DigestLengthError(f'Unsupported size for {name}: {size}')

    return factory
