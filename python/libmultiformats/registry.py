"""Registry of hash algorithms that multihashes can be computed with.

A registry maps a multihash :class:`~libmultiformats.multicodec.Multicodec` to a
factory that builds a fresh :class:`~libmultiformats.hashers.Hasher` for a
requested output length, together with the algorithm's default length.

Lookups never take a lock: registrations build a new table and swap the
reference, so readers always see a complete table.
"""

import hashlib
import logging
import threading
from functools import lru_cache
from typing import Callable, Dict, List, NamedTuple

from . import hashers, multicodec
from .errors import DigestLengthError, HasherRegistrationError, UnknownCodecError
from .hashers import Hasher
from .multicodec import Multicodec

__all__ = ['HasherRegistry', 'default_registry']

logger = logging.getLogger(__name__)

HasherFactory = Callable[[], Hasher]
SizedHasherFactory = Callable[[int], Hasher]


class _Entry(NamedTuple):
    factory: SizedHasherFactory
    default_length: int


class HasherRegistry:
    def __init__(self) -> None:
        self._entries: Dict[Multicodec, _Entry] = {}
        self._lock = threading.Lock()

    @classmethod
    def with_builtins(cls) -> 'HasherRegistry':
        registry = cls()
        registry._register_builtins()
        return registry

    def register(self, codec: Multicodec, factory: HasherFactory) -> None:
        """Register a fixed-size algorithm.

        ``factory`` is called once to learn the maximum digest size; shorter
        lengths are served by truncation in :meth:`Multihash.sum`.
        """
        max_size = self._probe(codec, factory).digest_size

        def sized_factory(size: int = -1) -> Hasher:
            if size > max_size:
                raise DigestLengthError(f'requested length was too large for digest of type: {codec}')
            return factory()

        self._store(codec, _Entry(sized_factory, max_size))

    def register_variable(self, codec: Multicodec, factory: SizedHasherFactory) -> None:
        """Register an algorithm whose output size is chosen by the caller.

        ``factory(-1)`` must build a hasher with the default output size.
        """
        default = self._probe(codec, lambda: factory(-1)).digest_size
        self._store(codec, _Entry(factory, default))

    def get_hasher(self, codec: Multicodec, length: int = -1) -> Hasher:
        entry = self._entries.get(codec)
        if entry is None:
            raise UnknownCodecError(f'No hasher found for: {codec}')
        return entry.factory(length)

    def default_length(self, codec: Multicodec) -> int:
        entry = self._entries.get(codec)
        if entry is None:
            raise UnknownCodecError(f'No default length for: {codec}')
        return entry.default_length

    def registered(self) -> List[Multicodec]:
        return sorted(self._entries, key=lambda codec: codec.code)

    def __contains__(self, codec: object) -> bool:
        return codec in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    @staticmethod
    def _probe(codec: Multicodec, factory: HasherFactory) -> Hasher:
        try:
            return factory()
        except Exception as e:
            message = f'Could not register hasher for {codec}: {e}'
            logger.warning(message)
            raise HasherRegistrationError(message) from e

    def _store(self, codec: Multicodec, entry: _Entry) -> None:
        with self._lock:
            entries = dict(self._entries)
            entries[codec] = entry
            self._entries = entries
        logger.debug('Registered hasher for %s (default length %d)', codec, entry.default_length)

    def _register_builtins(self) -> None:
        builtins = [
            (multicodec.MD5, 'md5'),
            (multicodec.SHA1, 'sha1'),
            (multicodec.SHA2_224, 'sha224'),
            (multicodec.SHA2_256, 'sha256'),
            (multicodec.SHA2_384, 'sha384'),
            (multicodec.SHA2_512, 'sha512'),
            (multicodec.SHA2_512_224, 'sha512_224'),
            (multicodec.SHA2_512_256, 'sha512_256'),
            (multicodec.SHA3_224, 'sha3_224'),
            (multicodec.SHA3_256, 'sha3_256'),
            (multicodec.SHA3_384, 'sha3_384'),
            (multicodec.SHA3_512, 'sha3_512'),
        ]

        self._try(self.register_variable, multicodec.IDENTITY, hashers.identity)
        self._try(self.register, multicodec.DBL_SHA2_256, hashers.DoubleSha256Hasher)
        for codec, name in builtins:
            self._try(self.register, codec, _hashlib_factory(name))

        self._try(self.register_variable, multicodec.SHAKE_128, hashers.shake_hasher('shake_128', 32))
        self._try(self.register_variable, multicodec.SHAKE_256, hashers.shake_hasher('shake_256', 64))
        for codec in (multicodec.KECCAK_224, multicodec.KECCAK_256, multicodec.KECCAK_384, multicodec.KECCAK_512):
            self._try(self.register, codec, _keccak_factory(int(codec.name.split('-')[1])))

        self._try(self.register, multicodec.BLAKE2S_256, _blake2_factory(hashlib.blake2s, 32))
        for code in range(multicodec.BLAKE2B_8.code, multicodec.BLAKE2B_512.code + 1):
            size = code - multicodec.BLAKE2B_8.code + 1
            self._try(self.register, multicodec.code_to_type(code), _blake2_factory(hashlib.blake2b, size))

        self._try(self.register_variable, multicodec.BLAKE3, hashers.blake3_hasher)

    @staticmethod
    def _try(register: Callable, codec: Multicodec, factory: Callable) -> None:
        try:
            register(codec, factory)
        except HasherRegistrationError:
            # already logged, the codec stays unavailable
            pass


def _hashlib_factory(name: str) -> HasherFactory:
    return lambda: hashers.HashlibHasher(name)


def _keccak_factory(bits: int) -> HasherFactory:
    return lambda: hashers.KeccakHasher(bits)


def _blake2_factory(constructor: Callable, size: int) -> HasherFactory:
    return lambda: hashers.Blake2Hasher(constructor, size)


@lru_cache(maxsize=None)
def default_registry() -> HasherRegistry:
    """Process-wide registry holding the built-in algorithms, built on first use."""
    return HasherRegistry.with_builtins()
