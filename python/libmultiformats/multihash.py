"""Self-describing digests: ``varint(code) ++ varint(length) ++ digest``."""

from typing import Optional, Union

from . import multicodec, varint
from .bases.basex import BASE58_BTC
from .bases.rfc4648 import BASE16
from .errors import AlphabetCorruptionError, DigestLengthError, MultihashFramingError
from .multicodec import Multicodec
from .registry import HasherRegistry, default_registry
from .varint import ByteReader

__all__ = ['Multihash']

BytesLike = Union[bytes, bytearray, memoryview]

MAX_DIGEST_LENGTH = 2**31 - 1


class Multihash:
    __slots__ = ('_type', '_digest', '_bytes')

    def __init__(self, type: Multicodec, digest: bytes) -> None:
        self._type = type
        self._digest = bytes(digest)
        self._bytes = varint.encode(type.code) + varint.encode(len(self._digest)) + self._digest

    @property
    def type(self) -> Multicodec:
        return self._type

    @property
    def digest(self) -> bytes:
        return self._digest

    @property
    def name(self) -> str:
        return self._type.name

    @property
    def code(self) -> int:
        return self._type.code

    @property
    def length(self) -> int:
        return len(self._digest)

    def to_bytes(self) -> bytes:
        return self._bytes

    def __bytes__(self) -> bytes:
        return self._bytes

    def hex(self) -> str:
        return self._bytes.hex()

    def base58(self) -> str:
        return BASE58_BTC.encode(self._bytes)

    def __str__(self) -> str:
        return self.base58()

    def __repr__(self) -> str:
        return f'Multihash({self.name}, {self._digest.hex()})'

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Multihash):
            return NotImplemented
        return self._type == other._type and self._digest == other._digest

    def __hash__(self) -> int:
        return hash((self._type, self._digest))

    @classmethod
    def from_type_and_digest(cls, type: Multicodec, digest: BytesLike) -> 'Multihash':
        if len(digest) > MAX_DIGEST_LENGTH:
            raise DigestLengthError('digest too long, supporting only <= 2^31-1')
        return cls(type, digest)

    @classmethod
    def encode(cls, digest: BytesLike, type: Multicodec) -> 'Multihash':
        return cls.from_type_and_digest(type, digest)

    @classmethod
    def encode_name(cls, digest: BytesLike, name: str) -> 'Multihash':
        return cls.from_type_and_digest(multicodec.name_to_type(name), digest)

    @classmethod
    def sum(
        cls,
        type: Multicodec,
        data: BytesLike,
        length: int = -1,
        registry: Optional[HasherRegistry] = None,
    ) -> 'Multihash':
        """Hash ``data`` with ``type`` and keep the first ``length`` bytes.

        A negative ``length`` keeps the algorithm's natural digest size. The
        identity algorithm never truncates: ``length`` must then equal the
        size of ``data``.
        """
        if registry is None:
            registry = default_registry()

        hasher = registry.get_hasher(type, length)
        hasher.update(data)
        digest = hasher.digest()

        if length < 0:
            length = hasher.digest_size
        if len(digest) < length:
            raise DigestLengthError('requested length was too large for digest')
        if type == multicodec.IDENTITY and length != len(digest):
            raise DigestLengthError('the length of the identity hash must be equal to the length of the data')

        return cls.from_type_and_digest(type, digest[:length])

    @classmethod
    def from_bytes(cls, data: BytesLike) -> 'Multihash':
        return cls.from_stream(ByteReader(data))

    @classmethod
    def from_stream(cls, reader: ByteReader) -> 'Multihash':
        """Read a multihash that spans *exactly* the rest of ``reader``.

        ``reader`` must be a :class:`~libmultiformats.varint.ByteReader`, since
        the framing check needs to know how many bytes remain.
        """
        if not isinstance(reader, ByteReader):
            raise TypeError(f'from_stream expects a ByteReader, got {type(reader).__name__}')
        if reader.remaining() < 2:
            raise MultihashFramingError('multihash too short. must be >= 2 bytes')

        mh_type = multicodec.code_to_type(varint.read_uvarint(reader))
        length = varint.read_uvarint(reader)
        if length > MAX_DIGEST_LENGTH:
            raise MultihashFramingError('digest too long, supporting only <= 2^31-1')
        if reader.remaining() != length:
            raise MultihashFramingError(
                f'declared digest length {length} does not match remaining {reader.remaining()} bytes'
            )

        return cls.from_type_and_digest(mh_type, reader.read_exact(length))

    @classmethod
    def from_hex(cls, text: str) -> 'Multihash':
        return cls.from_bytes(BASE16.decode(text))

    @classmethod
    def from_base58(cls, text: str) -> 'Multihash':
        try:
            data = BASE58_BTC.decode(text)
        except AlphabetCorruptionError as e:
            raise MultihashFramingError(f"input isn't valid multihash: {e}") from e
        return cls.from_bytes(data)
