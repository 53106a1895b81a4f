"""Content identifiers.

A :class:`Cid` is either version 0 (a bare sha2-256 multihash, implicitly
``dag-pb`` and ``base58btc``) or version 1 (``varint(1) ++ varint(codec) ++
multihash``, rendered with any multibase). Both versions are the same
immutable class; they are built through the factories below, never through
the constructor.
"""

from typing import Any, Dict, NamedTuple, Optional, Union

from . import multibase, multicodec, varint
from .errors import (
    CidBuilderError,
    CidConversionError,
    CidFormatError,
    CidVersionError,
)
from .multibase import Multibase
from .multicodec import Multicodec
from .multihash import Multihash
from .registry import HasherRegistry
from .varint import ByteReader

__all__ = ['Cid', 'CidBuilder', 'Prefix']

BytesLike = Union[bytes, bytearray, memoryview]

V0_DIGEST_LENGTH = 32
V0_STRING_LENGTH = 46
IPFS_PATH_PREFIX = '/ipfs/'


class Prefix(NamedTuple):
    """Shape of a CID without its content: everything but the digest."""

    version: int
    codec: Multicodec
    multihash_type: Multicodec
    multihash_length: int

    def to_bytes(self) -> bytes:
        return b''.join(
            varint.encode(value)
            for value in (self.version, self.codec.code, self.multihash_type.code, self.multihash_length)
        )

    def __bytes__(self) -> bytes:
        return self.to_bytes()

    @classmethod
    def from_bytes(cls, data: BytesLike) -> 'Prefix':
        reader = ByteReader(data)
        version = varint.read_uvarint(reader)
        codec = multicodec.code_to_type(varint.read_uvarint(reader))
        multihash_type = multicodec.code_to_type(varint.read_uvarint(reader))
        multihash_length = varint.read_uvarint(reader)
        return cls(version, codec, multihash_type, multihash_length)

    def sum(self, data: BytesLike, registry: Optional[HasherRegistry] = None) -> 'Cid':
        """Hash ``data`` and wrap it into a CID of this shape."""
        length = self.multihash_length
        if self.multihash_type == multicodec.IDENTITY:
            length = -1

        if self.version == 0 and (
            self.multihash_type != multicodec.SHA2_256
            or self.multihash_length not in (V0_DIGEST_LENGTH, -1)
        ):
            raise CidBuilderError('invalid v0 prefix')
        if self.version not in (0, 1):
            raise CidVersionError(f'invalid cid version: {self.version}')

        mh = Multihash.sum(self.multihash_type, data, length, registry=registry)
        if self.version == 0:
            return Cid.v0(mh)
        return Cid.v1(mh, self.codec)


class Cid:
    __slots__ = ('_version', '_codec', '_multihash', '_base', '_bytes')

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError('Cid instances are created with Cid.v0, Cid.v1, Cid.from_string, Cid.from_bytes or CidBuilder')

    @classmethod
    def _create(cls, version: int, codec: Multicodec, mh: Multihash, base: Multibase) -> 'Cid':
        self = object.__new__(cls)
        if version == 0:
            data = mh.to_bytes()
        else:
            data = varint.encode(version) + varint.encode(codec.code) + mh.to_bytes()

        object.__setattr__(self, '_version', version)
        object.__setattr__(self, '_codec', codec)
        object.__setattr__(self, '_multihash', mh)
        object.__setattr__(self, '_base', base)
        object.__setattr__(self, '_bytes', data)
        return self

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError('Cid is immutable')

    def __delattr__(self, name: str) -> None:
        raise AttributeError('Cid is immutable')

    def __reduce__(self) -> Any:
        return Cid.from_bytes, (self._bytes, self._base)

    def __copy__(self) -> 'Cid':
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> 'Cid':
        return self

    @classmethod
    def v0(cls, mh: Multihash) -> 'Cid':
        if mh.type != multicodec.SHA2_256:
            raise CidConversionError('Cannot convert non sha2-256 multihash CID to CIDv0')
        if mh.length != V0_DIGEST_LENGTH:
            raise CidConversionError('Cannot convert non 32 byte multihash CID to CIDv0')
        return cls._create(0, multicodec.DAG_PB, mh, Multibase.BASE58_BTC)

    @classmethod
    def v1(cls, mh: Multihash, codec: Multicodec, base: Multibase = Multibase.BASE32) -> 'Cid':
        return cls._create(1, codec, mh, base)

    @classmethod
    def builder(cls) -> 'CidBuilder':
        return CidBuilder()

    @property
    def version(self) -> int:
        return self._version

    @property
    def codec(self) -> Multicodec:
        return self._codec

    @property
    def multihash(self) -> Multihash:
        return self._multihash

    @property
    def base(self) -> Multibase:
        return self._base

    def prefix(self) -> Prefix:
        return Prefix(self._version, self._codec, self._multihash.type, self._multihash.length)

    def to_bytes(self) -> bytes:
        return self._bytes

    def __bytes__(self) -> bytes:
        return self._bytes

    def to_v0(self) -> 'Cid':
        if self._version == 0:
            return self
        if self._codec != multicodec.DAG_PB:
            raise CidConversionError('Cannot convert a non dag-pb CID to CIDv0')
        return Cid.v0(self._multihash)

    def to_v1(self, base: Multibase = Multibase.BASE32) -> 'Cid':
        return Cid.v1(self._multihash, self._codec, base)

    def to_string(self, base: Optional[Multibase] = None) -> str:
        if self._version == 0:
            if base not in (None, Multibase.BASE58_BTC):
                raise CidConversionError(f'CIDv0 can only be rendered as base58btc, not {base}')
            return self._multihash.base58()
        return (base or self._base).encode(self._bytes)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"Cid('{self.to_string()}')"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cid):
            return NotImplemented
        return self._bytes == other._bytes

    def __hash__(self) -> int:
        return hash(self._bytes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'version': self._version,
            'codec': self._codec.code,
            'hash': {
                'code': self._multihash.code,
                'size': self._multihash.length,
                'digest': self._multihash.digest,
            },
        }

    @classmethod
    def from_string(cls, text: str) -> 'Cid':
        if text.startswith(IPFS_PATH_PREFIX):
            text = text[len(IPFS_PATH_PREFIX):]
        if len(text) < 2:
            raise CidFormatError('cid too short')

        if len(text) == V0_STRING_LENGTH and text.startswith('Qm'):
            # a bare base58btc multihash
            return cls.v0(Multihash.from_base58(text))

        base = multibase.encoding(text)
        return cls.from_bytes(base.decode(text[1:]), base)

    @classmethod
    def from_bytes(cls, data: BytesLike, base: Multibase = Multibase.BASE32) -> 'Cid':
        if len(data) > 2 and data[0] == multicodec.SHA2_256.code and data[1] == V0_DIGEST_LENGTH:
            if len(data) < V0_DIGEST_LENGTH + 2:
                raise CidFormatError('not enough bytes for cid v0')
            return cls.v0(Multihash.from_bytes(data))

        reader = ByteReader(data)
        version = varint.read_uvarint(reader)
        if version != 1:
            raise CidVersionError(f'expected 1 as the cid version number, got: {version}')

        codec = multicodec.code_to_type(varint.read_uvarint(reader))
        return cls.v1(Multihash.from_stream(reader), codec, base)


class CidBuilder:
    """Collects the parts of a CID and validates them together on :meth:`build`."""

    def __init__(self) -> None:
        self.version = 1
        self.codec: Optional[Multicodec] = None
        self.multihash: Optional[Multihash] = None
        self.base: Optional[Multibase] = None

    def with_version(self, version: int) -> 'CidBuilder':
        self.version = version
        return self

    def with_codec(self, codec: Multicodec) -> 'CidBuilder':
        self.codec = codec
        return self

    def with_multihash(self, mh: Multihash) -> 'CidBuilder':
        self.multihash = mh
        return self

    def with_base(self, base: Multibase) -> 'CidBuilder':
        self.base = base
        return self

    def build(self) -> Cid:
        if self.version not in (0, 1):
            raise CidBuilderError('Invalid version, must be a number equal to 1 or 0')

        if self.version == 0:
            if self.codec is not None and self.codec != multicodec.DAG_PB:
                raise CidBuilderError("codec must be 'dag-pb' for CIDv0")
            if self.base is not None and self.base != Multibase.BASE58_BTC:
                raise CidBuilderError("multibase must be 'base58btc' for CIDv0")
            if self.multihash is None:
                raise CidBuilderError('hash must be non-null')
            return Cid.v0(self.multihash)

        if self.codec is None:
            raise CidBuilderError('codec must be non-null')
        if self.multihash is None:
            raise CidBuilderError('hash must be non-null')
        return Cid.v1(self.multihash, self.codec, self.base or Multibase.BASE32)
