import logging

from . import multibase, multicodec, varint
from ._api import (
    decode_cid,
    encode_cid,
    encode_multibase,
    decode_multibase,
)
from .cid import Cid, CidBuilder, Prefix
from .errors import (
    AlphabetCorruptionError,
    CidBuilderError,
    CidConversionError,
    CidFormatError,
    CidVersionError,
    DigestLengthError,
    EndOfStreamError,
    HasherRegistrationError,
    MultiformatError,
    MultihashFramingError,
    UnexpectedEndOfStreamError,
    UnknownBaseError,
    UnknownCodecError,
    VarintError,
    VarintNotMinimalError,
    VarintOverflowError,
)
from .multibase import Multibase
from .multicodec import Multicodec
from .multihash import Multihash
from .registry import HasherRegistry, default_registry

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "decode_cid",
    "encode_cid",
    "encode_multibase",
    "decode_multibase",
    "Cid",
    "CidBuilder",
    "Prefix",
    "Multihash",
    "Multibase",
    "Multicodec",
    "HasherRegistry",
    "default_registry",
    "multibase",
    "multicodec",
    "varint",
    "AlphabetCorruptionError",
    "CidBuilderError",
    "CidConversionError",
    "CidFormatError",
    "CidVersionError",
    "DigestLengthError",
    "EndOfStreamError",
    "HasherRegistrationError",
    "MultiformatError",
    "MultihashFramingError",
    "UnexpectedEndOfStreamError",
    "UnknownBaseError",
    "UnknownCodecError",
    "VarintError",
    "VarintNotMinimalError",
    "VarintOverflowError",
]
