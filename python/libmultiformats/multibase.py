"""Multibase: text encodings that announce their alphabet in the first character."""

import enum
from typing import Dict, Union

from .bases import base32, base64, basex, rfc4648
from .errors import UnknownBaseError

__all__ = [
    'Multibase',
    'code_to_base',
    'decode',
    'encode',
    'encode_name',
    'encoding',
    'name_to_base',
]

BytesLike = Union[bytes, bytearray, memoryview]


class _Identity:
    name = 'identity'

    @staticmethod
    def encode(data: BytesLike) -> str:
        return bytes(data).decode('utf-8', 'surrogateescape')

    @staticmethod
    def decode(text: str) -> bytes:
        return text.encode('utf-8', 'surrogateescape')


class Multibase(enum.Enum):
    IDENTITY = ('identity', '\x00')
    BASE2 = ('base2', '0')
    BASE8 = ('base8', '7')
    BASE10 = ('base10', '9')
    BASE16 = ('base16', 'f')
    BASE16_UPPER = ('base16upper', 'F')
    BASE32 = ('base32', 'b')
    BASE32_UPPER = ('base32upper', 'B')
    BASE32_PAD = ('base32pad', 'c')
    BASE32_PAD_UPPER = ('base32padupper', 'C')
    BASE32_HEX = ('base32hex', 'v')
    BASE32_HEX_UPPER = ('base32hexupper', 'V')
    BASE32_HEX_PAD = ('base32hexpad', 't')
    BASE32_HEX_PAD_UPPER = ('base32hexpadupper', 'T')
    BASE32_Z = ('base32z', 'h')
    BASE36 = ('base36', 'k')
    BASE36_UPPER = ('base36upper', 'K')
    BASE58_FLICKR = ('base58flickr', 'Z')
    BASE58_BTC = ('base58btc', 'z')
    BASE64 = ('base64', 'm')
    BASE64_PAD = ('base64pad', 'M')
    BASE64_URL = ('base64url', 'u')
    BASE64_URL_PAD = ('base64urlpad', 'U')

    def __init__(self, encoding: str, code: str) -> None:
        self.encoding = encoding
        self.code = code

    def __str__(self) -> str:
        return self.encoding

    def encode(self, data: BytesLike) -> str:
        """Encode ``data`` and prefix the result with this base's code."""
        return self.code + _CODECS[self].encode(data)

    def decode(self, text: str) -> bytes:
        """Decode a payload *without* its leading code character."""
        return _CODECS[self].decode(text)


_CODECS = {
    Multibase.IDENTITY: _Identity,
    Multibase.BASE2: rfc4648.BASE2,
    Multibase.BASE8: rfc4648.BASE8,
    Multibase.BASE10: basex.BASE10,
    Multibase.BASE16: rfc4648.BASE16,
    Multibase.BASE16_UPPER: rfc4648.BASE16_UPPER,
    Multibase.BASE32: base32.BASE32,
    Multibase.BASE32_UPPER: base32.BASE32_UPPER,
    Multibase.BASE32_PAD: base32.BASE32_PAD,
    Multibase.BASE32_PAD_UPPER: base32.BASE32_PAD_UPPER,
    Multibase.BASE32_HEX: base32.BASE32_HEX,
    Multibase.BASE32_HEX_UPPER: base32.BASE32_HEX_UPPER,
    Multibase.BASE32_HEX_PAD: base32.BASE32_HEX_PAD,
    Multibase.BASE32_HEX_PAD_UPPER: base32.BASE32_HEX_PAD_UPPER,
    Multibase.BASE32_Z: base32.BASE32_Z,
    Multibase.BASE36: basex.BASE36,
    Multibase.BASE36_UPPER: basex.BASE36_UPPER,
    Multibase.BASE58_FLICKR: basex.BASE58_FLICKR,
    Multibase.BASE58_BTC: basex.BASE58_BTC,
    Multibase.BASE64: base64.BASE64,
    Multibase.BASE64_PAD: base64.BASE64_PAD,
    Multibase.BASE64_URL: base64.BASE64_URL,
    Multibase.BASE64_URL_PAD: base64.BASE64_URL_PAD,
}

_BY_CODE: Dict[str, Multibase] = {base.code: base for base in Multibase}
_BY_NAME: Dict[str, Multibase] = {base.encoding: base for base in Multibase}


def code_to_base(code: str) -> Multibase:
    try:
        return _BY_CODE[code]
    except KeyError:
        raise UnknownBaseError(f'Unknown base code: {code!r}') from None


def name_to_base(name: str) -> Multibase:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownBaseError(f'Unknown base name: {name!r}') from None


def encoding(text: str) -> Multibase:
    if not text:
        raise UnknownBaseError('Unknown base code: cannot detect the base of an empty string')
    return code_to_base(text[0])


def encode(base: Multibase, data: BytesLike) -> str:
    return base.encode(data)


def encode_name(name: str, data: BytesLike) -> str:
    return name_to_base(name).encode(data)


def decode(text: str) -> bytes:
    return encoding(text).decode(text[1:])
