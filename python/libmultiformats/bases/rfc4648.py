"""Bit-packing alphabets (RFC 4648 style) without padding: base2, base8, base16.

``encode_bits`` is shared with the padded base32/base64 encoders.
"""

from typing import Dict, Optional, Union

from ..errors import AlphabetCorruptionError

BytesLike = Union[bytes, bytearray, memoryview]


def decode_map(alphabet: str, case_insensitive: bool = False) -> Dict[str, int]:
    table = {char: value for value, char in enumerate(alphabet)}
    if case_insensitive:
        for char, value in list(table.items()):
            table.setdefault(char.lower(), value)
            table.setdefault(char.upper(), value)
    return table


def strip_newlines(text: str) -> str:
    return text.replace('\r', '').replace('\n', '')


def encode_bits(data: BytesLike, alphabet: str, bits_per_char: int, pad: Optional[str] = None) -> str:
    mask = (1 << bits_per_char) - 1
    out = []
    bits = 0
    buffer = 0
    for byte in bytes(data):
        buffer = (buffer << 8) | byte
        bits += 8
        while bits >= bits_per_char:
            bits -= bits_per_char
            out.append(alphabet[(buffer >> bits) & mask])
        buffer &= (1 << bits) - 1

    if bits:
        out.append(alphabet[(buffer << (bits_per_char - bits)) & mask])

    if pad:
        while (len(out) * bits_per_char) % 8:
            out.append(pad)

    return ''.join(out)


class Rfc4648Codec:
    def __init__(self, name: str, alphabet: str, bits_per_char: int, case_insensitive: bool = False) -> None:
        self.name = name
        self.alphabet = alphabet
        self.bits_per_char = bits_per_char
        self._decode_map = decode_map(alphabet, case_insensitive)

    def encode(self, data: BytesLike) -> str:
        return encode_bits(data, self.alphabet, self.bits_per_char)

    def decode(self, text: str) -> bytes:
        out = bytearray()
        bits = 0
        buffer = 0
        for i, char in enumerate(text):
            value = self._decode_map.get(char)
            if value is None:
                raise AlphabetCorruptionError(i, self.name)

            buffer = (buffer << self.bits_per_char) | value
            bits += self.bits_per_char
            if bits >= 8:
                bits -= 8
                out.append((buffer >> bits) & 0xFF)
            buffer &= (1 << bits) - 1

        # leftover bits must be fewer than one symbol and all zero
        if bits >= self.bits_per_char or buffer:
            raise AlphabetCorruptionError(len(text), self.name)

        return bytes(out)


BASE2 = Rfc4648Codec('base2', '01', 1)
BASE8 = Rfc4648Codec('base8', '01234567', 3)
BASE16 = Rfc4648Codec('base16', '0123456789abcdef', 4, case_insensitive=True)
BASE16_UPPER = Rfc4648Codec('base16upper', '0123456789ABCDEF', 4, case_insensitive=True)
