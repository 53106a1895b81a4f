"""Big-integer alphabets: base10, base36 and the two base58 alphabets.

Each leading zero byte is carried as one leading zero-digit.
"""

from .rfc4648 import BytesLike, decode_map
from ..errors import AlphabetCorruptionError


class BaseXCodec:
    def __init__(self, name: str, alphabet: str, case_insensitive: bool = False) -> None:
        self.name = name
        self.alphabet = alphabet
        self.base = len(alphabet)
        self._decode_map = decode_map(alphabet, case_insensitive)

    def encode(self, data: BytesLike) -> str:
        data = bytes(data)
        zeros = len(data) - len(data.lstrip(b'\x00'))

        num = int.from_bytes(data, 'big')
        digits = []
        while num:
            num, rem = divmod(num, self.base)
            digits.append(self.alphabet[rem])

        return self.alphabet[0] * zeros + ''.join(reversed(digits))

    def decode(self, text: str) -> bytes:
        zero = self.alphabet[0]
        zeros = len(text) - len(text.lstrip(zero))

        num = 0
        for i, char in enumerate(text):
            value = self._decode_map.get(char)
            if value is None:
                raise AlphabetCorruptionError(i, self.name)
            num = num * self.base + value

        return b'\x00' * zeros + num.to_bytes((num.bit_length() + 7) // 8, 'big')


BASE10 = BaseXCodec('base10', '0123456789')
BASE36 = BaseXCodec('base36', '0123456789abcdefghijklmnopqrstuvwxyz', case_insensitive=True)
BASE36_UPPER = BaseXCodec('base36upper', '0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ', case_insensitive=True)
BASE58_BTC = BaseXCodec('base58btc', '123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz')
BASE58_FLICKR = BaseXCodec('base58flickr', '123456789abcdefghijkmnopqrstuvwxyzABCDEFGHJKLMNPQRSTUVWXYZ')
