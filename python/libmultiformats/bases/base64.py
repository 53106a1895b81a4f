"""RFC 4648 base64, standard and URL-safe alphabets, padded and raw.

Decoding is strict: trailing bits of the last quantum must be zero. Error
offsets follow Go's ``encoding/base64``.
"""

from .rfc4648 import BytesLike, decode_map, encode_bits, strip_newlines
from ..errors import AlphabetCorruptionError

PAD_CHAR = '='


class Base64Codec:
    def __init__(self, name: str, alphabet: str, padded: bool) -> None:
        self.name = name
        self.alphabet = alphabet
        self.padded = padded
        self._decode_map = decode_map(alphabet)

    def encode(self, data: BytesLike) -> str:
        return encode_bits(data, self.alphabet, 6, PAD_CHAR if self.padded else None)

    def decode(self, text: str) -> bytes:
        src = strip_newlines(text)
        n = len(src)
        out = bytearray()
        si = 0

        while si < n:
            dbuf = [0] * 4
            dlen = 4
            j = 0
            while j < 4:
                if si == n:
                    if j == 1 or self.padded:
                        raise AlphabetCorruptionError(si - j, self.name)
                    dlen = j
                    break

                char = src[si]
                si += 1
                value = self._decode_map.get(char)
                if value is not None:
                    dbuf[j] = value
                    j += 1
                    continue

                if not self.padded or char != PAD_CHAR or j < 2:
                    raise AlphabetCorruptionError(si - 1, self.name)

                if j == 2:
                    # a second pad character must follow
                    if si == n:
                        raise AlphabetCorruptionError(n, self.name)
                    if src[si] != PAD_CHAR:
                        raise AlphabetCorruptionError(si - 1, self.name)
                    si += 1

                if si < n:
                    # trailing garbage
                    raise AlphabetCorruptionError(si, self.name)
                dlen = j
                break

            quantum = dbuf[0] << 18 | dbuf[1] << 12 | dbuf[2] << 6 | dbuf[3]
            b0, b1, b2 = (quantum >> 16) & 0xFF, (quantum >> 8) & 0xFF, quantum & 0xFF
            if dlen == 4:
                out += bytes((b0, b1, b2))
            elif dlen == 3:
                if b2:
                    raise AlphabetCorruptionError(si - 1, self.name)
                out += bytes((b0, b1))
            elif dlen == 2:
                if b1 or b2:
                    raise AlphabetCorruptionError(si - 2, self.name)
                out.append(b0)

        return bytes(out)


_STD = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/'
_URL = 'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_'

BASE64 = Base64Codec('base64', _STD, padded=False)
BASE64_PAD = Base64Codec('base64pad', _STD, padded=True)
BASE64_URL = Base64Codec('base64url', _URL, padded=False)
BASE64_URL_PAD = Base64Codec('base64urlpad', _URL, padded=True)
