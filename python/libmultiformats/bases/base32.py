"""RFC 4648 base32 family, standard and extended-hex alphabets, plus z-base-32.

Decoding errors report the offset of the corrupt character the same way
Go's ``encoding/base32`` does, after CR/LF have been stripped.
"""

from .rfc4648 import BytesLike, decode_map, encode_bits, strip_newlines
from ..errors import AlphabetCorruptionError

PAD_CHAR = '='

# bytes produced by a quantum holding this many symbols
_QUANTUM_BYTES = {8: 5, 7: 4, 5: 3, 4: 2, 2: 1, 0: 0}


class Base32Codec:
    def __init__(self, name: str, alphabet: str, padded: bool, case_insensitive: bool = True) -> None:
        self.name = name
        self.alphabet = alphabet
        self.padded = padded
        self._decode_map = decode_map(alphabet, case_insensitive)

    def encode(self, data: BytesLike) -> str:
        return encode_bits(data, self.alphabet, 5, PAD_CHAR if self.padded else None)

    def decode(self, text: str) -> bytes:
        src = strip_newlines(text)
        olen = len(src)
        out = bytearray()
        pos = 0
        last = 0
        end = False

        while pos < olen and not end:
            dbuf = [0] * 8
            dlen = 8
            j = 0
            while j < 8:
                if pos == olen:
                    if self.padded:
                        # missing padding
                        raise AlphabetCorruptionError(olen - j, self.name)
                    if j in (1, 3, 6):
                        raise AlphabetCorruptionError(olen - j, self.name)
                    dlen, end = j, True
                    break

                char = src[pos]
                pos += 1
                remaining = olen - pos
                if self.padded and char == PAD_CHAR and j >= 2 and remaining < 8:
                    if remaining + j < 7:
                        # not enough padding
                        raise AlphabetCorruptionError(olen, self.name)
                    for k in range(7 - j):
                        if src[pos + k] != PAD_CHAR:
                            raise AlphabetCorruptionError(pos + k - 1, self.name)
                    if remaining > 7 - j:
                        raise AlphabetCorruptionError(pos + 7 - j, self.name)
                    dlen, end = j, True
                    # 1, 3 and 6 symbols cannot carry a whole byte
                    if dlen in (1, 3, 6):
                        raise AlphabetCorruptionError(pos - 1, self.name)
                    break

                value = self._decode_map.get(char)
                if value is None:
                    raise AlphabetCorruptionError(pos - 1, self.name)
                dbuf[j] = value
                last = pos - 1
                j += 1

            quantum = 0
            for value in dbuf:
                quantum = (quantum << 5) | value
            size = _QUANTUM_BYTES[dlen]
            if quantum & ((1 << (40 - size * 8)) - 1):
                # bits past the last whole byte must be zero
                raise AlphabetCorruptionError(last, self.name)
            out += quantum.to_bytes(5, 'big')[:size]

        return bytes(out)


_STD = 'ABCDEFGHIJKLMNOPQRSTUVWXYZ234567'
_HEX = '0123456789ABCDEFGHIJKLMNOPQRSTUV'

BASE32 = Base32Codec('base32', _STD.lower(), padded=False)
BASE32_UPPER = Base32Codec('base32upper', _STD, padded=False)
BASE32_PAD = Base32Codec('base32pad', _STD.lower(), padded=True)
BASE32_PAD_UPPER = Base32Codec('base32padupper', _STD, padded=True)
BASE32_HEX = Base32Codec('base32hex', _HEX.lower(), padded=False)
BASE32_HEX_UPPER = Base32Codec('base32hexupper', _HEX, padded=False)
BASE32_HEX_PAD = Base32Codec('base32hexpad', _HEX.lower(), padded=True)
BASE32_HEX_PAD_UPPER = Base32Codec('base32hexpadupper', _HEX, padded=True)
BASE32_Z = Base32Codec('base32z', 'ybndrfg8ejkmcpqxot1uwisza345h769', padded=False, case_insensitive=False)
