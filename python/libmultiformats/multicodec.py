"""Immutable multicodec table: numeric code <-> symbolic name.

Only the entries this library needs to understand CIDs and multihashes are
listed; the table is data and is never mutated at runtime.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from .errors import UnknownCodecError

__all__ = [
    'Multicodec',
    'code_to_type',
    'name_to_type',
    'codecs',
]


@dataclass(frozen=True)
class Multicodec:
    name: str
    tag: str
    code: int

    def __str__(self) -> str:
        return self.name


_TABLE: List[Tuple[str, str, int]] = [
    ('identity', 'multihash', 0x00),
    ('cidv1', 'cid', 0x01),
    ('cidv2', 'cid', 0x02),
    ('cidv3', 'cid', 0x03),
    ('sha1', 'multihash', 0x11),
    ('sha2-256', 'multihash', 0x12),
    ('sha2-512', 'multihash', 0x13),
    ('sha3-512', 'multihash', 0x14),
    ('sha3-384', 'multihash', 0x15),
    ('sha3-256', 'multihash', 0x16),
    ('sha3-224', 'multihash', 0x17),
    ('shake-128', 'multihash', 0x18),
    ('shake-256', 'multihash', 0x19),
    ('keccak-224', 'multihash', 0x1a),
    ('keccak-256', 'multihash', 0x1b),
    ('keccak-384', 'multihash', 0x1c),
    ('keccak-512', 'multihash', 0x1d),
    ('blake3', 'multihash', 0x1e),
    ('sha2-384', 'multihash', 0x20),
    ('murmur3-x64-64', 'multihash', 0x22),
    ('murmur3-32', 'multihash', 0x23),
    ('multicodec', 'multiformat', 0x30),
    ('multihash', 'multiformat', 0x31),
    ('multiaddr', 'multiformat', 0x32),
    ('multibase', 'multiformat', 0x33),
    ('protobuf', 'serialization', 0x50),
    ('cbor', 'serialization', 0x51),
    ('raw', 'ipld', 0x55),
    ('dbl-sha2-256', 'multihash', 0x56),
    ('rlp', 'serialization', 0x60),
    ('bencode', 'serialization', 0x63),
    ('dag-pb', 'ipld', 0x70),
    ('dag-cbor', 'ipld', 0x71),
    ('libp2p-key', 'ipld', 0x72),
    ('git-raw', 'ipld', 0x78),
    ('torrent-info', 'ipld', 0x7b),
    ('torrent-file', 'ipld', 0x7c),
    ('leofcoin-block', 'ipld', 0x81),
    ('leofcoin-tx', 'ipld', 0x82),
    ('leofcoin-pr', 'ipld', 0x83),
    ('dag-jose', 'ipld', 0x85),
    ('dag-cose', 'ipld', 0x86),
    ('eth-block', 'ipld', 0x90),
    ('eth-block-list', 'ipld', 0x91),
    ('eth-tx-trie', 'ipld', 0x92),
    ('eth-tx', 'ipld', 0x93),
    ('eth-tx-receipt-trie', 'ipld', 0x94),
    ('eth-tx-receipt', 'ipld', 0x95),
    ('eth-state-trie', 'ipld', 0x96),
    ('eth-account-snapshot', 'ipld', 0x97),
    ('eth-storage-trie', 'ipld', 0x98),
    ('bitcoin-block', 'ipld', 0xb0),
    ('bitcoin-tx', 'ipld', 0xb1),
    ('zcash-block', 'ipld', 0xc0),
    ('zcash-tx', 'ipld', 0xc1),
    ('md4', 'multihash', 0xd4),
    ('md5', 'multihash', 0xd5),
    ('ipfs', 'namespace', 0xe3),
    ('ipns', 'namespace', 0xe5),
    ('secp256k1-pub', 'key', 0xe7),
    ('ed25519-pub', 'key', 0xed),
    ('dag-json', 'ipld', 0x0129),
    ('swhid-1-snp', 'ipld', 0x01f0),
    ('json', 'ipld', 0x0200),
    ('sha2-256-trunc254-padded', 'multihash', 0x1012),
    ('sha2-224', 'multihash', 0x1013),
    ('sha2-512-224', 'multihash', 0x1014),
    ('sha2-512-256', 'multihash', 0x1015),
]

# blake2b-8 .. blake2b-512 and blake2s-8 .. blake2s-256, one code per output byte
_TABLE += [(f'blake2b-{size * 8}', 'multihash', 0xb200 + size) for size in range(1, 65)]
_TABLE += [(f'blake2s-{size * 8}', 'multihash', 0xb240 + size) for size in range(1, 33)]

_BY_CODE: Dict[int, Multicodec] = {}
_BY_NAME: Dict[str, Multicodec] = {}
for _name, _tag, _code in _TABLE:
    _BY_CODE[_code] = _BY_NAME[_name] = Multicodec(_name, _tag, _code)
del _name, _tag, _code


def code_to_type(code: int) -> Multicodec:
    try:
        return _BY_CODE[code]
    except KeyError:
        raise UnknownCodecError(f'Unknown multicodec code: 0x{code:x}') from None


def name_to_type(name: str) -> Multicodec:
    try:
        return _BY_NAME[name]
    except KeyError:
        raise UnknownCodecError(f'Unknown multicodec name: {name!r}') from None


def codecs() -> List[Multicodec]:
    return sorted(_BY_CODE.values(), key=lambda codec: codec.code)


IDENTITY = _BY_NAME['identity']
SHA1 = _BY_NAME['sha1']
SHA2_224 = _BY_NAME['sha2-224']
SHA2_256 = _BY_NAME['sha2-256']
SHA2_384 = _BY_NAME['sha2-384']
SHA2_512 = _BY_NAME['sha2-512']
SHA2_512_224 = _BY_NAME['sha2-512-224']
SHA2_512_256 = _BY_NAME['sha2-512-256']
SHA3_224 = _BY_NAME['sha3-224']
SHA3_256 = _BY_NAME['sha3-256']
SHA3_384 = _BY_NAME['sha3-384']
SHA3_512 = _BY_NAME['sha3-512']
SHAKE_128 = _BY_NAME['shake-128']
SHAKE_256 = _BY_NAME['shake-256']
KECCAK_224 = _BY_NAME['keccak-224']
KECCAK_256 = _BY_NAME['keccak-256']
KECCAK_384 = _BY_NAME['keccak-384']
KECCAK_512 = _BY_NAME['keccak-512']
BLAKE3 = _BY_NAME['blake3']
DBL_SHA2_256 = _BY_NAME['dbl-sha2-256']
MD5 = _BY_NAME['md5']
BLAKE2B_8 = _BY_NAME['blake2b-8']
BLAKE2B_256 = _BY_NAME['blake2b-256']
BLAKE2B_512 = _BY_NAME['blake2b-512']
BLAKE2S_256 = _BY_NAME['blake2s-256']

RAW = _BY_NAME['raw']
DAG_PB = _BY_NAME['dag-pb']
DAG_CBOR = _BY_NAME['dag-cbor']
DAG_JSON = _BY_NAME['dag-json']
LIBP2P_KEY = _BY_NAME['libp2p-key']
