import libmultiformats
import pytest
from libmultiformats import AlphabetCorruptionError, Multibase, UnknownBaseError, multibase

from conftest import load_csv_data_fixtures

_CORPUS = [
    b'',
    b'\x00',
    b'\x00\x00\x00yes mani !',
    b'f',
    b'fo',
    b'foo',
    b'foob',
    b'fooba',
    b'foobar',
    b'hello world',
    bytes(range(256)),
    bytes(range(255, -1, -1)) * 3,
]


def test_multibase_encode() -> None:
    assert libmultiformats.encode_multibase('7', 'yes mani !') == '7362625631006654133464440102'
    assert libmultiformats.encode_multibase('u', b'yes mani !') == 'ueWVzIG1hbmkgIQ'
    assert libmultiformats.encode_multibase(
        'z',
        b'\xe7\x01\x03\xe2@y~I\xd8W\xdb}\xfb\xb1\xc4uG\xd6ec\xf8]\xb3\x16\xd0;\x11S\x19\xcfX\xf8\xb5QB'
    ) == 'zQ3shusJHhGZ21fxVrCSs4TNNYQp84yDcT7XhpR2thAvV26wB'
    assert libmultiformats.encode_multibase(
        'z',
        bytearray(b'\xe7\x01\x03\xe2@y~I\xd8W\xdb}\xfb\xb1\xc4uG\xd6ec\xf8]\xb3\x16\xd0;\x11S\x19\xcfX\xf8\xb5QB')
    ) == 'zQ3shusJHhGZ21fxVrCSs4TNNYQp84yDcT7XhpR2thAvV26wB'


def test_multibase_decode() -> None:
    code, b = libmultiformats.decode_multibase('zQ3shusJHhGZ21fxVrCSs4TNNYQp84yDcT7XhpR2thAvV26wB')
    assert code == 'z'
    assert b == b'\xe7\x01\x03\xe2@y~I\xd8W\xdb}\xfb\xb1\xc4uG\xd6ec\xf8]\xb3\x16\xd0;\x11S\x19\xcfX\xf8\xb5QB'

    code, b = libmultiformats.decode_multibase('ueWVzIG1hbmkgIQ')
    assert code == 'u'
    assert b == b'yes mani !'

    assert libmultiformats.decode_multibase('BPFSXGIDNMFXGSIBB') == ('B', b'yes mani !')
    assert libmultiformats.decode_multibase('7362625631006654133464440102') == ('7', b'yes mani !')


def test_multibase_encode_unsupported_type() -> None:
    with pytest.raises(ValueError) as exc_info:
        libmultiformats.encode_multibase('u', 123)

    assert 'Unsupported data type' in str(exc_info.value)


def test_multibase_decode_unknown_base_error() -> None:
    with pytest.raises(ValueError) as exc_info:
        libmultiformats.decode_multibase('dddddd')

    assert 'Unknown base code' in str(exc_info.value)


def test_multibase_decode_empty_string_error() -> None:
    with pytest.raises(UnknownBaseError):
        multibase.decode('')


def test_multibase_decode_invalid_base_string_error() -> None:
    with pytest.raises(ValueError) as exc_info:
        libmultiformats.decode_multibase('u123')

    assert 'Invalid base string' in str(exc_info.value)


def test_multibase_encode_kwargs() -> None:
    assert libmultiformats.encode_multibase(code='7', data='yes mani !') == '7362625631006654133464440102'


@pytest.mark.parametrize('data', load_csv_data_fixtures(), ids=lambda data: data[0])
def test_multibase_vectors(data) -> None:
    _, (encoding, decoded, encoded, canonical) = data
    base = multibase.name_to_base(encoding)

    if canonical:
        assert base.encode(decoded) == encoded
    assert multibase.encoding(encoded) is base
    assert multibase.decode(encoded) == decoded


def test_multibase_canonical_vectors() -> None:
    assert multibase.encode(Multibase.BASE64, b'foobar') == 'mZm9vYmFy'
    assert multibase.encode(Multibase.BASE32_PAD, b'f') == 'cmy======'
    assert multibase.encode(Multibase.BASE58_BTC, b'hello world') == 'zStV1DL6CwTryKyV'

    identity = multibase.encode(Multibase.IDENTITY, b'hello world')
    assert identity[0] == '\x00'
    assert identity[1:] == 'hello world'


@pytest.mark.parametrize(
    'name, decoded, encoded',
    [
        ('base16', b'foobar', 'f666f6f626172'),
        ('base32', b'foob', 'bmzxw6yq'),
        ('base32pad', b'foob', 'cmzxw6yq='),
        ('base32pad', b'foobar', 'cmzxw6ytboi======'),
        ('base32hex', b'fo', 'vcpng'),
        ('base32hexpad', b'fooba', 'tcpnmuoj1'),
        ('base64', b'fo', 'mZm8'),
        ('base64', '÷ïÿ'.encode(), 'mw7fDr8O/'),
        ('base64pad', b'f', 'MZg=='),
        ('base64url', '÷ïÿ'.encode(), 'uw7fDr8O_'),
        ('base64urlpad', b'fooba', 'UZm9vYmE='),
    ],
)
def test_multibase_encode_name(name, decoded, encoded) -> None:
    assert multibase.encode_name(name, decoded) == encoded
    assert multibase.decode(encoded) == decoded


def test_multibase_unknown_name() -> None:
    with pytest.raises(UnknownBaseError):
        multibase.name_to_base('base99')


@pytest.mark.parametrize('base', list(Multibase), ids=lambda base: base.encoding)
def test_multibase_roundtrip(base) -> None:
    for data in _CORPUS:
        encoded = base.encode(data)
        assert encoded[0] == base.code
        assert multibase.decode(encoded) == data


@pytest.mark.parametrize(
    'base',
    [base for base in Multibase if 'pad' not in base.encoding and base is not Multibase.IDENTITY],
    ids=str,
)
def test_multibase_unpadded_never_pads(base) -> None:
    for data in _CORPUS:
        assert '=' not in base.encode(data)


def test_multibase_base32pad_reencodes_unpadded_input() -> None:
    data = multibase.decode('ctimaq4ygg2iegci7')
    assert Multibase.BASE32_PAD.encode(data) == 'ctimaq4ygg2iegci7'


@pytest.mark.parametrize(
    'encoded, offset',
    [
        ('', -1),
        ('!!!!', 0),
        ('!===', 0),
        ('AA=A====', 2),
        ('AAA=AAAA', 3),
        ('MMMMMMMMM', 8),
        ('MMMMMM', 0),
        ('A=', 1),
        ('AA=', 3),
        ('AA==', 4),
        ('AA===', 5),
        ('AAAA=', 5),
        ('AAAA==', 6),
        ('AAAAA=', 6),
        ('AAAAA==', 7),
        ('A=======', 1),
        ('AA======', -1),
        ('AAA=====', 3),
        ('AAAA====', -1),
        ('AAAAA===', -1),
        ('AAAAAA==', 6),
        ('AAAAAAA=', -1),
        ('AAAAAAAA', -1),
    ],
)
def test_base32_decode_corrupt(encoded, offset) -> None:
    if offset < 0:
        Multibase.BASE32_PAD_UPPER.decode(encoded)
        return

    with pytest.raises(AlphabetCorruptionError) as exc_info:
        Multibase.BASE32_PAD_UPPER.decode(encoded)

    assert exc_info.value.offset == offset
    assert f'illegal base32padupper data at input byte {offset}' in str(exc_info.value)


@pytest.mark.parametrize(
    'encoded, offset',
    [
        ('', -1),
        ('\n', -1),
        ('AAA=\n', -1),
        ('AAAA\n', -1),
        ('!!!!', 0),
        ('====', 0),
        ('x===', 1),
        ('=AAA', 0),
        ('A=AA', 1),
        ('AA=A', 2),
        ('AA==A', 4),
        ('AAA=AAAA', 4),
        ('AAAAA', 4),
        ('AAAAAA', 4),
        ('A=', 1),
        ('A==', 1),
        ('AA=', 3),
        ('AA==', -1),
        ('AAA=', -1),
        ('AAAA', -1),
        ('AAAAAA=', 7),
        ('YWJjZA=====', 8),
        ('A!\n', 1),
        ('A=\n', 1),
    ],
)
def test_base64_decode_corrupt(encoded, offset) -> None:
    if offset < 0:
        Multibase.BASE64_PAD.decode(encoded)
        return

    with pytest.raises(AlphabetCorruptionError) as exc_info:
        Multibase.BASE64_PAD.decode(encoded)

    assert exc_info.value.offset == offset


@pytest.mark.parametrize(
    'encoded, expected',
    [
        ('ON2XEZI=', b'sure'),
        ('ON2XEZI=\r', b'sure'),
        ('ON2XEZI=\n', b'sure'),
        ('ON2XEZI=\r\n', b'sure'),
        ('ON2XEZ\r\nI=', b'sure'),
        ('ON2X\rEZ\nI=', b'sure'),
        ('ON2X\nEZ\rI=', b'sure'),
        ('ON2XEZ\nI=', b'sure'),
        ('ON2XEZI\n=', b'sure'),
        ('MZXW6YTBOI======', b'foobar'),
        ('MZXW6YTBOI=\r\n=====', b'foobar'),
    ],
)
def test_base32_decode_newlines(encoded, expected) -> None:
    assert Multibase.BASE32_PAD_UPPER.decode(encoded) == expected


def test_base32_unpadded_rejects_partial_quantum() -> None:
    with pytest.raises(AlphabetCorruptionError) as exc_info:
        Multibase.BASE32_UPPER.decode('MMM')

    assert exc_info.value.offset == 0


@pytest.mark.parametrize(
    'base, encoded, offset',
    [
        (Multibase.BASE32, 'mz', 1),
        (Multibase.BASE32, 'mzxw7', 4),
        (Multibase.BASE32_UPPER, 'MZXW6YR', 6),
        (Multibase.BASE32_PAD_UPPER, 'MZ======', 1),
        (Multibase.BASE32_HEX, 'cq', 1),
        (Multibase.BASE32_Z, 'cb', 1),
    ],
)
def test_base32_rejects_nonzero_trailing_bits(base, encoded, offset) -> None:
    with pytest.raises(AlphabetCorruptionError) as exc_info:
        base.decode(encoded)

    assert exc_info.value.offset == offset


def test_base32_trailing_bits_canonical() -> None:
    assert Multibase.BASE32.decode('my') == b'f'
    assert Multibase.BASE32.decode('mzxw6') == b'foo'
    assert Multibase.BASE32_UPPER.decode('MZXW6YQ') == b'foob'


@pytest.mark.parametrize(
    'base, encoded, offset',
    [
        (Multibase.BASE58_BTC, '3yQ0', 3),
        (Multibase.BASE58_BTC, 'Il', 0),
        (Multibase.BASE10, '12a', 2),
        (Multibase.BASE8, '9', 0),
        (Multibase.BASE2, '0101010', 7),
        (Multibase.BASE16, 'abc', 3),
        (Multibase.BASE16, 'zz', 0),
        (Multibase.BASE36, 'k-', 1),
    ],
)
def test_alphabet_corruption_offset(base, encoded, offset) -> None:
    with pytest.raises(AlphabetCorruptionError) as exc_info:
        base.decode(encoded)

    assert exc_info.value.offset == offset


@pytest.mark.benchmark_main
def test_multibase_decode_base58btc(benchmark) -> None:
    encoded = Multibase.BASE58_BTC.encode(bytes(range(256)))
    decoded = benchmark(multibase.decode, encoded)

    assert decoded == bytes(range(256))
