import io

import pytest
from libmultiformats import (
    EndOfStreamError,
    UnexpectedEndOfStreamError,
    VarintError,
    VarintNotMinimalError,
    VarintOverflowError,
    varint,
)


@pytest.mark.parametrize(
    'value, encoded',
    [
        (0, b'\x00'),
        (1, b'\x01'),
        (127, b'\x7f'),
        (128, b'\x80\x01'),
        (255, b'\xff\x01'),
        (300, b'\xac\x02'),
        (16384, b'\x80\x80\x01'),
        (2**63 - 1, b'\xff' * 8 + b'\x7f'),
    ],
)
def test_varint_encode(value, encoded) -> None:
    assert varint.encode(value) == encoded
    assert varint.decode(encoded) == (value, len(encoded))


def test_varint_roundtrip() -> None:
    for shift in range(63):
        for value in ((1 << shift) - 1, 1 << shift, (1 << shift) + 1):
            if value > varint.MAX_VALUE_UVARINT63:
                continue

            encoded = varint.encode(value)
            assert len(encoded) <= varint.MAX_LEN_UVARINT63
            assert varint.decode(encoded) == (value, len(encoded))


def test_varint_decode_ignores_trailing_data() -> None:
    assert varint.decode(b'\xac\x02\xff\xff') == (300, 2)


def test_varint_encode_negative_error() -> None:
    with pytest.raises(VarintError) as exc_info:
        varint.encode(-1)

    assert 'non-negative' in str(exc_info.value)


def test_varint_encode_overflow_error() -> None:
    with pytest.raises(VarintOverflowError):
        varint.encode(2**63)


def test_varint_decode_not_minimal_error() -> None:
    with pytest.raises(VarintNotMinimalError) as exc_info:
        varint.decode(b'\x80\x00')

    assert 'not minimally encoded' in str(exc_info.value)

    with pytest.raises(VarintNotMinimalError):
        varint.decode(b'\x81\x80\x00')


def test_varint_decode_overflow_error() -> None:
    with pytest.raises(VarintOverflowError):
        varint.decode(b'\xff' * 10)

    with pytest.raises(VarintOverflowError):
        varint.decode(b'\xff' * 8 + b'\x80\x01')


def test_varint_decode_end_of_stream() -> None:
    with pytest.raises(EndOfStreamError):
        varint.decode(b'')

    with pytest.raises(UnexpectedEndOfStreamError):
        varint.decode(b'\x80')

    with pytest.raises(UnexpectedEndOfStreamError):
        varint.decode(b'\xff\xff')


def test_varint_errors_are_value_errors() -> None:
    with pytest.raises(ValueError):
        varint.decode(b'\x80\x00')


def test_varint_stream() -> None:
    sink = io.BytesIO()
    assert varint.write_uvarint(sink, 300) == 2
    assert varint.write_uvarint(sink, 1) == 1

    source = io.BytesIO(sink.getvalue())
    assert varint.read_uvarint(source) == 300
    assert varint.read_uvarint(source) == 1

    with pytest.raises(EndOfStreamError):
        varint.read_uvarint(source)


def test_varint_write_propagates_sink_error() -> None:
    class BrokenSink:
        def write(self, data: bytes) -> int:
            raise OSError('sink closed')

    with pytest.raises(OSError) as exc_info:
        varint.write_uvarint(BrokenSink(), 1)

    assert 'sink closed' in str(exc_info.value)


def test_byte_reader() -> None:
    reader = varint.ByteReader(bytearray(b'\x01\x02\x03'))
    assert reader.read(1) == b'\x01'
    assert reader.remaining() == 2
    assert reader.read_exact(2) == b'\x02\x03'
    assert reader.tell() == 3
    assert reader.read(1) == b''

    with pytest.raises(UnexpectedEndOfStreamError):
        reader.read_exact(1)


@pytest.mark.benchmark_main
def test_varint_decode_max(benchmark) -> None:
    encoded = varint.encode(varint.MAX_VALUE_UVARINT63)
    assert benchmark(varint.decode, encoded) == (varint.MAX_VALUE_UVARINT63, 9)
