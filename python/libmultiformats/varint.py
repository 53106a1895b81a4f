"""Unsigned LEB128 varints as used by every multiformat.

Only canonical encodings of values below ``2**63`` are produced or accepted:
at most 9 bytes and no redundant trailing zero group.
"""

from typing import Protocol, Tuple, Union

from .errors import (
    EndOfStreamError,
    UnexpectedEndOfStreamError,
    VarintError,
    VarintNotMinimalError,
    VarintOverflowError,
)

__all__ = [
    'ByteReader',
    'ByteSink',
    'ByteSource',
    'MAX_LEN_UVARINT63',
    'MAX_VALUE_UVARINT63',
    'decode',
    'encode',
    'read_uvarint',
    'write_uvarint',
]

BytesLike = Union[bytes, bytearray, memoryview]

MAX_LEN_UVARINT63 = 9
MAX_VALUE_UVARINT63 = 2**63 - 1


class ByteSource(Protocol):
    def read(self, size: int) -> bytes: ...


class ByteSink(Protocol):
    def write(self, data: bytes) -> int: ...


class ByteReader:
    """In-memory byte source that knows how much is left to read."""

    __slots__ = ('_view', '_pos')

    def __init__(self, data: BytesLike) -> None:
        self._view = memoryview(data).cast('B')
        self._pos = 0

    def read(self, size: int = -1) -> bytes:
        if size < 0:
            size = len(self._view) - self._pos
        chunk = self._view[self._pos:self._pos + size]
        self._pos += len(chunk)
        return chunk.tobytes()

    def read_exact(self, size: int) -> bytes:
        if self.remaining() < size:
            raise UnexpectedEndOfStreamError(f'expected {size} bytes, only {self.remaining()} remaining')
        return self.read(size)

    def remaining(self) -> int:
        return len(self._view) - self._pos

    def tell(self) -> int:
        return self._pos


def encode(value: int) -> bytes:
    if value < 0:
        raise VarintError(f'varint must be non-negative, got {value}')
    if value > MAX_VALUE_UVARINT63:
        raise VarintOverflowError('varints larger than uint63 not supported')

    output = bytearray()
    while value >= 0x80:
        output.append((value & 0x7F) | 0x80)
        value >>= 7
    output.append(value)
    return bytes(output)


def write_uvarint(sink: ByteSink, value: int) -> int:
    """Write ``value`` to ``sink`` and return the number of bytes written."""
    data = encode(value)
    sink.write(data)
    return len(data)


def read_uvarint(source: ByteSource) -> int:
    value = 0
    shift = 0
    i = 0
    while True:
        chunk = source.read(1)
        if not chunk:
            if i == 0:
                raise EndOfStreamError('EndOfStream')
            raise UnexpectedEndOfStreamError('UnexpectedEndOfStream')

        b = chunk[0]
        if (i == MAX_LEN_UVARINT63 - 1 and b >= 0x80) or i >= MAX_LEN_UVARINT63:
            # the 9th byte still signals a continuation
            raise VarintOverflowError('varints larger than uint63 not supported')

        if b < 0x80:
            if b == 0 and shift > 0:
                raise VarintNotMinimalError('varint not minimally encoded')
            return value | (b << shift)

        value |= (b & 0x7F) << shift
        shift += 7
        i += 1


def decode(data: BytesLike) -> Tuple[int, int]:
    """Decode the varint at the start of ``data``.

    Returns the value and the number of bytes it occupied.
    """
    reader = ByteReader(data)
    value = read_uvarint(reader)
    return value, reader.tell()
