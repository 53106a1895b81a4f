"""Flat functions over plain Python values (str, bytes, dict)."""

from typing import Any, Dict, Tuple, Union

from . import multibase
from .cid import Cid

CidLike = Union[str, bytes, bytearray, memoryview]


def _parse_cid(data: CidLike) -> Cid:
    if isinstance(data, str):
        return Cid.from_string(data)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return Cid.from_bytes(data)
    raise ValueError(f'Unsupported data type: {type(data).__name__}')


def decode_cid(data: CidLike) -> Dict[str, Any]:
    return _parse_cid(data).to_dict()


def encode_cid(data: CidLike) -> str:
    return _parse_cid(data).to_string()


def encode_multibase(code: str, data: Union[str, bytes, bytearray]) -> str:
    if isinstance(data, str):
        data = data.encode('utf-8')
    elif not isinstance(data, (bytes, bytearray)):
        raise ValueError(f'Unsupported data type: {type(data).__name__}')

    return multibase.code_to_base(code).encode(data)


def decode_multibase(data: str) -> Tuple[str, bytes]:
    base = multibase.encoding(data)
    return base.code, base.decode(data[1:])
