"""
JSON rendering of decoded value trees.

MessagePack payloads can hold values JSON has no notation for (binary
blobs, extension types, timestamps, non-string map keys). to_jsonable()
maps them onto plain JSON types.
"""

import base64
import json
from typing import Any, Dict

import msgpack

BYTES_ENCODINGS = ('base64', 'hex', 'list')


def _encode_bytes(data: bytes, encoding: str) -> Any:
    if encoding == 'base64':
        return base64.b64encode(data).decode('ascii')
    if encoding == 'hex':
        return data.hex()
    if encoding == 'list':
        return list(data)
    raise ValueError(f"Unknown bytes encoding: {encoding} (expected one of {', '.join(BYTES_ENCODINGS)})")


def _encode_key(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, (bytes, bytearray)):
        return bytes(key).hex()
    return json.dumps(to_jsonable(key))


def to_jsonable(value: Any, bytes_encoding: str = 'base64') -> Any:
    """
    Convert a decoded value tree to JSON-compatible types.

    Args:
        value: Decoded value (dicts, lists, scalars, bytes, msgpack types)
        bytes_encoding: How bytes are rendered: base64, hex or list

    Returns:
        A structure json.dumps accepts
    """
    if value is None or isinstance(value, (bool, int, float, str)):
        return value
    if hasattr(value, 'to_dict'):
        return to_jsonable(value.to_dict(), bytes_encoding)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return _encode_bytes(bytes(value), bytes_encoding)
    if isinstance(value, msgpack.Timestamp):
        return value.to_datetime().isoformat()
    if isinstance(value, msgpack.ExtType):
        return {"__ext__": value.code, "data": _encode_bytes(value.data, bytes_encoding)}
    if isinstance(value, dict):
        result: Dict[str, Any] = {}
        for key, item in value.items():
            result[_encode_key(key)] = to_jsonable(item, bytes_encoding)
        return result
    if isinstance(value, (list, tuple)):
        return [to_jsonable(item, bytes_encoding) for item in value]
    return str(value)


def dumps(
    value: Any,
    indent: int = 2,
    ensure_ascii: bool = False,
    bytes_encoding: str = 'base64'
) -> str:
    """Convert a decoded value tree to a JSON string."""
    return json.dumps(to_jsonable(value, bytes_encoding), indent=indent, ensure_ascii=ensure_ascii)
