"""
MessagePack decoding of preset payloads.
"""

from typing import Any

import msgpack
from msgpack.exceptions import UnpackException

from .base import codec_stage


def unpack(data: bytes) -> Any:
    """
    Decode a single MessagePack document.

    Strings are decoded as UTF-8, bin values come back as bytes and map
    keys of any hashable type are allowed.

    Raises:
        MalformedCodecInputError: If data is not exactly one valid document
    """
    with codec_stage('msgpack', UnpackException):
        return msgpack.unpackb(bytes(data), raw=False, strict_map_key=False)
