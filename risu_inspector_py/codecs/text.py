"""
UTF-8 JSON documents.

Text is decoded the way a browser TextDecoder does it: a leading BOM is
dropped and invalid byte sequences become U+FFFD.
"""

import json
from typing import Any

from .base import codec_stage


def decode_text(data: bytes) -> str:
    return bytes(data).decode('utf-8-sig', errors='replace')


def load_json(data: bytes) -> Any:
    """
    Parse a UTF-8 JSON document.

    Raises:
        MalformedCodecInputError: If the text is not valid JSON
    """
    with codec_stage('json'):
        return json.loads(decode_text(data))
