"""
DEFLATE-family decompression.

Accepts gzip, zlib and raw deflate streams, picking the container from
the stream header.
"""

import zlib

from .base import codec_stage

GZIP_MAGIC = b'\x1f\x8b\x08'


def _has_zlib_header(data: bytes) -> bool:
    if len(data) < 2:
        return False
    cmf, flg = data[0], data[1]
    return (cmf & 0x0F) == 8 and (cmf >> 4) <= 7 and ((cmf << 8) | flg) % 31 == 0


def detect_wbits(data: bytes) -> int:
    """Return the zlib wbits value matching the stream's container."""
    if data[:3] == GZIP_MAGIC:
        return 16 + zlib.MAX_WBITS
    if _has_zlib_header(data):
        return zlib.MAX_WBITS
    return -zlib.MAX_WBITS


def decompress(data: bytes) -> bytes:
    """
    Decompress a deflate stream.

    Raises:
        MalformedCodecInputError: If the stream is corrupt or incomplete
    """
    data = bytes(data)
    with codec_stage('deflate', zlib.error):
        decompressor = zlib.decompressobj(detect_wbits(data))
        result = decompressor.decompress(data) + decompressor.flush()
        if not decompressor.eof:
            raise zlib.error("incomplete or truncated stream")
    return result
