"""
RPack compaction codec.

RPack payloads are byte-substituted: every byte of the stored data maps
to exactly one byte of the original through a fixed 256-entry table.
The table ships separately as a map file, either the 512-byte form
(encode table followed by decode table) or a bare 256-byte decode table.
"""

from pathlib import Path
from typing import Optional, Union

from .base import Codec

MAP_TABLE_SIZE = 256


class IdentityCodec:
    """Pass-through codec for input that is not RPack encoded."""

    def decode(self, data: bytes) -> bytes:
        return bytes(data)


class ByteMapCodec:
    """Table driven RPack decoder."""

    def __init__(self, decode_table: bytes):
        if len(decode_table) != MAP_TABLE_SIZE:
            raise ValueError(
                f"RPack decode table must be {MAP_TABLE_SIZE} bytes, got {len(decode_table)}"
            )
        self._table = bytes(decode_table)

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'ByteMapCodec':
        """
        Load a codec from an RPack map file.

        Args:
            path: Path to a 512-byte (encode + decode) or 256-byte (decode) map

        Raises:
            ValueError: If the file has any other size
        """
        data = Path(path).read_bytes()
        if len(data) == MAP_TABLE_SIZE * 2:
            return cls(data[MAP_TABLE_SIZE:])
        if len(data) == MAP_TABLE_SIZE:
            return cls(data)
        raise ValueError(f"Invalid RPack map file size: {len(data)} bytes")

    def decode(self, data: bytes) -> bytes:
        return bytes(data).translate(self._table)


def create_codec(map_path: Optional[Union[str, Path]] = None) -> Codec:
    """Build the byte map codec for map_path, or the identity codec if none is given."""
    if map_path:
        return ByteMapCodec.from_file(map_path)
    return IdentityCodec()
