"""
Bounds-checked binary stream reader.

This module provides a BinaryStream class that reads little-endian
primitives from an immutable byte buffer. Every read advances the
position by exactly the number of bytes consumed; a read that would run
past the end raises TruncatedBufferError and leaves the position alone.
"""

import struct
from typing import Union

from ..errors import TruncatedBufferError

Buffer = Union[bytes, bytearray, memoryview]

_UINT32 = struct.Struct('<I')


class BinaryStream:
    """
    Sequential reader over a read-only byte buffer.

    Attributes:
        position: Current read offset
        length: Total buffer length
    """

    def __init__(self, data: Buffer):
        """
        Initialize a BinaryStream.

        Args:
            data: Raw bytes, bytearray or memoryview to read from
        """
        view = memoryview(data)
        if view.ndim != 1 or view.format != 'B':
            view = view.cast('B')
        self._data = view.toreadonly()
        self._position = 0

    # ========== Position and Length ==========

    @property
    def position(self) -> int:
        """Get current stream position."""
        return self._position

    @property
    def length(self) -> int:
        """Get stream length."""
        return len(self._data)

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._data) - self._position

    def at_end(self) -> bool:
        return self._position >= len(self._data)

    def _require(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"Cannot read a negative number of bytes ({count})")
        if count > self.remaining:
            raise TruncatedBufferError(self._position, count, self.remaining)

    # ========== Primitive Readers ==========

    def read_bytes(self, count: int) -> memoryview:
        """
        Read raw bytes.

        Returns a read-only view into the underlying buffer, not a copy.
        """
        self._require(count)
        start = self._position
        self._position += count
        return self._data[start:self._position]

    def read_byte(self) -> int:
        """Read an unsigned byte."""
        self._require(1)
        value = self._data[self._position]
        self._position += 1
        return value

    def read_uint32(self) -> int:
        """Read an unsigned little-endian 32-bit integer."""
        self._require(4)
        value = _UINT32.unpack_from(self._data, self._position)[0]
        self._position += 4
        return value

    def skip(self, count: int) -> None:
        """Advance past count bytes without returning them."""
        self._require(count)
        self._position += count

    def dispose(self) -> None:
        """Release the buffer view."""
        self._data.release()

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.dispose()
