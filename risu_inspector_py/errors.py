"""
Exception types raised while decoding RisuAI containers.
"""

from typing import Optional


class RisuFormatError(ValueError):
    """Base class for every decode failure."""


class InvalidMagicError(RisuFormatError):
    """The container does not start with the expected magic byte."""


class UnsupportedVersionError(RisuFormatError):
    """The container version byte is not supported."""


class TruncatedBufferError(RisuFormatError):
    """A read requested more bytes than remain in the buffer."""

    def __init__(self, offset: int, requested: int, available: int):
        super().__init__(
            f"Truncated buffer: need {requested} byte(s) at offset {offset}, "
            f"only {available} available"
        )
        self.offset = offset
        self.requested = requested
        self.available = available


class InvalidPayloadTypeError(RisuFormatError):
    """The decoded payload is not the kind of document the container promises."""


class MalformedCodecInputError(RisuFormatError):
    """A codec stage rejected its input."""

    def __init__(self, stage: str, message: str, cause: Optional[BaseException] = None):
        super().__init__(f"{stage}: {message}")
        self.stage = stage
        self.cause = cause


class DecryptionError(RisuFormatError):
    """Authenticated decryption failed (wrong key or tampered data)."""


class UnsupportedExtensionError(RisuFormatError):
    """The file name does not end with a recognised suffix."""
