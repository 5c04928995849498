"""
Module container (.risum) parser.

Layout:
    [magic:u8][version:u8][main_len:u32][main bytes][assets...]

The main section is RPack encoded UTF-8 JSON. Each asset section is a
marker byte followed, for CONTINUE, by a u32 length and the asset bytes.
Asset bytes are counted and skipped, never decoded.
"""

from typing import Any, Optional

from ..codecs.base import Codec, codec_stage, resolve
from ..codecs.rpack import IdentityCodec
from ..codecs.text import load_json
from ..errors import InvalidMagicError, InvalidPayloadTypeError, UnsupportedVersionError
from ..io.binary_stream import BinaryStream, Buffer
from .risum_structures import (
    RisumFile, AssetMarker,
    RISUM_MAGIC, RISUM_VERSION, RISUM_PAYLOAD_TYPE
)


class RisumReader(BinaryStream):
    """
    Reader for RisuAI module containers.

    Nothing is decoded until read() is awaited; a reader is good for a
    single read.
    """

    def __init__(self, data: Buffer, codec: Optional[Codec] = None):
        super().__init__(data)
        self.codec = codec if codec is not None else IdentityCodec()

    async def read(self) -> RisumFile:
        """
        Parse the whole container.

        Raises:
            InvalidMagicError: If the first byte is not the module magic
            UnsupportedVersionError: If the version byte is not supported
            TruncatedBufferError: If a declared length runs past the end
            MalformedCodecInputError: If the main section fails to decode
            InvalidPayloadTypeError: If the main document is not a module
        """
        self._read_header()
        main = await self._read_main_section()
        assets = self._skip_assets()
        return RisumFile(module=main.get('module'), embedded_assets_count=assets)

    def _read_header(self) -> None:
        magic = self.read_byte()
        if magic != RISUM_MAGIC:
            raise InvalidMagicError(f"Invalid magic number for .risum file: {magic}")

        version = self.read_byte()
        if version != RISUM_VERSION:
            raise UnsupportedVersionError(f"Unsupported .risum version: {version}")

    async def _read_main_section(self) -> Any:
        length = self.read_uint32()
        data = bytes(self.read_bytes(length))

        with codec_stage('rpack'):
            decoded = await resolve(self.codec.decode(data))

        main = load_json(decoded)

        if not isinstance(main, dict) or main.get('type') != RISUM_PAYLOAD_TYPE:
            raise InvalidPayloadTypeError("Invalid module type embedded in file")

        return main

    def _skip_assets(self) -> int:
        """Skip asset sections and return how many were present."""
        count = 0
        while not self.at_end():
            # Unknown markers end the asset list like STOP does
            if self.read_byte() != AssetMarker.CONTINUE:
                break
            self.skip(self.read_uint32())
            count += 1
        return count


async def decode_risum(data: Buffer, codec: Optional[Codec] = None) -> RisumFile:
    """Decode a module container held in memory."""
    with RisumReader(data, codec) as reader:
        return await reader.read()
