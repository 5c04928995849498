"""
Codec chain used by the container decoders.

- RPack byte map (compaction codec)
- DEFLATE decompression
- MessagePack decoding
- AES-GCM decryption
- UTF-8 JSON documents
"""

from .base import Codec, resolve
from .rpack import IdentityCodec, ByteMapCodec, create_codec
from .deflate import decompress
from .msgpack_codec import unpack
from .crypto import decrypt_buffer, decrypt_buffer_sync, derive_key
from .text import decode_text, load_json

__all__ = [
    'Codec', 'resolve', 'IdentityCodec', 'ByteMapCodec', 'create_codec',
    'decompress', 'unpack', 'decode_text', 'load_json', 'decrypt_buffer', 'decrypt_buffer_sync', 'derive_key',
]
