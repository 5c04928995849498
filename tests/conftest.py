"""
Shared fixtures for building RisuAI containers in memory.
"""

import hashlib
import json
import struct
import zlib

import msgpack
import pytest
from cryptography.hazmat.primitives.ciphers.aead import AESGCM


def pack_u32(value):
    return struct.pack('<I', value)


def build_risum(main, assets=(), end_marker=0, encode=None):
    """Assemble a module container with the given main document and assets."""
    main_bytes = json.dumps(main).encode('utf-8')
    if encode is not None:
        main_bytes = encode(main_bytes)
    out = bytearray([111, 0])
    out += pack_u32(len(main_bytes)) + main_bytes
    for asset in assets:
        out.append(1)
        out += pack_u32(len(asset)) + asset
    if end_marker is not None:
        out.append(end_marker)
    return bytes(out)


def build_risup(value, compress=zlib.compress, encode=None):
    """Assemble a preset container: msgpack -> deflate -> (rpack)."""
    data = compress(msgpack.packb(value, use_bin_type=True))
    if encode is not None:
        data = encode(data)
    return data


def encrypt_bytes(plaintext, passphrase='risupreset'):
    key = hashlib.sha256(passphrase.encode('utf-8')).digest()
    return AESGCM(key).encrypt(bytes(12), plaintext, None)


def encrypt_preset(inner, passphrase='risupreset'):
    return encrypt_bytes(msgpack.packb(inner, use_bin_type=True), passphrase)


def make_byte_map():
    """Return (encode_table, decode_table) for a fixed byte permutation."""
    encode = bytes((i * 7 + 3) % 256 for i in range(256))
    decode = bytearray(256)
    for i, b in enumerate(encode):
        decode[b] = i
    return encode, bytes(decode)


class AsyncIdentityCodec:
    """Codec whose decode step suspends before returning."""

    def __init__(self):
        self.calls = 0

    async def decode(self, data):
        self.calls += 1
        return bytes(data)


class FailingCodec:
    def decode(self, data):
        raise ValueError("bad rpack payload")


MODULE_DOC = {
    "type": "risuModule",
    "module": {"name": "Test Module", "id": "mod-1", "lorebook": []},
}

INNER_PRESET = {
    "name": "My Preset",
    "temperature": 80,
    "promptTemplate": [{"type": "plain", "text": "hello"}],
}


@pytest.fixture
def module_doc():
    return json.loads(json.dumps(MODULE_DOC))


@pytest.fixture
def inner_preset():
    return dict(INNER_PRESET)


@pytest.fixture
def encrypted_wrapper(inner_preset):
    return {
        "presetVersion": 0,
        "type": "preset",
        "preset": encrypt_preset(inner_preset),
    }


@pytest.fixture
def byte_map_file(tmp_path):
    encode, decode = make_byte_map()
    path = tmp_path / 'rpack_map.bin'
    path.write_bytes(encode + decode)
    return path
