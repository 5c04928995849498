"""Tests for the preset container parser."""

import asyncio
import gzip
import zlib

import msgpack
import pytest

from risu_inspector_py.codecs import ByteMapCodec
from risu_inspector_py.errors import (
    DecryptionError, InvalidPayloadTypeError, MalformedCodecInputError,
)
from risu_inspector_py.formats import RisupFile, decode_risup
from risu_inspector_py.formats.risup import is_encrypted_wrapper

from .conftest import (
    build_risup, encrypt_bytes, encrypt_preset, make_byte_map, AsyncIdentityCodec, FailingCodec
)


def decode(data, codec=None, **kwargs):
    return asyncio.run(decode_risup(data, codec, **kwargs))


def raw_deflate(data):
    compressor = zlib.compressobj(wbits=-zlib.MAX_WBITS)
    return compressor.compress(data) + compressor.flush()


def test_unencrypted_version_passes_through():
    value = {"presetVersion": 1, "type": "preset", "name": "plain", "preset": b"\x00\x01"}
    assert decode(build_risup(value)) == value


def test_non_preset_type_passes_through(encrypted_wrapper):
    encrypted_wrapper["type"] = "module"
    assert decode(build_risup(encrypted_wrapper)) == encrypted_wrapper


def test_non_mapping_passes_through():
    assert decode(build_risup([1, 2, "three"])) == [1, 2, "three"]


def test_boolean_version_is_not_zero(encrypted_wrapper):
    encrypted_wrapper["presetVersion"] = False
    assert decode(build_risup(encrypted_wrapper)) == encrypted_wrapper


def test_decrypts_version_zero(encrypted_wrapper, inner_preset):
    result = decode(build_risup(encrypted_wrapper))
    assert isinstance(result, RisupFile)
    assert result.preset == inner_preset
    assert result.to_dict() == {
        "_meta": {"format": "risup", "presetVersion": 0, "wrapperType": "preset"},
        "preset": inner_preset,
    }


def test_decrypts_version_two_from_fallback_field(inner_preset):
    wrapper = {"presetVersion": 2, "type": "preset", "pres": encrypt_preset(inner_preset)}
    result = decode(build_risup(wrapper))
    assert result.preset_version == 2
    assert result.preset == inner_preset


def test_primary_field_wins_over_fallback(inner_preset):
    wrapper = {
        "presetVersion": 2,
        "type": "preset",
        "preset": encrypt_preset(inner_preset),
        "pres": encrypt_preset({"name": "old"}),
    }
    assert decode(build_risup(wrapper)).preset == inner_preset


def test_null_primary_field_uses_fallback(inner_preset):
    wrapper = {"presetVersion": 0, "type": "preset", "preset": None, "pres": encrypt_preset(inner_preset)}
    assert decode(build_risup(wrapper)).preset == inner_preset


def test_tampered_ciphertext(encrypted_wrapper):
    blob = bytearray(encrypted_wrapper["preset"])
    blob[5] ^= 0x01
    encrypted_wrapper["preset"] = bytes(blob)
    with pytest.raises(DecryptionError):
        decode(build_risup(encrypted_wrapper))


def test_wrong_passphrase(encrypted_wrapper):
    with pytest.raises(DecryptionError):
        decode(build_risup(encrypted_wrapper), passphrase='not-the-key')


def test_custom_passphrase(inner_preset):
    wrapper = {"presetVersion": 0, "type": "preset", "preset": encrypt_preset(inner_preset, 'secret')}
    assert decode(build_risup(wrapper), passphrase='secret').preset == inner_preset


def test_wrapper_without_payload():
    with pytest.raises(InvalidPayloadTypeError):
        decode(build_risup({"presetVersion": 0, "type": "preset"}))


def test_wrapper_with_text_payload():
    with pytest.raises(InvalidPayloadTypeError):
        decode(build_risup({"presetVersion": 2, "type": "preset", "preset": "not bytes"}))


@pytest.mark.parametrize("compress", [zlib.compress, gzip.compress, raw_deflate])
def test_deflate_variants(compress, encrypted_wrapper, inner_preset):
    result = decode(build_risup(encrypted_wrapper, compress=compress))
    assert result.preset == inner_preset


def test_malformed_deflate():
    with pytest.raises(MalformedCodecInputError) as exc_info:
        decode(b'\x78\x9c this is not deflate')
    assert exc_info.value.stage == 'deflate'


def test_truncated_deflate():
    data = build_risup({"name": "x" * 200})
    with pytest.raises(MalformedCodecInputError) as exc_info:
        decode(data[:len(data) // 2])
    assert exc_info.value.stage == 'deflate'


def test_malformed_msgpack():
    with pytest.raises(MalformedCodecInputError) as exc_info:
        decode(zlib.compress(b'\xc1'))
    assert exc_info.value.stage == 'msgpack'


def test_malformed_inner_msgpack():
    ciphertext = encrypt_bytes(b'\xc1')
    wrapper = {"presetVersion": 0, "type": "preset", "preset": ciphertext}
    with pytest.raises(MalformedCodecInputError) as exc_info:
        decode(build_risup(wrapper))
    assert exc_info.value.stage == 'msgpack'


def test_codec_failure():
    with pytest.raises(MalformedCodecInputError) as exc_info:
        decode(b'anything', FailingCodec())
    assert exc_info.value.stage == 'rpack'


def test_async_codec(encrypted_wrapper, inner_preset):
    codec = AsyncIdentityCodec()
    assert decode(build_risup(encrypted_wrapper), codec).preset == inner_preset
    assert codec.calls == 1


def test_byte_map_codec(encrypted_wrapper, inner_preset):
    encode, decode_table = make_byte_map()
    data = build_risup(encrypted_wrapper, encode=lambda b: b.translate(encode))
    assert decode(data, ByteMapCodec(decode_table)).preset == inner_preset


@pytest.mark.parametrize("value,expected", [
    ({"presetVersion": 0, "type": "preset"}, True),
    ({"presetVersion": 2, "type": "preset"}, True),
    ({"presetVersion": 2.0, "type": "preset"}, True),
    ({"presetVersion": 1, "type": "preset"}, False),
    ({"presetVersion": "0", "type": "preset"}, False),
    ({"presetVersion": True, "type": "preset"}, False),
    ({"type": "preset"}, False),
    ({"presetVersion": 0}, False),
    (msgpack.ExtType(1, b''), False),
])
def test_is_encrypted_wrapper(value, expected):
    assert is_encrypted_wrapper(value) is expected
