"""
Preset container (.risup / .risupreset) parser.

A preset file is a single blob run through the codec chain:

    RPack decode -> deflate decompress -> MessagePack decode

The result is either the preset itself or a wrapper of version 0 or 2
whose payload field holds an AES-GCM encrypted MessagePack document.
"""

from typing import Any, Optional, Union

from ..codecs.base import Codec, codec_stage, resolve
from ..codecs.crypto import decrypt_buffer
from ..codecs.deflate import decompress
from ..codecs.msgpack_codec import unpack
from ..codecs.rpack import IdentityCodec
from ..errors import InvalidPayloadTypeError
from ..io.binary_stream import Buffer
from .risup_structures import (
    RisupFile,
    ENCRYPTED_PRESET_VERSIONS, PRESET_WRAPPER_TYPE, PAYLOAD_FIELDS, DEFAULT_PASSPHRASE
)


def is_encrypted_wrapper(value: Any) -> bool:
    """Return True if value is a wrapper whose payload must be decrypted."""
    if not isinstance(value, dict):
        return False
    version = value.get('presetVersion')
    # bool is an int subclass, False must not pass for version 0
    if isinstance(version, bool) or not isinstance(version, (int, float)):
        return False
    return version in ENCRYPTED_PRESET_VERSIONS and value.get('type') == PRESET_WRAPPER_TYPE


def find_payload(wrapper: dict) -> bytes:
    """
    Return the ciphertext of an encrypted wrapper.

    Raises:
        InvalidPayloadTypeError: If no payload field holds binary data
    """
    for name in PAYLOAD_FIELDS:
        payload = wrapper.get(name)
        if payload is None:
            continue
        if not isinstance(payload, (bytes, bytearray, memoryview)):
            raise InvalidPayloadTypeError(
                f"Preset payload field '{name}' is {type(payload).__name__}, expected binary data"
            )
        return bytes(payload)
    raise InvalidPayloadTypeError("Encrypted preset wrapper has no payload field")


async def decode_risup(
    data: Buffer,
    codec: Optional[Codec] = None,
    passphrase: str = DEFAULT_PASSPHRASE
) -> Union[RisupFile, Any]:
    """
    Decode a preset container held in memory.

    Args:
        data: Raw file contents
        codec: RPack codec, identity if omitted
        passphrase: Passphrase the payload key is derived from

    Returns:
        A RisupFile for encrypted wrappers, otherwise the decoded
        MessagePack value unchanged

    Raises:
        MalformedCodecInputError: If any codec stage rejects its input
        DecryptionError: If the payload fails authentication
        InvalidPayloadTypeError: If an encrypted wrapper carries no payload
    """
    if codec is None:
        codec = IdentityCodec()

    with codec_stage('rpack'):
        unpacked = await resolve(codec.decode(bytes(data)))

    decoded = unpack(decompress(unpacked))

    if not is_encrypted_wrapper(decoded):
        return decoded

    plaintext = await decrypt_buffer(find_payload(decoded), passphrase)
    return RisupFile(
        preset=unpack(plaintext),
        preset_version=decoded['presetVersion'],
        wrapper_type=decoded['type']
    )
