"""
AES-GCM decryption of embedded preset payloads.

The key is the SHA-256 digest of a passphrase; the nonce is fixed at
twelve zero bytes and no associated data is authenticated.
"""

import hashlib

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from ..errors import DecryptionError

NONCE = bytes(12)
TAG_SIZE = 16


def derive_key(passphrase: str) -> bytes:
    """Derive a 256-bit key from a passphrase."""
    return hashlib.sha256(passphrase.encode('utf-8')).digest()


def decrypt_buffer_sync(data: bytes, passphrase: str) -> bytes:
    """
    Decrypt data encrypted with the passphrase-derived key.

    Args:
        data: Ciphertext with the 16-byte GCM tag appended
        passphrase: Passphrase the key is derived from

    Returns:
        The plaintext

    Raises:
        DecryptionError: If the tag does not verify
    """
    if len(data) < TAG_SIZE:
        raise DecryptionError(f"Ciphertext too short ({len(data)} bytes)")
    try:
        return AESGCM(derive_key(passphrase)).decrypt(NONCE, bytes(data), None)
    except InvalidTag as e:
        raise DecryptionError("Authentication tag mismatch (wrong key or tampered data)") from e


async def decrypt_buffer(data: bytes, passphrase: str) -> bytes:
    """Coroutine form of decrypt_buffer_sync."""
    return decrypt_buffer_sync(data, passphrase)
