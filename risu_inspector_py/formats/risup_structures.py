"""
Preset container (.risup / .risupreset) structure definitions.
"""

from dataclasses import dataclass
from typing import Any, Dict


# Wrapper versions whose payload is encrypted
ENCRYPTED_PRESET_VERSIONS = (0, 2)
PRESET_WRAPPER_TYPE = 'preset'

# Ciphertext field names, newest wrapper revision first
PAYLOAD_FIELDS = ('preset', 'pres')

DEFAULT_PASSPHRASE = 'risupreset'


@dataclass
class RisupFile:
    """Decrypted preset container."""
    preset: Any = None
    preset_version: int = 0
    wrapper_type: str = PRESET_WRAPPER_TYPE

    def to_dict(self) -> Dict[str, Any]:
        return {
            "_meta": {
                "format": "risup",
                "presetVersion": self.preset_version,
                "wrapperType": self.wrapper_type
            },
            "preset": self.preset
        }
