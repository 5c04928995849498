"""
Module container (.risum) structure definitions.
"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Dict


# Header sentinels
RISUM_MAGIC = 111
RISUM_VERSION = 0

# Value of the "type" field in the main section document
RISUM_PAYLOAD_TYPE = 'risuModule'


class AssetMarker(IntEnum):
    """Marker byte preceding each asset section."""
    STOP = 0
    CONTINUE = 1


@dataclass
class RisumFile:
    """Decoded module container."""
    module: Any = None
    embedded_assets_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "module": self.module,
            "_meta": {
                "format": "risum",
                "embeddedAssetsCount": self.embedded_assets_count
            }
        }
