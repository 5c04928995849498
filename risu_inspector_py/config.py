"""
Configuration handling for RisuAI Inspector.
"""

from dataclasses import dataclass, fields as dataclass_fields
from typing import Optional
import json
from pathlib import Path

from .formats.risup_structures import DEFAULT_PASSPHRASE


@dataclass
class Config:
    """Configuration options for RisuAI Inspector."""

    # Codec options
    rpack_map_path: Optional[str] = None
    preset_passphrase: str = DEFAULT_PASSPHRASE

    # Output options
    json_indent: int = 2
    ensure_ascii: bool = False
    bytes_encoding: str = 'base64'

    # Runtime options
    verbose: bool = True

    @classmethod
    def load(cls, path: Optional[Path] = None) -> 'Config':
        """Load configuration from a JSON file."""
        if path is None:
            path = Path(__file__).parent / 'config.json'

        if not path.exists():
            return cls()

        with open(path, 'r', encoding='utf-8') as f:
            data = json.load(f)

        # Convert camelCase to snake_case
        # Handle special cases like 'RPack' -> 'rpack'
        converted = {}
        for key, value in data.items():
            key = key.replace('RPack', 'Rpack')
            snake_key = ''.join(
                f'_{c.lower()}' if c.isupper() else c
                for c in key
            ).lstrip('_')
            converted[snake_key] = value

        # Filter to only include valid fields
        valid_fields = {f.name for f in dataclass_fields(cls)}
        filtered = {k: v for k, v in converted.items() if k in valid_fields}

        return cls(**filtered)

    def save(self, path: Path) -> None:
        """Save configuration to a JSON file."""
        # Convert snake_case to camelCase for compatibility
        data = {}
        for key, value in self.__dict__.items():
            camel_key = ''.join(
                word.capitalize() if i > 0 else word
                for i, word in enumerate(key.split('_'))
            )
            data[camel_key] = value

        with open(path, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2)
