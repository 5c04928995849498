"""
File dispatch by name suffix.

The suffix alone decides how a buffer is decoded; contents are never
sniffed. Matching is exact and case-sensitive.
"""

from pathlib import Path
from typing import Any, Callable, Optional, Union

from .codecs.base import Codec
from .codecs.rpack import create_codec
from .codecs.text import load_json
from .config import Config
from .errors import UnsupportedExtensionError
from .formats.risum import decode_risum
from .formats.risup import decode_risup
from .formats.risup_structures import RisupFile
from .io.binary_stream import Buffer

EXT_RISUM = '.risum'
EXT_RISUP = '.risup'
EXT_RISUPRESET = '.risupreset'
EXT_JSON = '.json'

SUPPORTED_EXTENSIONS = (EXT_RISUM, EXT_RISUP, EXT_RISUPRESET, EXT_JSON)


def detect_format(file_name: str) -> str:
    """
    Return the recognised suffix of file_name.

    Raises:
        UnsupportedExtensionError: If no supported suffix matches
    """
    for ext in SUPPORTED_EXTENSIONS:
        if file_name.endswith(ext):
            return ext
    raise UnsupportedExtensionError(
        f"Unsupported file extension for '{file_name}'. "
        f"Only {', '.join(SUPPORTED_EXTENSIONS)} are supported."
    )


async def _parse_risum(data: Buffer, codec: Codec, config: Config) -> Any:
    result = await decode_risum(data, codec)
    return result.to_dict()


async def _parse_risup(data: Buffer, codec: Codec, config: Config) -> Any:
    result = await decode_risup(data, codec, config.preset_passphrase)
    if isinstance(result, RisupFile):
        return result.to_dict()
    return result


async def _parse_json(data: Buffer, codec: Codec, config: Config) -> Any:
    return load_json(data)


_PARSERS = {
    EXT_RISUM: _parse_risum,
    EXT_RISUP: _parse_risup,
    EXT_RISUPRESET: _parse_risup,
    EXT_JSON: _parse_json,
}


async def parse(
    data: Buffer,
    file_name: str,
    codec: Optional[Codec] = None,
    config: Optional[Config] = None
) -> Any:
    """
    Decode a file's contents according to its name.

    Args:
        data: Raw file contents
        file_name: Name (or path) of the file; only the suffix is used
        codec: RPack codec, built from config if omitted
        config: Configuration, defaults if omitted

    Returns:
        Plain decoded value tree
    """
    parser: Callable = _PARSERS[detect_format(file_name)]
    if config is None:
        config = Config()
    if codec is None:
        codec = create_codec(config.rpack_map_path)
    return await parser(data, codec, config)


async def parse_file(
    path: Union[str, Path],
    codec: Optional[Codec] = None,
    config: Optional[Config] = None
) -> Any:
    """Read and decode a file; the suffix is checked before the file is opened."""
    path = Path(path)
    detect_format(path.name)
    return await parse(path.read_bytes(), path.name, codec, config)
