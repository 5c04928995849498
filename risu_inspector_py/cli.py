#!/usr/bin/env python3
"""
RisuAI Inspector

Command-line interface for decoding RisuAI module and preset files.

Usage:
    risu-inspector <file> [<file> ...] [-o output-directory]
    risu-inspector -h | --help
    risu-inspector --version

Arguments:
    file               .risum, .risup, .risupreset or .json file

Options:
    -h --help          Show this help message
    --version          Show version
    --config PATH      Path to config.json
    --rpack-map PATH   RPack map file (overrides config)
    -o --output DIR    Write <name>.json files to DIR instead of stdout
    --indent N         JSON indentation (overrides config)
"""

import sys
import asyncio
import argparse
from pathlib import Path
from typing import Any, Optional

from . import __version__
from .config import Config
from .codecs.base import Codec
from .codecs.rpack import create_codec
from .errors import RisuFormatError
from .output.json_output import dumps, BYTES_ENCODINGS
from .parser import detect_format, parse_file


FORMAT_NAMES = {
    '.risum': 'module container',
    '.risup': 'preset container',
    '.risupreset': 'preset container',
    '.json': 'plain JSON',
}


def log(config: Config, message: str) -> None:
    """Print a progress line to stderr when verbose output is on."""
    if config.verbose:
        print(message, file=sys.stderr)


def describe(result: Any, ext: str) -> str:
    """One-line summary of a decoded file."""
    if not isinstance(result, dict):
        return FORMAT_NAMES[ext]
    meta = result.get('_meta')
    if not isinstance(meta, dict) or meta.get('format') not in ('risum', 'risup'):
        return FORMAT_NAMES[ext]
    if meta['format'] == 'risum':
        return f"{FORMAT_NAMES[ext]}, {meta.get('embeddedAssetsCount', 0)} embedded asset(s)"
    return f"{FORMAT_NAMES[ext]}, encrypted preset v{meta.get('presetVersion')}"


def inspect_file(path: Path, codec: Codec, config: Config, output_dir: Optional[Path]) -> None:
    """
    Decode one file and print or save the JSON rendering.

    Raises:
        RisuFormatError: If the file cannot be decoded
        OSError: If the file cannot be read or the output written
    """
    ext = detect_format(path.name)
    log(config, f"Parsing {path}...")
    result = asyncio.run(parse_file(path, codec, config))
    log(config, f"Detected {describe(result, ext)}")

    text = dumps(
        result,
        indent=config.json_indent,
        ensure_ascii=config.ensure_ascii,
        bytes_encoding=config.bytes_encoding
    )

    if output_dir is None:
        print(text)
    else:
        out_path = output_dir / f"{path.name}.json"
        out_path.write_text(text, encoding='utf-8')
        log(config, f"Saved {out_path}")


def main(argv: Optional[list] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="RisuAI Inspector - Decode .risum / .risup / .risupreset files",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument('files', nargs='*', help='Files to decode')
    parser.add_argument('--version', action='version', version=f'risu-inspector {__version__}')
    parser.add_argument('--config', type=str, help='Path to config.json')
    parser.add_argument('--rpack-map', type=str, help='Path to the RPack map file')
    parser.add_argument('-o', '--output', type=str, help='Output directory for JSON files')
    parser.add_argument('--indent', type=int, help='JSON indentation')

    args = parser.parse_args(argv)

    if not args.files:
        parser.print_help()
        print("\nERROR: At least one file is required", file=sys.stderr)
        return 1

    # Load config
    config_path = Path(args.config) if args.config else None
    config = Config.load(config_path)
    if args.rpack_map:
        config.rpack_map_path = args.rpack_map
    if args.indent is not None:
        config.json_indent = args.indent

    if config.bytes_encoding not in BYTES_ENCODINGS:
        print(f"ERROR: Unknown bytes encoding: {config.bytes_encoding}", file=sys.stderr)
        return 1

    try:
        codec = create_codec(config.rpack_map_path)
    except (OSError, ValueError) as e:
        print(f"ERROR: Cannot load RPack map: {e}", file=sys.stderr)
        return 1
    if not config.rpack_map_path:
        print("WARNING: No RPack map configured, using identity codec", file=sys.stderr)

    output_dir = None
    if args.output:
        output_dir = Path(args.output)
        output_dir.mkdir(parents=True, exist_ok=True)

    failed = 0
    for name in args.files:
        path = Path(name)
        try:
            inspect_file(path, codec, config, output_dir)
        except RisuFormatError as e:
            print(f"ERROR: {path}: {e}", file=sys.stderr)
            failed += 1
        except OSError as e:
            print(f"ERROR: {path}: {e.strerror or e}", file=sys.stderr)
            failed += 1

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
