"""
RisuAI Inspector
A tool for decoding RisuAI module (.risum) and preset (.risup) containers.
"""

__version__ = "0.1.0"
__author__ = "RisuAI Inspector contributors"

from .config import Config
from .parser import parse, parse_file, SUPPORTED_EXTENSIONS
from .formats.risum import decode_risum
from .formats.risup import decode_risup

__all__ = ['Config', 'parse', 'parse_file', 'decode_risum', 'decode_risup', 'SUPPORTED_EXTENSIONS', '__version__']
