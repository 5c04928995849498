"""
Container format parsers.

Supports:
- Module containers (.risum)
- Preset containers (.risup, .risupreset), plain and encrypted
"""

from .risum import RisumReader, decode_risum
from .risup import decode_risup
from .risum_structures import *
from .risup_structures import *

__all__ = ['RisumReader', 'decode_risum', 'decode_risup', 'RisumFile', 'RisupFile']
