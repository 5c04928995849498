"""
Output generation module.
"""

from .json_output import to_jsonable, dumps

__all__ = ['to_jsonable', 'dumps']
