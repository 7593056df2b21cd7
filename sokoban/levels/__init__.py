"""
Levels Module - Levelsets shipped with the package.
"""

from .builtin import BUILTIN_LEVELS, builtin_levelset

__all__ = [
    "BUILTIN_LEVELS",
    "builtin_levelset",
]
