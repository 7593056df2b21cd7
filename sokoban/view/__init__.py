"""
View Module - Display adapters.

Adapters consume SessionSnapshots and produce Commands; the engine knows
nothing about them.
"""

from .terminal import render, status_line, help_lines, parse_keys, KEYMAP

__all__ = [
    "render",
    "status_line",
    "help_lines",
    "parse_keys",
    "KEYMAP",
]
