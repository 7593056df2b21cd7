"""
Glyph table for the plain-text level format.

    #   wall
    ' ' floor ('-' and '_' are accepted as floor too)
    .   target
    $   box on floor
    *   box on target
    @   player on floor
    +   player on target

Filler cells (padding of ragged rows) are written as a blank.
"""

from __future__ import annotations
from typing import NamedTuple

from .grid import Cell

WALL = "#"
FLOOR = " "
TARGET = "."
BOX = "$"
BOX_ON_TARGET = "*"
PLAYER = "@"
PLAYER_ON_TARGET = "+"

FLOOR_SYNONYMS = frozenset({"-", "_"})


class Glyph(NamedTuple):
    """Decoded meaning of one level character."""
    cell: Cell
    box: bool = False
    player: bool = False


GLYPHS: dict[str, Glyph] = {
    WALL: Glyph(Cell.WALL),
    FLOOR: Glyph(Cell.FLOOR),
    TARGET: Glyph(Cell.TARGET),
    BOX: Glyph(Cell.FLOOR, box=True),
    BOX_ON_TARGET: Glyph(Cell.TARGET, box=True),
    PLAYER: Glyph(Cell.FLOOR, player=True),
    PLAYER_ON_TARGET: Glyph(Cell.TARGET, player=True),
}
for _synonym in FLOOR_SYNONYMS:
    GLYPHS[_synonym] = Glyph(Cell.FLOOR)


def is_glyph(ch: str) -> bool:
    return ch in GLYPHS


def decode(ch: str) -> Glyph:
    """
    Decode a level character.

    Raises:
        KeyError: If the character is not in the glyph table
    """
    return GLYPHS[ch]


def encode(cell: Cell, box: bool = False, player: bool = False) -> str:
    """Encode a cell with its occupancy back to a single character."""
    on_target = cell == Cell.TARGET
    if box:
        return BOX_ON_TARGET if on_target else BOX
    if player:
        return PLAYER_ON_TARGET if on_target else PLAYER
    if cell == Cell.WALL:
        return WALL
    if on_target:
        return TARGET
    return FLOOR
