"""
Level Builder - Turns decoded rows into a validated GridModel.

Shared by both parsers so that the same rows always produce the same grid:
1. Trailing whitespace is trimmed from every row
2. Empty rows at the top and bottom are dropped
3. Glyphs are decoded (unknown glyph -> MalformedInput)
4. Rows are right-padded to the widest row with OUTSIDE filler
5. Game invariants are checked (violations -> InvalidLevel)
"""

from __future__ import annotations
import logging
from typing import Iterable

from .. import config
from . import glyphs
from .errors import InvalidLevel, MalformedInput
from .grid import Cell, GridModel, Position
from .validation import validate_level

logger = logging.getLogger(__name__)


def build_level(rows: Iterable[str], name: str = "") -> GridModel:
    """
    Build a level from its rows of glyphs.

    Args:
        rows: Level rows, top to bottom
        name: Optional level title

    Returns:
        A validated GridModel

    Raises:
        MalformedInput: Unknown glyph, no rows, or oversized level
        InvalidLevel: Player count != 1 or box/target count mismatch
    """
    lines = [row.rstrip() for row in rows]
    while lines and not lines[0]:
        lines.pop(0)
    while lines and not lines[-1]:
        lines.pop()

    if not lines:
        raise MalformedInput("Level has no rows", name=name)

    width = max(len(line) for line in lines)
    height = len(lines)
    if width > config.MAX_WIDTH or height > config.MAX_HEIGHT:
        raise MalformedInput(
            f"Level size {width}x{height} exceeds limit "
            f"{config.MAX_WIDTH}x{config.MAX_HEIGHT}",
            name=name,
        )

    terrain: list[Cell] = []
    boxes: list[Position] = []
    players: list[Position] = []

    for y, line in enumerate(lines):
        for x, ch in enumerate(line):
            if not glyphs.is_glyph(ch):
                raise MalformedInput(
                    f"Unknown glyph {ch!r} at column {x}, row {y}", name=name
                )
            glyph = glyphs.decode(ch)
            terrain.append(glyph.cell)
            if glyph.box:
                boxes.append(Position(x, y))
            if glyph.player:
                players.append(Position(x, y))
        terrain.extend([Cell.OUTSIDE] * (width - len(line)))

    errors = _count_errors(terrain, boxes, players)
    if errors:
        raise InvalidLevel(errors, name=name)

    grid = GridModel(
        width=width,
        height=height,
        terrain=tuple(terrain),
        boxes=frozenset(boxes),
        player=players[0],
        name=name,
    )

    result = validate_level(grid)
    if not result.valid:
        raise InvalidLevel(result.errors, name=name)

    logger.debug(f"Built level {name!r} ({width}x{height}, {len(boxes)} boxes)")
    return grid


def _count_errors(
    terrain: list[Cell], boxes: list[Position], players: list[Position]
) -> list[str]:
    """Check player and box/target counts before a grid can be assembled."""
    errors = []
    if not players:
        errors.append("No player")
    elif len(players) > 1:
        errors.append(f"Too many players ({len(players)})")

    targets = sum(1 for cell in terrain if cell == Cell.TARGET)
    if len(boxes) < targets:
        errors.append(f"Too few boxes - {targets} required")
    elif targets < len(boxes):
        errors.append(f"Too few targets - {len(boxes)} required")
    return errors
