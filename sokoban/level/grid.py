"""
Grid Model - Canonical in-memory representation of a single level.

Design principles:
- Immutable: terrain and initial positions never change after parsing
- Query-only: no mutation operations, no failure modes
- Comparable: two grids are equal when terrain and initial positions match
  (the level name is metadata and takes no part in equality)

Instances are built by the parsers (see builder.py), which validate them
before they are ever exposed.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from functools import cached_property
from typing import NamedTuple


class Cell(Enum):
    """Terrain of a single grid cell."""
    FLOOR = "floor"
    WALL = "wall"
    TARGET = "target"
    OUTSIDE = "outside"  # Filler for ragged rows, never walkable

    @property
    def walkable(self) -> bool:
        return self in (Cell.FLOOR, Cell.TARGET)


class Position(NamedTuple):
    """A grid coordinate: x is the column, y the row, origin top-left."""
    x: int
    y: int

    def moved(self, dx: int, dy: int) -> Position:
        return Position(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class GridModel:
    """
    A parsed, validated level.

    Terrain is stored row-major; cell_at() is the (x, y) -> Cell mapping.
    """
    width: int
    height: int
    terrain: tuple[Cell, ...]
    boxes: frozenset[Position]
    player: Position
    name: str = field(default="", compare=False)

    def __post_init__(self):
        if len(self.terrain) != self.width * self.height:
            raise ValueError(
                f"Terrain has {len(self.terrain)} cells, "
                f"expected {self.width}x{self.height}"
            )

    @property
    def initial_box_positions(self) -> frozenset[Position]:
        return self.boxes

    @property
    def initial_player_position(self) -> Position:
        return self.player

    @cached_property
    def target_positions(self) -> frozenset[Position]:
        return frozenset(
            Position(i % self.width, i // self.width)
            for i, cell in enumerate(self.terrain)
            if cell == Cell.TARGET
        )

    def targets(self) -> frozenset[Position]:
        """Get all target cells."""
        return self.target_positions

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def cell_at(self, x: int, y: int) -> Cell:
        """Get the terrain at (x, y). Anything out of bounds reads as OUTSIDE."""
        if not self.in_bounds(x, y):
            return Cell.OUTSIDE
        return self.terrain[y * self.width + x]

    def is_walkable(self, x: int, y: int) -> bool:
        """True iff (x, y) is in bounds and neither wall nor filler."""
        return self.cell_at(x, y).walkable

    def rows(self) -> list[tuple[Cell, ...]]:
        """Terrain split into rows, top to bottom."""
        return [
            self.terrain[y * self.width:(y + 1) * self.width]
            for y in range(self.height)
        ]

    def to_text(self) -> str:
        """
        Serialize to the plain-text level format.

        Filler cells become blanks and trailing blanks are trimmed, so
        parsing the result yields an equal grid.
        """
        from .glyphs import encode

        lines = []
        for y, row in enumerate(self.rows()):
            chars = [
                encode(
                    cell,
                    box=Position(x, y) in self.boxes,
                    player=Position(x, y) == self.player,
                )
                for x, cell in enumerate(row)
            ]
            lines.append("".join(chars).rstrip())
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_text()
