"""
Session Snapshot - Pydantic model of the state a display adapter may read.

This is the only output of the core: dimensions, terrain, player, boxes,
targets, counters and the solved flag. Adapters render from it and never
touch the session directly.
"""

from typing import Optional

from pydantic import BaseModel, Field

from ..level.grid import Cell


class SessionSnapshot(BaseModel):
    """Read-only state of one level attempt."""
    level_name: str = ""
    level_number: Optional[int] = Field(None, description="1-based index in the levelset")
    level_count: Optional[int] = None
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    terrain: list[list[Cell]] = Field(description="Rows of terrain, top to bottom")
    player: tuple[int, int]
    boxes: list[tuple[int, int]] = Field(default_factory=list)
    targets: list[tuple[int, int]] = Field(default_factory=list)
    move_count: int = Field(0, ge=0)
    push_count: int = Field(0, ge=0)
    solved: bool = False

    model_config = {"frozen": True}

    def cell_at(self, x: int, y: int) -> Cell:
        """Terrain at (x, y); out of bounds reads as OUTSIDE."""
        if 0 <= x < self.width and 0 <= y < self.height:
            return self.terrain[y][x]
        return Cell.OUTSIDE

    def has_box(self, x: int, y: int) -> bool:
        return (x, y) in self.boxes

    @property
    def boxes_on_targets(self) -> int:
        targets = set(self.targets)
        return sum(1 for box in self.boxes if box in targets)
