"""
Level Validation - Invariant checks and playability analysis.

Validates that:
1. The player and every box lie in bounds on walkable cells
2. No box shares a cell with the player or another box
3. The number of boxes equals the number of targets

Analysis (warnings only, the level is still loadable):
- Level is open (player can walk to the edge of the grid)
- Box or target is out of the player's reach
- 2x2 block of walls and boxes that cannot be broken up
- Box wedged in a wall corner away from a target
- No boxes at all
"""

from __future__ import annotations
from dataclasses import dataclass

from .grid import Cell, GridModel, Position

NEIGHBOURS = ((-1, 0), (1, 0), (0, -1), (0, 1))


@dataclass
class ValidationResult:
    """Result of validation, with errors and warnings."""
    valid: bool
    errors: list[str]
    warnings: list[str]


def validate_level(grid: GridModel) -> ValidationResult:
    """
    Validate a level and analyse it for obvious dead positions.

    Returns ValidationResult with errors and warnings.
    """
    errors: list[str] = []
    warnings: list[str] = []

    px, py = grid.player
    if not grid.is_walkable(px, py):
        errors.append(f"Player at {px}x{py} is not on a walkable cell")

    for box in sorted(grid.boxes):
        if not grid.is_walkable(box.x, box.y):
            errors.append(f"Box at {box.x}x{box.y} is not on a walkable cell")
        if box == grid.player:
            errors.append(f"Box at {box.x}x{box.y} shares a cell with the player")

    targets = grid.targets()
    if len(grid.boxes) != len(targets):
        errors.append(
            f"{len(grid.boxes)} boxes but {len(targets)} targets"
        )

    if errors:
        return ValidationResult(valid=False, errors=errors, warnings=warnings)

    if not grid.boxes:
        warnings.append("No boxes and targets")

    reachable, touches_edge = _fill_from_player(grid)
    if touches_edge:
        warnings.append("Level open")
    for box in sorted(grid.boxes):
        if box not in reachable:
            warnings.append(f"Box {box.x}x{box.y} not available")
    for target in sorted(targets):
        if target not in reachable:
            warnings.append(f"Target {target.x}x{target.y} not available")

    warnings.extend(_find_locked_blocks(grid))
    warnings.extend(_find_cornered_boxes(grid))

    return ValidationResult(valid=True, errors=errors, warnings=warnings)


def _fill_from_player(grid: GridModel) -> tuple[set[Position], bool]:
    """
    Flood fill over walkable cells from the player, ignoring boxes.

    Returns the filled cells and whether the fill reached the grid edge
    (a walkable cell on the border or next to filler).
    """
    filled = {grid.player}
    stack = [grid.player]
    touches_edge = False

    while stack:
        pos = stack.pop()
        for dx, dy in NEIGHBOURS:
            nxt = pos.moved(dx, dy)
            if grid.is_walkable(nxt.x, nxt.y):
                if nxt not in filled:
                    filled.add(nxt)
                    stack.append(nxt)
            elif grid.cell_at(nxt.x, nxt.y) == Cell.OUTSIDE:
                touches_edge = True

    return filled, touches_edge


def _is_blocking(grid: GridModel, x: int, y: int) -> bool:
    return not grid.is_walkable(x, y)


def _find_locked_blocks(grid: GridModel) -> list[str]:
    """Find 2x2 squares made only of walls and boxes, some box off target."""
    warnings = []
    targets = grid.targets()
    for y in range(grid.height - 1):
        for x in range(grid.width - 1):
            square = [Position(x, y), Position(x + 1, y),
                      Position(x, y + 1), Position(x + 1, y + 1)]
            boxes = [p for p in square if p in grid.boxes]
            if not boxes:
                continue
            if not all(p in grid.boxes or _is_blocking(grid, p.x, p.y) for p in square):
                continue
            if any(p not in targets for p in boxes):
                warnings.append(f"Locked 2x2 block {x}x{y}")
    return warnings


def _find_cornered_boxes(grid: GridModel) -> list[str]:
    """Find boxes off target with a wall on one vertical and one horizontal side."""
    warnings = []
    targets = grid.targets()
    for box in sorted(grid.boxes):
        if box in targets:
            continue
        x, y = box
        vertical = _is_blocking(grid, x, y - 1) or _is_blocking(grid, x, y + 1)
        horizontal = _is_blocking(grid, x - 1, y) or _is_blocking(grid, x + 1, y)
        if vertical and horizontal:
            warnings.append(f"Locked box {x}x{y} apart walls")
    return warnings
