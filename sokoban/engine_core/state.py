"""
Session State - Phases and reversible move records.

Undo is an append-only log of deltas replayed backward, not a board
snapshot per move: each record holds the direction and, for pushes, where
the box stood before the push.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum

from ..level.grid import Position
from .action import Direction


class SessionPhase(Enum):
    """Phase of one level attempt."""
    PLAYING = "playing"
    SOLVED = "solved"


@dataclass(frozen=True)
class MoveRecord:
    """One applied move, enough to reverse it exactly."""
    direction: Direction
    box_from: Position | None = None  # Box position before a push

    @property
    def pushed(self) -> bool:
        return self.box_from is not None

    @property
    def notation(self) -> str:
        letter = self.direction.letter
        return letter.upper() if self.pushed else letter
