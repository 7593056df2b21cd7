"""
Action System - Commands, directions, and move outcomes.

Commands are the discrete input events of the control loop. Only the four
moves, Undo and Redo reach the game session; CancelLevel, Quit and Help are
handled by the loop itself.

Illegal moves are an expected, informational result of user input, so they
come back as a rejected MoveOutcome and never as an exception.
"""

from __future__ import annotations
from dataclasses import dataclass
from enum import Enum


class Direction(Enum):
    """A move direction with its grid delta and LURD letter."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"

    @property
    def delta(self) -> tuple[int, int]:
        return _DELTAS[self]

    @property
    def letter(self) -> str:
        """Lowercase LURD notation letter for a walk; uppercase marks a push."""
        return self.value[0]

    @property
    def opposite(self) -> Direction:
        return _OPPOSITES[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.DOWN: (0, 1),
    Direction.LEFT: (-1, 0),
    Direction.RIGHT: (1, 0),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class Command(Enum):
    """Input events delivered one at a time to the control loop."""
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    UNDO = "undo"
    REDO = "redo"
    CANCEL_LEVEL = "cancel_level"
    QUIT = "quit"
    HELP = "help"

    @property
    def direction(self) -> Direction | None:
        """The move direction, or None for non-move commands."""
        return _COMMAND_DIRECTIONS.get(self)


_COMMAND_DIRECTIONS = {
    Command.MOVE_UP: Direction.UP,
    Command.MOVE_DOWN: Direction.DOWN,
    Command.MOVE_LEFT: Direction.LEFT,
    Command.MOVE_RIGHT: Direction.RIGHT,
}


class OutcomeStatus(Enum):
    """Whether a move was applied."""
    ACCEPTED = "accepted"
    REJECTED = "rejected"


class AcceptedKind(Enum):
    """What an accepted move led to."""
    CONTINUED = "continued"
    SOLVED = "solved"


class RejectReason(Enum):
    """Why a move was rejected."""
    BLOCKED = "blocked"
    ALREADY_SOLVED = "already_solved"


@dataclass(frozen=True)
class MoveOutcome:
    """
    Result of applying a move.

    Accepted outcomes say whether the level is now solved and whether a
    box was pushed; rejected outcomes say why nothing changed.
    """
    status: OutcomeStatus
    kind: AcceptedKind | None = None
    reason: RejectReason | None = None
    pushed: bool = False

    @property
    def accepted(self) -> bool:
        return self.status == OutcomeStatus.ACCEPTED

    @property
    def solved(self) -> bool:
        return self.kind == AcceptedKind.SOLVED

    @classmethod
    def rejected(cls, reason: RejectReason) -> MoveOutcome:
        """Create a rejection, nothing was mutated."""
        return cls(status=OutcomeStatus.REJECTED, reason=reason)

    @classmethod
    def accepted_with(cls, kind: AcceptedKind, pushed: bool = False) -> MoveOutcome:
        """Create an accepted outcome."""
        return cls(status=OutcomeStatus.ACCEPTED, kind=kind, pushed=pushed)

    def __str__(self) -> str:
        if self.accepted:
            return f"Accepted({self.kind.name.title()})"
        return f"Rejected({self.reason.name.title().replace('_', '')})"
