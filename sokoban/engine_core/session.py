"""
Game Session - State machine for one attempt at one level.

States:
    PLAYING --apply_move (boxes == targets)--> SOLVED
    SOLVED  --undo--> PLAYING
    any     --restart--> PLAYING (fresh)

The session borrows the level's GridModel read-only and exclusively owns
the mutable part: player position, box positions, move history and the
redo stack. After every operation:
- every box sits on a walkable cell and no two boxes share a cell
- the player stands on a walkable cell without a box
- move_count == len(history)

All operations are total. Illegal moves return a rejected MoveOutcome.
"""

from __future__ import annotations
import logging

from ..level.grid import GridModel, Position
from .action import AcceptedKind, Direction, MoveOutcome, RejectReason
from .snapshot import SessionSnapshot
from .state import MoveRecord, SessionPhase

logger = logging.getLogger(__name__)


class GameSession:
    """
    Mutable play state for a single level.

    Usage:
        session = GameSession(grid)
        outcome = session.apply_move(Direction.RIGHT)
        if outcome.solved:
            ...
        session.undo()
    """

    def __init__(self, grid: GridModel):
        self.grid = grid
        self._targets = grid.targets()
        self.restart()

    # ------------------------------------------------------------------
    # State queries
    # ------------------------------------------------------------------

    @property
    def player(self) -> Position:
        return self._player

    @property
    def boxes(self) -> frozenset[Position]:
        return frozenset(self._boxes)

    @property
    def phase(self) -> SessionPhase:
        return self._phase

    @property
    def is_solved(self) -> bool:
        return self._phase == SessionPhase.SOLVED

    @property
    def move_count(self) -> int:
        return len(self._history)

    @property
    def push_count(self) -> int:
        return self._pushes

    @property
    def history(self) -> tuple[MoveRecord, ...]:
        return tuple(self._history)

    @property
    def can_undo(self) -> bool:
        return bool(self._history)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def boxes_on_targets(self) -> int:
        return len(self._boxes & self._targets)

    def has_box(self, pos: Position) -> bool:
        return pos in self._boxes

    def moves_notation(self) -> str:
        """Moves so far in LURD notation (uppercase letters are pushes)."""
        return "".join(record.notation for record in self._history)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def apply_move(self, direction: Direction) -> MoveOutcome:
        """
        Move the player one cell, pushing a box if one is in the way.

        A new accepted move clears the redo stack.
        """
        outcome = self._perform(direction)
        if outcome.accepted:
            self._redo.clear()
        return outcome

    def undo(self) -> bool:
        """
        Reverse the last move.

        Returns False (and changes nothing) when there is no history.
        Undoing out of SOLVED returns the session to PLAYING.
        """
        if not self._history:
            return False

        record = self._history.pop()
        dx, dy = record.direction.delta
        if record.pushed:
            self._boxes.discard(record.box_from.moved(dx, dy))
            self._boxes.add(record.box_from)
            self._pushes -= 1
        self._player = self._player.moved(-dx, -dy)
        self._redo.append(record)

        if self._phase == SessionPhase.SOLVED:
            self._phase = SessionPhase.PLAYING
        logger.debug(f"Undo {record.notation}, {self.move_count} moves left")
        return True

    def redo(self) -> bool:
        """Re-apply the most recently undone move. Returns False if none."""
        if not self._redo:
            return False
        record = self._redo.pop()
        outcome = self._perform(record.direction)
        return outcome.accepted

    def restart(self) -> None:
        """Discard all progress and start over from the level's initial layout."""
        self._player = self.grid.player
        self._boxes: set[Position] = set(self.grid.boxes)
        self._history: list[MoveRecord] = []
        self._redo: list[MoveRecord] = []
        self._pushes = 0
        self._phase = SessionPhase.PLAYING

    def snapshot(
        self, level_number: int | None = None, level_count: int | None = None
    ) -> SessionSnapshot:
        """Build the read-only view handed to display adapters."""
        return SessionSnapshot(
            level_name=self.grid.name,
            level_number=level_number,
            level_count=level_count,
            width=self.grid.width,
            height=self.grid.height,
            terrain=[list(row) for row in self.grid.rows()],
            player=self._player,
            boxes=sorted(self._boxes),
            targets=sorted(self._targets),
            move_count=self.move_count,
            push_count=self._pushes,
            solved=self.is_solved,
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _perform(self, direction: Direction) -> MoveOutcome:
        """Apply one move without touching the redo stack."""
        if self._phase == SessionPhase.SOLVED:
            return MoveOutcome.rejected(RejectReason.ALREADY_SOLVED)

        dx, dy = direction.delta
        target_cell = self._player.moved(dx, dy)
        if not self.grid.is_walkable(*target_cell):
            return MoveOutcome.rejected(RejectReason.BLOCKED)

        box_from = None
        if target_cell in self._boxes:
            push_cell = target_cell.moved(dx, dy)
            if not self.grid.is_walkable(*push_cell) or push_cell in self._boxes:
                return MoveOutcome.rejected(RejectReason.BLOCKED)
            self._boxes.remove(target_cell)
            self._boxes.add(push_cell)
            self._pushes += 1
            box_from = target_cell

        self._player = target_cell
        self._history.append(MoveRecord(direction=direction, box_from=box_from))

        if self._boxes == self._targets:
            self._phase = SessionPhase.SOLVED
            logger.info(
                f"Level {self.grid.name or '(unnamed)'} solved in "
                f"{self.move_count} moves, {self._pushes} pushes"
            )
            return MoveOutcome.accepted_with(AcceptedKind.SOLVED, pushed=box_from is not None)

        return MoveOutcome.accepted_with(AcceptedKind.CONTINUED, pushed=box_from is not None)

    def __repr__(self) -> str:
        return (
            f"GameSession(level={self.grid.name!r}, player={tuple(self._player)}, "
            f"moves={self.move_count}, phase={self._phase.value})"
        )
