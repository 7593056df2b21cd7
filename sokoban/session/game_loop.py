"""
Game Loop - The command-driven play loop over a levelset.

The loop:
1. Input source delivers one Command
2. Loop routes it to the game session (moves, undo, redo)
   or handles it itself (cancel, quit, help)
3. Display adapter renders the new snapshot
4. When a level is solved, the caller asks for the next one
5. Repeat until the last level is solved or the user quits

The loop owns exactly one Levelset and one GameSession at a time.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
import logging

from ..engine_core.action import Command, MoveOutcome
from ..engine_core.session import GameSession
from ..engine_core.snapshot import SessionSnapshot
from .levelset import Levelset

logger = logging.getLogger(__name__)


class LoopState(Enum):
    """State of the game loop."""
    PLAYING = "playing"
    LEVEL_SOLVED = "level_solved"  # Waiting for next_level()
    COMPLETED = "completed"  # Last level solved
    QUIT = "quit"


@dataclass
class TurnResult:
    """
    Result of handling one command.

    Tells the display adapter whether to redraw and what to say.
    """
    command: Command
    loop_state: LoopState

    # Set for move commands only
    outcome: MoveOutcome | None = None

    # Whether the session state changed
    changed: bool = False

    messages: list[str] = field(default_factory=list)
    show_help: bool = False


class GameLoop:
    """
    The main game loop driver.

    Usage:
        loop = GameLoop(Levelset.load("levels.txt"))

        result = loop.handle(Command.MOVE_RIGHT)
        if result.loop_state == LoopState.LEVEL_SOLVED:
            loop.next_level()

        render(loop.snapshot())
    """

    def __init__(self, levelset: Levelset):
        self.levelset = levelset
        self.session = GameSession(levelset.current())
        self.state = LoopState.PLAYING

    @property
    def is_running(self) -> bool:
        return self.state in (LoopState.PLAYING, LoopState.LEVEL_SOLVED)

    @property
    def level_number(self) -> int:
        """1-based number of the level being played."""
        return self.levelset.current_index + 1

    def handle(self, command: Command) -> TurnResult:
        """Route one command and report what happened."""
        if not self.is_running:
            return TurnResult(
                command=command,
                loop_state=self.state,
                messages=["Game is over"],
            )

        direction = command.direction
        if direction is not None:
            return self._handle_move(command)

        if command == Command.UNDO:
            changed = self.session.undo()
            if changed and self.state == LoopState.LEVEL_SOLVED:
                self.state = LoopState.PLAYING
            return TurnResult(
                command=command,
                loop_state=self.state,
                changed=changed,
                messages=[] if changed else ["Nothing to undo"],
            )

        if command == Command.REDO:
            changed = self.session.redo()
            if self.session.is_solved:
                self.state = LoopState.LEVEL_SOLVED
            return TurnResult(
                command=command,
                loop_state=self.state,
                changed=changed,
                messages=[] if changed else ["Nothing to redo"],
            )

        if command == Command.CANCEL_LEVEL:
            self._start_level()
            return TurnResult(
                command=command,
                loop_state=self.state,
                changed=True,
                messages=[f"Level {self.level_number} restarted"],
            )

        if command == Command.QUIT:
            self.state = LoopState.QUIT
            logger.info(f"Quit at level {self.level_number}")
            return TurnResult(command=command, loop_state=self.state)

        # HELP
        return TurnResult(command=command, loop_state=self.state, show_help=True)

    def next_level(self) -> bool:
        """
        Advance to the next level with a fresh session.

        After the last level the loop ends in COMPLETED and False is
        returned.
        """
        if not self.levelset.advance():
            self.state = LoopState.COMPLETED
            logger.info("All levels completed")
            return False
        self._start_level()
        return True

    def select_level(self, index: int) -> None:
        """
        Jump to a level by 0-based index.

        Raises:
            IndexError: If index is out of range
        """
        self.levelset.select(index)
        self._start_level()

    def snapshot(self) -> SessionSnapshot:
        return self.session.snapshot(
            level_number=self.level_number,
            level_count=len(self.levelset),
        )

    def _handle_move(self, command: Command) -> TurnResult:
        outcome = self.session.apply_move(command.direction)
        messages = []
        if outcome.solved:
            self.state = LoopState.LEVEL_SOLVED
            messages.append(
                f"Level {self.level_number} solved in "
                f"{self.session.move_count} moves, {self.session.push_count} pushes"
            )
        return TurnResult(
            command=command,
            loop_state=self.state,
            outcome=outcome,
            changed=outcome.accepted,
            messages=messages,
        )

    def _start_level(self) -> None:
        self.session = GameSession(self.levelset.current())
        self.state = LoopState.PLAYING
        logger.debug(f"Started level {self.level_number}")
