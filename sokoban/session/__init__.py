"""
Session Module - Levelset navigation and the play loop.

A play-through:
- Loads a levelset (atomically, every level validated)
- Starts a game session on the current level
- Routes commands until the level is solved, then advances
- Ends when the last level is solved or the user quits

Nothing is persisted.
"""

from .levelset import Levelset
from .game_loop import GameLoop, LoopState, TurnResult

__all__ = [
    "Levelset",
    "GameLoop",
    "LoopState",
    "TurnResult",
]
