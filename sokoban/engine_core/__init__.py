"""
Engine Core - Deterministic single-level game state.

The engine is the runtime that:
1. Takes a validated GridModel
2. Manages the mutable player and box positions
3. Applies moves and pushes, rejecting illegal ones
4. Keeps a reversible move log for undo and redo
5. Publishes read-only snapshots for display
"""

from .action import (
    Command,
    Direction,
    MoveOutcome,
    OutcomeStatus,
    AcceptedKind,
    RejectReason,
)
from .state import MoveRecord, SessionPhase
from .snapshot import SessionSnapshot
from .session import GameSession

__all__ = [
    "Command",
    "Direction",
    "MoveOutcome",
    "OutcomeStatus",
    "AcceptedKind",
    "RejectReason",
    "MoveRecord",
    "SessionPhase",
    "SessionSnapshot",
    "GameSession",
]
