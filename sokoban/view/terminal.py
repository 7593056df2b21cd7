"""
Terminal Adapter - Renders snapshots as glyph rows and reads key commands.

The adapter only ever sees a SessionSnapshot; it never touches the game
session. Output uses the same glyphs as the plain-text level format.
"""

from __future__ import annotations
import logging

from ..engine_core.action import Command
from ..engine_core.snapshot import SessionSnapshot
from ..level.glyphs import encode

logger = logging.getLogger(__name__)

KEYMAP: dict[str, Command] = {
    "w": Command.MOVE_UP,
    "k": Command.MOVE_UP,
    "s": Command.MOVE_DOWN,
    "j": Command.MOVE_DOWN,
    "a": Command.MOVE_LEFT,
    "h": Command.MOVE_LEFT,
    "d": Command.MOVE_RIGHT,
    "l": Command.MOVE_RIGHT,
    "u": Command.UNDO,
    "r": Command.REDO,
    "c": Command.CANCEL_LEVEL,
    "q": Command.QUIT,
    "?": Command.HELP,
}

# ANSI cursor keys
ARROWS: dict[str, Command] = {
    "\x1b[A": Command.MOVE_UP,
    "\x1b[B": Command.MOVE_DOWN,
    "\x1b[C": Command.MOVE_RIGHT,
    "\x1b[D": Command.MOVE_LEFT,
}


def render(snapshot: SessionSnapshot, show_status: bool = True) -> list[str]:
    """Map a snapshot to glyph rows, followed by a status line."""
    boxes = set(snapshot.boxes)
    player = tuple(snapshot.player)

    lines = []
    for y in range(snapshot.height):
        chars = [
            encode(
                snapshot.cell_at(x, y),
                box=(x, y) in boxes,
                player=(x, y) == player,
            )
            for x in range(snapshot.width)
        ]
        lines.append("".join(chars).rstrip())

    if show_status:
        lines.append("")
        lines.append(status_line(snapshot))
    return lines


def status_line(snapshot: SessionSnapshot) -> str:
    parts = []
    if snapshot.level_number is not None:
        level = f"Level {snapshot.level_number}"
        if snapshot.level_count is not None:
            level += f"/{snapshot.level_count}"
        parts.append(level)
    if snapshot.level_name:
        parts.append(snapshot.level_name)
    parts.append(f"Moves: {snapshot.move_count}")
    parts.append(f"Pushes: {snapshot.push_count}")
    parts.append(f"Boxes: {snapshot.boxes_on_targets}/{len(snapshot.targets)}")
    if snapshot.solved:
        parts.append("SOLVED")
    return " | ".join(parts)


def help_lines() -> list[str]:
    return [
        "Move:   w/k/Up  s/j/Down  a/h/Left  d/l/Right",
        "u undo   r redo   c restart level",
        "q quit   ? this help",
        "Several keys may be typed on one line, then Enter.",
    ]


def parse_keys(text: str) -> list[Command]:
    """
    Translate a line of typed keys into commands, in order.

    Unknown keys are skipped with a warning.
    """
    commands = []
    i = 0
    while i < len(text):
        seq = text[i:i + 3]
        if seq in ARROWS:
            commands.append(ARROWS[seq])
            i += 3
            continue

        ch = text[i]
        i += 1
        if ch.isspace():
            continue
        command = KEYMAP.get(ch.lower())
        if command is None:
            logger.warning(f"Ignoring unknown key {ch!r}")
            continue
        commands.append(command)
    return commands
