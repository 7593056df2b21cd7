"""
Levelset - Ordered, immutable sequence of validated levels plus a cursor.

Loading is atomic: either every level of the source parses and validates
or a ParseError is raised and no Levelset exists. Only the cursor moves
after construction.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import Iterable, Iterator

from ..level import glyphs
from ..level.collection import LevelFormat
from ..level.errors import InvalidLevel
from ..level.formats import parse_levelset
from ..level.grid import GridModel

logger = logging.getLogger(__name__)


class Levelset:
    """
    Levels in file order with a current index.

    Usage:
        levelset = Levelset.load("microban.txt")
        grid = levelset.current()
        while levelset.advance():
            ...
    """

    def __init__(
        self,
        levels: Iterable[GridModel],
        title: str = "",
        format: LevelFormat = LevelFormat.TEXT,
    ):
        self._levels = tuple(levels)
        if not self._levels:
            raise InvalidLevel("No levels found")
        self.title = title
        self.format = format
        self._index = 0

    @classmethod
    def load(
        cls,
        source: str | Path | bytes,
        fmt: LevelFormat | str = LevelFormat.AUTO,
    ) -> Levelset:
        """
        Load a levelset from a file path or from raw source.

        A Path, or a single-line str naming an existing file or holding
        non-glyph characters, is read from disk;
        bytes, multi-line strings and one-row levels are parsed as source.

        Raises:
            ParseError: If any level is malformed or invalid
            FileNotFoundError: If the named file does not exist
        """
        origin = "<memory>"
        if isinstance(source, Path) or (
            isinstance(source, str) and _looks_like_path(source)
        ):
            path = Path(source)
            origin = str(path)
            raw: bytes | str = path.read_bytes()
        else:
            raw = source

        collection = parse_levelset(raw, fmt)
        logger.info(
            f"Loaded {len(collection)} levels from {origin} "
            f"({collection.format.value})"
        )
        return cls(collection.levels, title=collection.title, format=collection.format)

    @classmethod
    def from_levels(cls, levels: Iterable[GridModel], title: str = "") -> Levelset:
        """Wrap already built levels, e.g. for tests."""
        return cls(levels, title=title)

    # ------------------------------------------------------------------
    # Cursor
    # ------------------------------------------------------------------

    @property
    def current_index(self) -> int:
        """0-based index of the current level."""
        return self._index

    def current(self) -> GridModel:
        return self._levels[self._index]

    def is_last(self) -> bool:
        return self._index == len(self._levels) - 1

    def advance(self) -> bool:
        """
        Move to the next level.

        Returns False and leaves the index unchanged at the last level.
        """
        if self.is_last():
            return False
        self._index += 1
        return True

    def rewind(self) -> bool:
        """Move to the previous level. Returns False at the first level."""
        if self._index == 0:
            return False
        self._index -= 1
        return True

    def select(self, index: int) -> GridModel:
        """
        Jump to a level by 0-based index.

        Raises:
            IndexError: If index is out of range
        """
        if not 0 <= index < len(self._levels):
            raise IndexError(
                f"Level index {index} out of range (1..{len(self._levels)} available)"
            )
        self._index = index
        return self.current()

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._levels)

    def __iter__(self) -> Iterator[GridModel]:
        return iter(self._levels)

    def __getitem__(self, index: int) -> GridModel:
        return self._levels[index]

    @property
    def levels(self) -> tuple[GridModel, ...]:
        return self._levels

    def summary(self) -> list[str]:
        """One line per level: ordinal, name, size and box count."""
        lines = []
        for i, grid in enumerate(self._levels, start=1):
            name = grid.name or "(unnamed)"
            lines.append(
                f"{i:>3}. {name} - {grid.width}x{grid.height}, {len(grid.boxes)} boxes"
            )
        return lines

    def __repr__(self) -> str:
        return (
            f"Levelset(title={self.title!r}, levels={len(self._levels)}, "
            f"current={self._index + 1})"
        )


def _looks_like_path(source: str) -> bool:
    """
    Decide whether a str names a file or holds level source.

    Multi-line strings and markup are source. A single line is a file name
    when that file exists or when it is not made of level glyphs only.
    """
    if "\n" in source or source.lstrip().startswith("<"):
        return False
    if not source.strip():
        return False
    if Path(source).exists():
        return True
    return not all(glyphs.is_glyph(ch) for ch in source.rstrip("\r"))
