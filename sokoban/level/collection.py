"""
Level Collection - Output shared by both level parsers.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum

from .errors import MalformedInput
from .grid import GridModel


class LevelFormat(str, Enum):
    """Source formats a levelset can be read from."""
    AUTO = "auto"
    TEXT = "text"
    XML = "xml"


@dataclass
class LevelCollection:
    """All levels of one source, in file order."""
    levels: list[GridModel] = field(default_factory=list)
    title: str = ""
    format: LevelFormat = LevelFormat.TEXT

    def __len__(self) -> int:
        return len(self.levels)


def decode_text(raw: bytes | str) -> str:
    """
    Decode a level source to text.

    Accepts UTF-8 with or without a byte order mark.

    Raises:
        MalformedInput: If the bytes are not valid UTF-8
    """
    if isinstance(raw, str):
        return raw.lstrip("\ufeff")
    try:
        return raw.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        raise MalformedInput(f"Input is not valid UTF-8: {e.reason} at byte {e.start}")
