"""
Format Selection - Picks one of the two level parsers at load time.

Both parsers are plain functions converging on the same GridModel type;
the loader only chooses which one to call, based on a declared format or
on the first bytes of the source.
"""

from __future__ import annotations
from typing import Callable, Iterable

from .collection import LevelCollection, LevelFormat
from .grid import GridModel
from .text_format import format_text_levelset, parse_text_levelset
from .xml_format import format_xml_levelset, parse_xml_levelset

PARSERS: dict[LevelFormat, Callable[[bytes | str], LevelCollection]] = {
    LevelFormat.TEXT: parse_text_levelset,
    LevelFormat.XML: parse_xml_levelset,
}

SERIALIZERS: dict[LevelFormat, Callable[..., str]] = {
    LevelFormat.TEXT: format_text_levelset,
    LevelFormat.XML: format_xml_levelset,
}


def detect_format(raw: bytes | str) -> LevelFormat:
    """
    Guess the format of a level source.

    Markup starts with '<' (XML declaration or root element); no level
    glyph does.
    """
    head = raw[:256]
    if isinstance(head, bytes):
        head = head.decode("utf-8", errors="ignore")
    head = head.lstrip("\ufeff \t\r\n")
    return LevelFormat.XML if head.startswith("<") else LevelFormat.TEXT


def parse_levelset(
    raw: bytes | str, fmt: LevelFormat | str = LevelFormat.AUTO
) -> LevelCollection:
    """Parse a levelset with the declared parser, or the detected one for AUTO."""
    fmt = LevelFormat(fmt)
    if fmt == LevelFormat.AUTO:
        fmt = detect_format(raw)
    return PARSERS[fmt](raw)


def format_levelset(
    levels: Iterable[GridModel],
    fmt: LevelFormat | str = LevelFormat.TEXT,
    title: str = "",
) -> str:
    """Serialize levels in the requested format."""
    fmt = LevelFormat(fmt)
    if fmt == LevelFormat.AUTO:
        raise ValueError("An explicit format is required for serialization")
    return SERIALIZERS[fmt](levels, title=title)
