"""
Plain-Text Level Format - The classic character-grid levelset file.

Layout:
    ; Levelset title            <- first line, if it starts with ';'
    ; free comments
    Author: free text           <- "Field: value" lines; any letter-led line
                                   before the first level

    ####
    #@$.#                       <- a level is a run of consecutive rows
    ####
    ; level name                <- comment directly below (or above) a level

Naming: a comment or "Title: ..." line directly adjacent to a level block
names it. If the first level has such a line directly above it, names
precede levels for the whole file; otherwise they follow levels.

Blank lines separate blocks. See glyphs.py for the glyph table.
"""

from __future__ import annotations
import logging
import re
from dataclasses import dataclass, field
from typing import Iterable

from .builder import build_level
from .collection import LevelCollection, LevelFormat, decode_text
from .errors import InvalidLevel, MalformedInput, ParseError
from .grid import GridModel

logger = logging.getLogger(__name__)

COMMENT = ";"
TITLE_LINE = re.compile(r"^title\s*:\s*(.*)$", re.IGNORECASE)
HEADER_FIELD = re.compile(r"^\w[\w ]*:(\s|$)")

# Line kinds
BLANK = "blank"
NAME = "name"  # comment or Title: line, may name an adjacent level
TEXT = "text"
ROW = "row"


@dataclass
class _Block:
    """Rows of one level plus the name lines found next to it."""
    rows: list[str] = field(default_factory=list)
    above: str | None = None
    below: str | None = None


def parse_text_levelset(raw: bytes | str) -> LevelCollection:
    """
    Parse a plain-text levelset.

    Args:
        raw: File contents as bytes or text

    Returns:
        LevelCollection with every level in file order

    Raises:
        MalformedInput: Bad encoding or unknown glyph (with level ordinal)
        InvalidLevel: A level breaks game invariants, or no levels found
    """
    lines = decode_text(raw).splitlines()

    title = ""
    if lines and lines[0].startswith(COMMENT):
        title = lines[0][1:].strip()
        lines = lines[1:]

    blocks = _split_blocks(lines)
    if not blocks:
        raise InvalidLevel("No levels found")

    names_first = blocks[0].above is not None
    levels: list[GridModel] = []
    for ordinal, block in enumerate(blocks, start=1):
        name = (block.above if names_first else block.below) or ""
        try:
            levels.append(build_level(block.rows, name=name))
        except ParseError as e:
            raise e.with_level(ordinal, name) from e

    logger.debug(f"Parsed {len(levels)} text levels (title={title!r})")
    return LevelCollection(levels=levels, title=title, format=LevelFormat.TEXT)


def parse_text_level(raw: bytes | str) -> GridModel:
    """
    Parse a single level in plain-text format.

    Raises:
        MalformedInput: If the source holds more than one level
    """
    collection = parse_text_levelset(raw)
    if len(collection) != 1:
        raise MalformedInput(f"Expected one level, found {len(collection)}")
    return collection.levels[0]


def format_text_levelset(levels: Iterable[GridModel], title: str = "") -> str:
    """
    Serialize levels to the plain-text format.

    Names are written below their level, so the output parses back to
    equal grids with the same names.
    """
    parts = []
    if title:
        parts.append(f"{COMMENT} {title}\n")
    for level in levels:
        block = level.to_text()
        if level.name:
            block += f"\n{COMMENT} {level.name}"
        parts.append(block + "\n")
    return "\n".join(parts)


def _classify(line: str, in_header: bool) -> tuple[str, str]:
    """
    Classify one source line as (kind, value).

    Lines led by a letter or digit are free text anywhere in the header,
    and only when shaped like a "Field: value" line after the first level.
    Any other such line is a row, so its glyphs get checked.
    """
    stripped = line.strip()
    if not stripped:
        return BLANK, ""
    if stripped.startswith(COMMENT):
        return NAME, stripped[1:].strip()
    if stripped[0].isalnum():
        match = TITLE_LINE.match(stripped)
        if match:
            return NAME, match.group(1).strip()
        if in_header or HEADER_FIELD.match(stripped):
            return TEXT, stripped
    return ROW, line


def _split_blocks(lines: Iterable[str]) -> list[_Block]:
    """Group consecutive rows into level blocks and attach adjacent names."""
    blocks: list[_Block] = []
    current: _Block | None = None
    run_name: str | None = None  # last name in the run of lines just above
    just_closed: _Block | None = None

    for line in lines:
        kind, value = _classify(line, in_header=not blocks)
        if kind == ROW:
            if current is None:
                current = _Block(above=run_name)
                blocks.append(current)
            current.rows.append(value)
            run_name = None
            just_closed = None
            continue

        if current is not None:
            just_closed = current
            current = None
        elif just_closed is not None:
            just_closed = None

        if kind == BLANK:
            run_name = None
            just_closed = None
        elif kind == NAME:
            if just_closed is not None and just_closed.below is None:
                just_closed.below = value
            run_name = value

    return blocks
