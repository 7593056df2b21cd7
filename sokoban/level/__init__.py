"""
Level Layer - Grid model, glyph table and the two level parsers.

Parsing is pure and synchronous. Every parser either returns fully
validated GridModels or raises a ParseError; partially valid levels are
never exposed.
"""

from .grid import Cell, GridModel, Position
from .errors import ParseError, MalformedInput, InvalidLevel
from .collection import LevelCollection, LevelFormat
from .builder import build_level
from .validation import validate_level, ValidationResult
from .text_format import parse_text_level, parse_text_levelset, format_text_levelset
from .xml_format import parse_xml_level, parse_xml_levelset, format_xml_levelset
from .formats import detect_format, parse_levelset, format_levelset

__all__ = [
    "Cell",
    "GridModel",
    "Position",
    "ParseError",
    "MalformedInput",
    "InvalidLevel",
    "LevelCollection",
    "LevelFormat",
    "build_level",
    "validate_level",
    "ValidationResult",
    "parse_text_level",
    "parse_text_levelset",
    "format_text_levelset",
    "parse_xml_level",
    "parse_xml_levelset",
    "format_xml_levelset",
    "detect_format",
    "parse_levelset",
    "format_levelset",
]
