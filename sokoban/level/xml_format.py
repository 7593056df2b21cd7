"""
SokobanLevels XML Format - Structured markup levelsets.

    <?xml version="1.0" encoding="utf-8"?>
    <SokobanLevels>
      <Title>Microban</Title>
      <LevelCollection Copyright="...">
        <Level Id="first" Width="5" Height="3">
          <L>#####</L>
          <L>#@$.#</L>
          <L>#####</L>
        </Level>
      </LevelCollection>
    </SokobanLevels>

Each <L> holds one row using the plain-text glyph table. Width and Height
are optional upper bounds: longer rows and extra rows are cut off.
"""

from __future__ import annotations
import logging
import xml.etree.ElementTree as ET
from typing import Iterable

from .builder import build_level
from .collection import LevelCollection, LevelFormat
from .errors import InvalidLevel, MalformedInput, ParseError
from .grid import GridModel

logger = logging.getLogger(__name__)

ROOT = "SokobanLevels"
TITLE = "Title"
COLLECTION = "LevelCollection"
LEVEL = "Level"
LINE = "L"


def parse_xml_levelset(raw: bytes | str) -> LevelCollection:
    """
    Parse a SokobanLevels XML document.

    Args:
        raw: Document as bytes or text

    Returns:
        LevelCollection with every level in document order

    Raises:
        MalformedInput: Bad XML, wrong structure, bad dimensions, unknown glyph
        InvalidLevel: A level breaks game invariants, or no levels found
    """
    if isinstance(raw, str):
        raw = raw.encode("utf-8")
    try:
        root = ET.fromstring(raw)
    except ET.ParseError as e:
        raise MalformedInput(f"Bad XML: {e}")

    if _local(root.tag) != ROOT:
        raise MalformedInput(
            f"Bad structure of XML: root element is <{_local(root.tag)}>, "
            f"expected <{ROOT}>"
        )

    title = ""
    for child in root:
        if _local(child.tag) == TITLE:
            title = (child.text or "").strip()
            break

    collections = [child for child in root if _local(child.tag) == COLLECTION]
    if not collections:
        raise MalformedInput(f"Bad structure of XML: no <{COLLECTION}> element")

    elements = [
        level for collection in collections
        for level in collection if _local(level.tag) == LEVEL
    ]
    if not elements:
        raise InvalidLevel("No levels found")

    levels: list[GridModel] = []
    for ordinal, element in enumerate(elements, start=1):
        name = element.get("Id", "")
        try:
            levels.append(_parse_level_element(element, name))
        except ParseError as e:
            raise e.with_level(ordinal, name) from e

    logger.debug(f"Parsed {len(levels)} XML levels (title={title!r})")
    return LevelCollection(levels=levels, title=title, format=LevelFormat.XML)


def parse_xml_level(raw: bytes | str) -> GridModel:
    """
    Parse a document holding a single level.

    Raises:
        MalformedInput: If the document holds more than one level
    """
    collection = parse_xml_levelset(raw)
    if len(collection) != 1:
        raise MalformedInput(f"Expected one level, found {len(collection)}")
    return collection.levels[0]


def format_xml_levelset(levels: Iterable[GridModel], title: str = "") -> str:
    """Serialize levels to a SokobanLevels XML document."""
    root = ET.Element(ROOT)
    if title:
        ET.SubElement(root, TITLE).text = title
    collection = ET.SubElement(root, COLLECTION)
    for level in levels:
        attrs = {"Width": str(level.width), "Height": str(level.height)}
        if level.name:
            attrs = {"Id": level.name, **attrs}
        element = ET.SubElement(collection, LEVEL, attrs)
        for row in level.to_text().split("\n"):
            ET.SubElement(element, LINE).text = row
    ET.indent(root, space="  ")
    body = ET.tostring(root, encoding="unicode")
    return f'<?xml version="1.0" encoding="utf-8"?>\n{body}\n'


def _parse_level_element(element: ET.Element, name: str) -> GridModel:
    """Build one level from a <Level> element."""
    width = _dimension(element, "Width")
    height = _dimension(element, "Height")

    rows = [line.text or "" for line in element if _local(line.tag) == LINE]
    if not rows:
        raise MalformedInput(f"<{LEVEL}> has no <{LINE}> rows", name=name)

    if height is not None:
        rows = rows[:height]
    if width is not None:
        rows = [row.rstrip()[:width] for row in rows]
    return build_level(rows, name=name)


def _dimension(element: ET.Element, attr: str) -> int | None:
    """Read an optional positive integer attribute."""
    value = element.get(attr)
    if value is None:
        return None
    try:
        number = int(value.strip())
    except ValueError:
        raise MalformedInput(f"Non-numeric {attr} {value!r}")
    if number <= 0:
        raise MalformedInput(f"{attr} must be positive, got {number}")
    return number


def _local(tag: str) -> str:
    """Strip an XML namespace from a tag name."""
    return tag.rsplit("}", 1)[-1]
