"""
Pytest fixtures for Sokoban tests.
"""

import pytest

from ..level import GridModel, parse_text_level
from ..engine_core import GameSession
from ..session import Levelset


PLAIN_PUSH = """\
#####
#@$.#
#####
"""

BLOCKED_PUSH = """\
#####
#.@$#
#####
"""

TWO_BOXES_IN_LINE = """\
#######
#@$$..#
#######
"""

OPEN_ROOM = """\
#######
#     #
# $ . #
#  @  #
#######
"""

TWO_LEVELS = """\
; Two Levels

#####
#@$.#
#####
; One

######
#.$ @#
######
; Two
"""

TWO_LEVELS_XML = """\
<?xml version="1.0" encoding="utf-8"?>
<SokobanLevels>
  <Title>Two Levels</Title>
  <LevelCollection>
    <Level Id="One" Width="5" Height="3">
      <L>#####</L>
      <L>#@$.#</L>
      <L>#####</L>
    </Level>
    <Level Id="Two" Width="6" Height="3">
      <L>######</L>
      <L>#.$ @#</L>
      <L>######</L>
    </Level>
  </LevelCollection>
</SokobanLevels>
"""


@pytest.fixture
def plain_push_grid() -> GridModel:
    """Player, box and target in one corridor: one push solves it."""
    return parse_text_level(PLAIN_PUSH)


@pytest.fixture
def blocked_grid() -> GridModel:
    """Box directly in front of a wall."""
    return parse_text_level(BLOCKED_PUSH)


@pytest.fixture
def two_box_grid() -> GridModel:
    """Two boxes in a row in front of the player."""
    return parse_text_level(TWO_BOXES_IN_LINE)


@pytest.fixture
def open_room_grid() -> GridModel:
    """A room with space to walk around one box."""
    return parse_text_level(OPEN_ROOM)


@pytest.fixture
def session(plain_push_grid: GridModel) -> GameSession:
    return GameSession(plain_push_grid)


@pytest.fixture
def room_session(open_room_grid: GridModel) -> GameSession:
    return GameSession(open_room_grid)


@pytest.fixture
def two_levelset() -> Levelset:
    """Levelset with two one-push levels."""
    return Levelset.load(TWO_LEVELS)


@pytest.fixture
def levels_file(tmp_path):
    """TWO_LEVELS written to disk."""
    path = tmp_path / "two.txt"
    path.write_text(TWO_LEVELS, encoding="utf-8")
    return path
