"""
Configuration - Environment-driven settings.

All settings are read once at import time. CLI flags override them.

    SOKOBAN_LOG_LEVEL    Logging level for the CLI (default: WARNING)
    SOKOBAN_MAX_WIDTH    Largest accepted level width (default: 256)
    SOKOBAN_MAX_HEIGHT   Largest accepted level height (default: 256)
    SOKOBAN_LEVELS       Levelset played when `sokoban play` gets no file
"""

import os

LOG_LEVEL = os.getenv("SOKOBAN_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

MAX_WIDTH = int(os.getenv("SOKOBAN_MAX_WIDTH", "256"))
MAX_HEIGHT = int(os.getenv("SOKOBAN_MAX_HEIGHT", "256"))

DEFAULT_LEVELS = os.getenv("SOKOBAN_LEVELS", None)
