"""
Sokoban - Warehouse Puzzle Engine

A deterministic engine for playing box-pushing puzzles from level files.
The engine loads levelsets (plain text or SokobanLevels XML) and provides:
- Level parsing and validation
- Move and push legality
- Win detection
- Unlimited undo/redo per level attempt
"""

__version__ = "0.1.0"
