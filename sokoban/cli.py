"""
Sokoban CLI - Command-line interface for the engine.

Usage:
    sokoban play [FILE] [--level N]      Play a levelset in the terminal
    sokoban validate FILE                Check every level and list warnings
    sokoban show FILE --level N          Print one level
    sokoban convert FILE --to xml        Rewrite a levelset in another format

Without FILE, `play` uses $SOKOBAN_LEVELS or the built-in levels.
"""

import argparse
import logging
import sys
from pathlib import Path

from . import config
from .level import LevelFormat, ParseError, format_levelset, validate_level
from .session import GameLoop, Levelset, LoopState
from .view import help_lines, parse_keys, render

logger = logging.getLogger(__name__)


def main(argv=None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="Sokoban - Puzzle engine for plain-text and XML levelsets",
        prog="sokoban",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        type=str.upper,
        help="Logging level (default: $SOKOBAN_LOG_LEVEL or WARNING)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")
    formats = [f.value for f in LevelFormat]

    # Play command
    play_parser = subparsers.add_parser("play", help="Play a levelset")
    play_parser.add_argument("file", nargs="?", help="Levelset file")
    play_parser.add_argument("--level", "-l", type=int, default=1, help="Level to start at (1-based)")
    play_parser.add_argument("--format", "-f", choices=formats, default="auto", help="Source format")

    # Validate command
    validate_parser = subparsers.add_parser("validate", help="Validate a levelset")
    validate_parser.add_argument("file", help="Levelset file")
    validate_parser.add_argument("--format", "-f", choices=formats, default="auto", help="Source format")

    # Show command
    show_parser = subparsers.add_parser("show", help="Print one level")
    show_parser.add_argument("file", help="Levelset file")
    show_parser.add_argument("--level", "-l", type=int, default=1, help="Level to print (1-based)")
    show_parser.add_argument("--format", "-f", choices=formats, default="auto", help="Source format")

    # Convert command
    convert_parser = subparsers.add_parser("convert", help="Convert a levelset")
    convert_parser.add_argument("file", help="Levelset file")
    convert_parser.add_argument("--to", choices=["text", "xml"], required=True, help="Target format")
    convert_parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    convert_parser.add_argument("--format", "-f", choices=formats, default="auto", help="Source format")

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format=config.LOG_FORMAT, stream=sys.stderr)

    if args.command == "play":
        cmd_play(args)
    elif args.command == "validate":
        cmd_validate(args)
    elif args.command == "show":
        cmd_show(args)
    elif args.command == "convert":
        cmd_convert(args)
    else:
        parser.print_help()
        sys.exit(1)


def load_levelset(path: str, fmt: str = "auto") -> Levelset:
    """Load a levelset file or exit with status 1 and a message."""
    try:
        return Levelset.load(Path(path), fmt)
    except FileNotFoundError:
        print(f"Error: File not found: {path}", file=sys.stderr)
        sys.exit(1)
    except ParseError as e:
        print(f"{path}: {e}", file=sys.stderr)
        sys.exit(1)


def select_level(levelset: Levelset, number: int) -> None:
    """Move the cursor to a 1-based level number or exit with status 1."""
    try:
        levelset.select(number - 1)
    except IndexError:
        print(f"Error: No level {number} (levelset has {len(levelset)})", file=sys.stderr)
        sys.exit(1)


def cmd_play(args):
    """Play a levelset in the terminal, one line of keys at a time."""
    from .levels import builtin_levelset

    path = args.file or config.DEFAULT_LEVELS
    levelset = load_levelset(path, args.format) if path else builtin_levelset()
    select_level(levelset, args.level)

    loop = GameLoop(levelset)
    if levelset.title:
        print(levelset.title)
    print("\n".join(help_lines()))
    _print_board(loop)

    while loop.is_running:
        try:
            line = input("> ")
        except (EOFError, KeyboardInterrupt):
            print()
            break

        for command in parse_keys(line):
            result = loop.handle(command)
            for message in result.messages:
                print(message)
            if result.show_help:
                print("\n".join(help_lines()))
            if result.loop_state == LoopState.LEVEL_SOLVED:
                _print_board(loop)
                if not loop.next_level():
                    print("All levels solved!")
            if not loop.is_running:
                break

        if loop.is_running:
            _print_board(loop)


def cmd_validate(args):
    """Check every level of a levelset and list analysis warnings."""
    levelset = load_levelset(args.file, args.format)

    print(f"Levelset: {levelset.title or args.file} ({levelset.format.value})")
    print(f"Levels: {len(levelset)}")
    total_warnings = 0
    for line, grid in zip(levelset.summary(), levelset):
        print(line)
        for warning in validate_level(grid).warnings:
            print(f"       - {warning}")
            total_warnings += 1

    print(f"\nAll levels valid, {total_warnings} warning(s)")


def cmd_show(args):
    """Print one level as text."""
    levelset = load_levelset(args.file, args.format)
    select_level(levelset, args.level)

    grid = levelset.current()
    header = f"Level {args.level}/{len(levelset)}"
    if grid.name:
        header += f": {grid.name}"
    print(header)
    print(grid.to_text())


def cmd_convert(args):
    """Rewrite a levelset in the requested format."""
    levelset = load_levelset(args.file, args.format)
    output = format_levelset(levelset, args.to, title=levelset.title)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        print(f"Wrote {len(levelset)} levels to {args.output}")
    else:
        print(output, end="" if output.endswith("\n") else "\n")


def _print_board(loop: GameLoop):
    print()
    print("\n".join(render(loop.snapshot())))


if __name__ == "__main__":
    main()
