"""
Parse Errors - Structured diagnostics for level loading.

Two kinds of failure:
- MalformedInput: syntax or structure of the source is broken
  (unknown glyph, bad XML, missing elements, non-numeric dimensions)
- InvalidLevel: the level parses but breaks game invariants
  (player count != 1, box/target count mismatch, no levels at all)

Both carry the 1-based ordinal of the offending level when the problem
belongs to one level of a set, and None when it concerns the whole file.
"""

from __future__ import annotations


class ParseError(Exception):
    """Raised when a level or levelset cannot be loaded."""

    kind = "parse error"

    def __init__(
        self,
        errors: list[str] | str,
        ordinal: int | None = None,
        name: str = "",
    ):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        self.ordinal = ordinal
        self.name = name
        super().__init__(self._format())

    @property
    def reason(self) -> str:
        return "; ".join(self.errors)

    def with_level(self, ordinal: int, name: str = "") -> ParseError:
        """Return a copy of this error attributed to a level of a set."""
        return type(self)(self.errors, ordinal=ordinal, name=name or self.name)

    def _format(self) -> str:
        if self.ordinal is None:
            return f"{self.kind}: {self.reason}"
        where = f"level {self.ordinal}"
        if self.name:
            where += f" ({self.name})"
        return f"{self.kind} in {where}: {self.reason}"


class MalformedInput(ParseError):
    """Syntax or structure of the level source is violated."""

    kind = "malformed input"


class InvalidLevel(ParseError):
    """The level is readable but cannot be played."""

    kind = "invalid level"
