"""Source position value type."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, NonNegativeInt


class Position(BaseModel):
    """Line and column at which a token begins in the source text.

    ``line`` counts from 1. ``col`` is the parser's column offset of the
    token start, counted from 0.
    """

    model_config = ConfigDict(frozen=True)

    line: NonNegativeInt
    col: NonNegativeInt

    @classmethod
    def from_mark(cls, mark: Any) -> Position:
        """Build a position from a ruamel.yaml ``Mark`` (0-based line and column)."""
        return cls(line=mark.line + 1, col=mark.column)

    def __str__(self) -> str:
        return f"{self.line}:{self.col}"
