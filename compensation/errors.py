"""Errors raised by the compensation calculators."""

from __future__ import annotations

from typing import Iterable


class UnknownLevelError(ValueError):
    """Raised when a level code has no entry in the level table."""

    def __init__(self, level: str, known_levels: Iterable[str]) -> None:
        self.level = level
        self.known_levels = sorted(known_levels)
        super().__init__(
            f"Unknown level {level!r}; expected one of {', '.join(self.known_levels)}"
        )
