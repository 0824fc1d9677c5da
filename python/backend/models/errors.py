"""Exceptions raised by the puzzle model."""

from __future__ import annotations


class PuzzleError(ValueError):
    """Raised for a malformed puzzle or canonical key."""


class InvalidMove(PuzzleError):
    """Raised when a pour is applied that the rules do not allow."""

    def __init__(self, source: int, dest: int) -> None:
        super().__init__(f"Cannot pour from vial {source} into vial {dest}.")
        self.source = source
        self.dest = dest
