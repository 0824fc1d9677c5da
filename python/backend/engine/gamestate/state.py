"""Tracks the state of a game in progress."""

from __future__ import annotations

from backend.models.puzzle import Puzzle


class GameState:
    """Holds the current puzzle, move counter, and undo/redo snapshots.

    Puzzles are immutable, so the snapshots are the puzzles themselves.
    """

    def __init__(self, puzzle: Puzzle) -> None:
        self.puzzle = puzzle
        self.moves: int = 0
        self._undo: list[Puzzle] = []
        self._redo: list[Puzzle] = []

    # -- history --------------------------------------------------------------

    def push(self, puzzle: Puzzle) -> None:
        """Make *puzzle* current, remembering the previous one for undo."""
        self._undo.append(self.puzzle)
        self._redo.clear()
        self.puzzle = puzzle
        self.moves += 1

    def undo(self) -> bool:
        if not self._undo:
            return False
        self._redo.append(self.puzzle)
        self.puzzle = self._undo.pop()
        self.moves -= 1
        return True

    def redo(self) -> bool:
        if not self._redo:
            return False
        self._undo.append(self.puzzle)
        self.puzzle = self._redo.pop()
        self.moves += 1
        return True

    @property
    def can_undo(self) -> bool:
        return bool(self._undo)

    @property
    def can_redo(self) -> bool:
        return bool(self._redo)

    @property
    def is_solved(self) -> bool:
        return self.puzzle.is_solved()
