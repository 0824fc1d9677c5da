"""Solver outcomes."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from backend.models.puzzle import Move


class SolveStatus(StrEnum):
    SOLVED = "solved"
    EXHAUSTED = "exhausted"
    ABORTED = "aborted"


@dataclass(frozen=True)
class SolveResult:
    """Outcome of one bounded search.

    ``path`` is empty unless the status is ``SOLVED``.  An already solved
    puzzle is ``SOLVED`` with an empty path.
    """

    status: SolveStatus
    reason: str
    path: tuple[Move, ...] = field(default=())
    nodes_expanded: int = 0

    @property
    def solved(self) -> bool:
        return self.status is SolveStatus.SOLVED

    @property
    def min_moves(self) -> int | None:
        return len(self.path) if self.solved else None

    @property
    def first_move(self) -> Move | None:
        return self.path[0] if self.path else None
