"""Core gameplay logic — processes pours and checks win condition."""

from __future__ import annotations

import logging
import random

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gamesolver import Solver, SolverConfig, SolveResult
from backend.engine.gamestate import GameState
from backend.models.puzzle import Move, Puzzle

logger = logging.getLogger(__name__)


class GamePlay:
    """Orchestrates a single game session."""

    def __init__(self, num_vials: int, rng: random.Random | None = None) -> None:
        self.num_vials = num_vials
        puzzle = GameGenerator.generate(num_vials, rng)
        self.state = GameState(puzzle)

    @classmethod
    def from_puzzle(cls, puzzle: Puzzle) -> "GamePlay":
        """Create a game session from an existing puzzle (e.g. decoded from a key)."""
        obj = object.__new__(cls)
        obj.num_vials = len(puzzle)
        obj.state = GameState(puzzle)
        return obj

    # -- movement -------------------------------------------------------------

    def pour(self, source: int, dest: int) -> bool:
        """Pour vial *source* into vial *dest*.

        Returns True if the pour was legal and applied; an illegal pour
        leaves the game untouched.
        """
        puzzle = self.state.puzzle
        if not puzzle.is_legal_move(source, dest):
            logger.debug("rejected pour %d -> %d", source, dest)
            return False
        self.state.push(puzzle.apply_move(source, dest))
        return True

    def play(self, moves: list[Move] | tuple[Move, ...]) -> int:
        """Apply *moves* in order, stopping at the first illegal one.

        Returns the number of moves applied.
        """
        for applied, move in enumerate(moves):
            if not self.pour(*move):
                return applied
        return len(moves)

    def undo(self) -> bool:
        return self.state.undo()

    def redo(self) -> bool:
        return self.state.redo()

    # -- queries --------------------------------------------------------------

    def solve(self, config: SolverConfig | None = None) -> SolveResult:
        return Solver.solve_with(self.state.puzzle, config or SolverConfig())

    def hint(self, config: SolverConfig | None = None) -> Move | None:
        """Return the first move of a fastest solution from here, if any."""
        return self.solve(config).first_move

    @property
    def is_won(self) -> bool:
        return self.state.is_solved
