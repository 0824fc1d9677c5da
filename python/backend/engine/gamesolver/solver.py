"""Water sort solver — bounded breadth-first search."""

from __future__ import annotations

import logging
import threading
from collections import deque
from typing import NamedTuple

from backend.engine.gamesolver.config import SolverConfig
from backend.engine.gamesolver.result import SolveResult, SolveStatus
from backend.models.puzzle import Move, Puzzle

logger = logging.getLogger(__name__)


class SearchNode(NamedTuple):
    depth: int
    parent: str | None
    move: Move | None


class Solver:
    """Stateless solver — all methods are static."""

    @staticmethod
    def solve(
        puzzle: Puzzle,
        max_depth: int | None = None,
        node_budget: int | None = None,
        cancel: threading.Event | None = None,
    ) -> SolveResult:
        """Return the shortest pour sequence that solves *puzzle*.

        Moves are tried source-ascending, then dest-ascending, so among
        equally short solutions the lexicographically smallest one wins.
        Nodes at *max_depth* are not expanded; once more than
        *node_budget* nodes have been dequeued, or *cancel* is set, the
        search gives up with ``ABORTED``.
        """
        config = SolverConfig().override(max_depth, node_budget)

        if puzzle.is_solved():
            return SolveResult(SolveStatus.SOLVED, "Already solved")

        start = puzzle.key()
        logger.debug(
            "solving %s (max_depth=%d, node_budget=%d)",
            start, config.max_depth, config.node_budget,
        )

        nodes: dict[str, SearchNode] = {start: SearchNode(0, None, None)}
        queue: deque[str] = deque([start])
        expanded = 0
        goal: str | None = None
        stopped: str | None = None

        while queue:
            if cancel is not None and cancel.is_set():
                stopped = "Search cancelled"
                break
            current = queue.popleft()
            expanded += 1
            if expanded > config.node_budget:
                stopped = "Search aborted (node limit)"
                break

            depth = nodes[current].depth
            if depth >= config.max_depth:
                continue

            state = Puzzle.from_key(current)
            for move in state.legal_moves():
                child = state.apply_move(*move)
                child_key = child.key()
                if child_key in nodes:
                    continue
                nodes[child_key] = SearchNode(depth + 1, current, move)
                if child.is_solved():
                    goal = child_key
                    break
                queue.append(child_key)
            if goal is not None:
                break

        if goal is not None:
            path = Solver._reconstruct(nodes, goal)
            logger.debug("solved in %d moves after %d expansions", len(path), expanded)
            return SolveResult(
                SolveStatus.SOLVED, "Fastest path found", path, expanded
            )

        if stopped is not None:
            logger.debug("%s after %d expansions", stopped, expanded)
            return SolveResult(SolveStatus.ABORTED, stopped, nodes_expanded=expanded)

        logger.debug("frontier exhausted after %d expansions", expanded)
        return SolveResult(
            SolveStatus.EXHAUSTED,
            "No solution found within depth limit",
            nodes_expanded=expanded,
        )

    @staticmethod
    def hint(
        puzzle: Puzzle,
        max_depth: int | None = None,
        node_budget: int | None = None,
    ) -> Move | None:
        """Return the first move of a fastest solution, or ``None``."""
        return Solver.solve(puzzle, max_depth, node_budget).first_move

    @staticmethod
    def solve_with(
        puzzle: Puzzle,
        config: SolverConfig,
        cancel: threading.Event | None = None,
    ) -> SolveResult:
        return Solver.solve(puzzle, config.max_depth, config.node_budget, cancel)

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _reconstruct(nodes: dict[str, SearchNode], goal: str) -> tuple[Move, ...]:
        moves: list[Move] = []
        node = nodes[goal]
        # Only the start node lacks a parent and a move.
        while node.parent is not None and node.move is not None:
            moves.append(node.move)
            node = nodes[node.parent]
        moves.reverse()
        return tuple(moves)
