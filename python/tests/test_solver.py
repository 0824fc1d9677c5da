"""Solver test suite — fixture boards plus search-bound behaviour.

Boards are JSON fixtures under ``<project_root>/fixtures/``.  Every
returned path is replayed through the real game engine to verify it
actually reaches the goal.
"""

from __future__ import annotations

import json
import random
import threading
from pathlib import Path

import pytest

from backend.engine.gamegenerator import GameGenerator
from backend.engine.gameplay.game import GamePlay
from backend.engine.gamesolver import SolverConfig, SolveStatus
from backend.engine.gamesolver.solver import Solver
from backend.models import Move, Puzzle

FIXTURES_DIR = Path(__file__).resolve().parent.parent.parent / "fixtures"

TWO_POURS = "red,red,blue,blue|red,red|blue,blue"
THREE_POURS = "red,red,blue,blue|blue,blue,red,red|"
GRIDLOCK = "red,blue,red,blue|blue,red,blue,red"


# -- fixture loaders ----------------------------------------------------------


def _load(name: str) -> list[dict]:
    with open(FIXTURES_DIR / name) as f:
        return json.load(f)


def _ids(board_data: dict) -> str:
    return board_data["id"]


_BOARDS = _load("boards.json")


# -- helpers ------------------------------------------------------------------


def _assert_replays_to_goal(puzzle: Puzzle, path: tuple[Move, ...]) -> None:
    game = GamePlay.from_puzzle(puzzle)
    for i, move in enumerate(path):
        ok = game.pour(*move)
        assert ok, f"Move {i} ({move}) was illegal"
    assert game.is_won, f"Puzzle not solved after {len(path)} moves"


# -- fixture boards -----------------------------------------------------------


@pytest.mark.parametrize("board_data", _BOARDS, ids=_ids)
def test_fixture_board(board_data: dict) -> None:
    puzzle = Puzzle.from_key(board_data["key"])

    result = Solver.solve(puzzle)

    assert result.status == SolveStatus(board_data["status"])
    assert [list(m) for m in result.path] == board_data["path"]
    if result.solved:
        assert result.min_moves == len(board_data["path"])
        _assert_replays_to_goal(puzzle, result.path)


# -- outcomes -----------------------------------------------------------------


def test_already_solved_returns_zero_moves() -> None:
    result = Solver.solve(Puzzle.from_key("a,a,a,a||b,b,b,b"))
    assert result.solved
    assert result.min_moves == 0
    assert result.first_move is None
    assert result.nodes_expanded == 0
    assert result.reason == "Already solved"


def test_two_move_puzzle_is_solved_optimally() -> None:
    result = Solver.solve(Puzzle.from_key(TWO_POURS))
    assert result.status is SolveStatus.SOLVED
    assert result.min_moves == 2
    assert result.first_move == Move(0, 2)
    assert result.path == (Move(0, 2), Move(0, 1))
    assert result.nodes_expanded == 2


def test_solve_is_deterministic() -> None:
    puzzle = Puzzle.from_key(THREE_POURS)
    first = Solver.solve(puzzle)
    second = Solver.solve(puzzle)
    assert first == second


def test_ties_go_to_the_smallest_move() -> None:
    # Both 0 -> 1 and 1 -> 0 solve it in one pour.
    result = Solver.solve(Puzzle.from_key("a,a|a,a|"))
    assert result.path == (Move(0, 1),)


def test_budget_of_one_aborts() -> None:
    result = Solver.solve(Puzzle.from_key(TWO_POURS), node_budget=1)
    assert result.status is SolveStatus.ABORTED
    assert result.path == ()
    assert result.first_move is None
    assert result.min_moves is None


def test_depth_zero_is_exhausted() -> None:
    result = Solver.solve(Puzzle.from_key(TWO_POURS), max_depth=0)
    assert result.status is SolveStatus.EXHAUSTED
    assert result.path == ()
    assert result.nodes_expanded == 1


def test_depth_below_solution_length_is_exhausted() -> None:
    result = Solver.solve(Puzzle.from_key(THREE_POURS), max_depth=2)
    assert result.status is SolveStatus.EXHAUSTED


def test_depth_equal_to_solution_length_solves() -> None:
    result = Solver.solve(Puzzle.from_key(THREE_POURS), max_depth=3)
    assert result.min_moves == 3


def test_no_legal_moves_is_exhausted() -> None:
    result = Solver.solve(Puzzle.from_key(GRIDLOCK))
    assert result.status is SolveStatus.EXHAUSTED
    assert result.nodes_expanded == 1


def test_cancelled_search_aborts() -> None:
    cancel = threading.Event()
    cancel.set()
    result = Solver.solve(Puzzle.from_key(TWO_POURS), cancel=cancel)
    assert result.status is SolveStatus.ABORTED
    assert result.reason == "Search cancelled"
    assert result.nodes_expanded == 0


def test_solve_does_not_mutate_input() -> None:
    puzzle = Puzzle.from_key(THREE_POURS)
    Solver.solve(puzzle)
    assert puzzle.key() == THREE_POURS


@pytest.mark.parametrize("kwargs", [{"max_depth": -1}, {"node_budget": 0}])
def test_invalid_limits_are_rejected(kwargs: dict) -> None:
    with pytest.raises(ValueError):
        Solver.solve(Puzzle.from_key(TWO_POURS), **kwargs)


def test_hint_is_first_move() -> None:
    assert Solver.hint(Puzzle.from_key(THREE_POURS)) == Move(0, 2)


def test_hint_is_none_when_unsolvable() -> None:
    assert Solver.hint(Puzzle.from_key(GRIDLOCK)) is None


def test_solve_with_config() -> None:
    config = SolverConfig(max_depth=1)
    result = Solver.solve_with(Puzzle.from_key(TWO_POURS), config)
    assert result.status is SolveStatus.EXHAUSTED


# -- generated boards ---------------------------------------------------------


@pytest.mark.parametrize("seed", range(5))
def test_generated_board_results_are_consistent(seed: int) -> None:
    puzzle = GameGenerator.generate(5, random.Random(seed))

    result = Solver.solve(puzzle, node_budget=5_000)

    if result.solved:
        assert result.min_moves == len(result.path) > 0
        _assert_replays_to_goal(puzzle, result.path)
    else:
        assert result.path == ()
        if result.status is SolveStatus.ABORTED:
            assert result.nodes_expanded == 5_001
