from backend.models.errors import InvalidMove, PuzzleError
from backend.models.puzzle import CAPACITY, Move, Puzzle

__all__ = ["CAPACITY", "InvalidMove", "Move", "Puzzle", "PuzzleError"]
