from backend.engine.gamesolver.config import SolverConfig
from backend.engine.gamesolver.result import SolveResult, SolveStatus
from backend.engine.gamesolver.solver import Solver
from backend.engine.gamesolver.worker import HintWorker

__all__ = ["HintWorker", "SolveResult", "SolveStatus", "Solver", "SolverConfig"]
