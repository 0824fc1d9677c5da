"""Background hint computation for live play.

Each request is tagged with a generation number.  Submitting a new
puzzle cancels the search still running for the previous one, and a
search that finishes after it has been superseded never publishes its
result.
"""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor

from backend.engine.gamesolver.config import SolverConfig
from backend.engine.gamesolver.result import SolveResult
from backend.engine.gamesolver.solver import Solver
from backend.models.puzzle import Puzzle

logger = logging.getLogger(__name__)


class HintWorker:
    """Runs one solver search at a time on a background thread."""

    def __init__(self, config: SolverConfig | None = None) -> None:
        self.config = config or SolverConfig()
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="hint-worker"
        )
        self._lock = threading.Lock()
        self._generation = 0
        self._cancel: threading.Event | None = None
        self._published: tuple[str, SolveResult] | None = None
        self._closed = False

    def __enter__(self) -> HintWorker:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    # -- requests -------------------------------------------------------------

    def submit(self, puzzle: Puzzle) -> Future[SolveResult]:
        """Start solving *puzzle*, superseding any earlier request."""
        with self._lock:
            if self._closed:
                raise RuntimeError("HintWorker has been shut down.")
            if self._cancel is not None:
                self._cancel.set()
            self._generation += 1
            generation = self._generation
            cancel = threading.Event()
            self._cancel = cancel
            self._published = None
        return self._executor.submit(self._run, generation, puzzle, cancel)

    def result_for(self, puzzle: Puzzle) -> SolveResult | None:
        """Return the published result if it was computed for *puzzle*."""
        with self._lock:
            if self._published is None:
                return None
            key, result = self._published
        return result if key == puzzle.key() else None

    def shutdown(self) -> None:
        with self._lock:
            self._closed = True
            if self._cancel is not None:
                self._cancel.set()
        self._executor.shutdown(wait=True)

    # -- helpers --------------------------------------------------------------

    def _run(
        self, generation: int, puzzle: Puzzle, cancel: threading.Event
    ) -> SolveResult:
        result = Solver.solve_with(puzzle, self.config, cancel)
        with self._lock:
            if generation == self._generation:
                self._published = (puzzle.key(), result)
            else:
                logger.debug(
                    "dropping stale result for generation %d (latest %d)",
                    generation, self._generation,
                )
        return result
