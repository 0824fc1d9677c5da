"""Solver tuning knobs and their TOML loader."""

from __future__ import annotations

import tomllib
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

DEFAULT_MAX_DEPTH = 14
DEFAULT_NODE_BUDGET = 200_000


@dataclass(frozen=True)
class SolverConfig:
    """Depth and work limits for :meth:`Solver.solve`.

    Neither limit affects correctness; they only bound how long a search
    may run before giving up.
    """

    max_depth: int = DEFAULT_MAX_DEPTH
    node_budget: int = DEFAULT_NODE_BUDGET

    def __post_init__(self) -> None:
        if not _is_int(self.max_depth) or self.max_depth < 0:
            raise ValueError(f"max_depth must be >= 0, got {self.max_depth!r}.")
        if not _is_int(self.node_budget) or self.node_budget < 1:
            raise ValueError(
                f"node_budget must be >= 1, got {self.node_budget!r}."
            )

    @classmethod
    def from_mapping(cls, data: dict[str, Any]) -> SolverConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ValueError(f"Unknown solver option(s): {', '.join(unknown)}.")
        return cls(**data)

    @classmethod
    def load(cls, path: Path | None = None) -> SolverConfig:
        """Read the ``[solver]`` table of a TOML file.

        Returns the defaults when *path* is ``None`` or the file has no
        ``[solver]`` table.
        """
        if path is None:
            return cls()
        with path.open("rb") as fh:
            data = tomllib.load(fh)
        section = data.get("solver", {})
        if not isinstance(section, dict):
            raise ValueError(f"[solver] in {path} must be a table.")
        return cls.from_mapping(section)

    def override(
        self, max_depth: int | None = None, node_budget: int | None = None
    ) -> SolverConfig:
        """Return a copy with any non-``None`` values replaced."""
        changes: dict[str, int] = {}
        if max_depth is not None:
            changes["max_depth"] = max_depth
        if node_budget is not None:
            changes["node_budget"] = node_budget
        return replace(self, **changes)


def _is_int(value: object) -> bool:
    # bool is an int subclass; TOML ``true`` must not pass as 1.
    return isinstance(value, int) and not isinstance(value, bool)
