"""Puzzle model for the water sort game."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import NamedTuple

from backend.models.errors import InvalidMove, PuzzleError

CAPACITY = 4

LAYER_SEP = ","
VIAL_SEP = "|"


class Move(NamedTuple):
    """A pour from vial ``source`` into vial ``dest`` (0-based indices)."""

    source: int
    dest: int

    def __str__(self) -> str:
        return f"{self.source} -> {self.dest}"


Vial = tuple[str, ...]


@dataclass(frozen=True)
class Puzzle:
    """Represents the vials of a water sort board.

    Each vial is a tuple of color tokens, bottom to top.  Instances are
    immutable; every move returns a new ``Puzzle``.
    """

    vials: tuple[Vial, ...]

    def __post_init__(self) -> None:
        # Copy into tuples so the puzzle never shares the caller's lists.
        object.__setattr__(self, "vials", tuple(tuple(v) for v in self.vials))
        if not self.vials:
            raise PuzzleError("A puzzle needs at least one vial.")
        for i, vial in enumerate(self.vials):
            if len(vial) > CAPACITY:
                raise PuzzleError(
                    f"Vial {i} holds {len(vial)} layers; capacity is {CAPACITY}."
                )
            for color in vial:
                _check_color(color, i)

    # -- construction helpers -------------------------------------------------

    @classmethod
    def from_lists(cls, vials: Iterable[Iterable[str]]) -> Puzzle:
        """Create a puzzle from nested lists of colors.

        Example::

            Puzzle.from_lists([["red", "blue"], ["blue", "red"], []])
        """
        return cls(vials=tuple(tuple(v) for v in vials))

    @classmethod
    def from_key(cls, key: str) -> Puzzle:
        """Decode a canonical key produced by :meth:`key`."""
        if not isinstance(key, str):
            raise PuzzleError(f"Expected a string key, got {type(key).__name__}.")
        vials: list[Vial] = []
        for part in key.split(VIAL_SEP):
            vials.append(tuple(part.split(LAYER_SEP)) if part else ())
        return cls(vials=tuple(vials))

    # -- queries --------------------------------------------------------------

    def __len__(self) -> int:
        return len(self.vials)

    def key(self) -> str:
        """Return the canonical key: layers joined by ``,``, vials by ``|``."""
        return VIAL_SEP.join(LAYER_SEP.join(v) for v in self.vials)

    def layer_counts(self) -> Counter[str]:
        return Counter(color for vial in self.vials for color in vial)

    def is_solved(self) -> bool:
        """Check that every vial is empty or full of a single color."""
        for vial in self.vials:
            if not vial:
                continue
            if len(vial) != CAPACITY:
                return False
            if any(color != vial[0] for color in vial):
                return False
        return True

    def is_legal_move(self, source: int, dest: int) -> bool:
        """Check whether a pour from *source* into *dest* is allowed.

        Out-of-range or equal indices are simply illegal.
        """
        n = len(self.vials)
        if source == dest or not (0 <= source < n and 0 <= dest < n):
            return False
        src = self.vials[source]
        dst = self.vials[dest]
        if not src or len(dst) >= CAPACITY:
            return False
        return not dst or dst[-1] == src[-1]

    def pour_size(self, source: int, dest: int) -> int:
        """Return how many layers a pour would move (0 if illegal)."""
        if not self.is_legal_move(source, dest):
            return 0
        src = self.vials[source]
        color = src[-1]
        run = 0
        for layer in reversed(src):
            if layer != color:
                break
            run += 1
        return min(run, CAPACITY - len(self.vials[dest]))

    def legal_moves(self) -> Iterator[Move]:
        """Yield every legal move, source ascending then dest ascending."""
        n = len(self.vials)
        for source in range(n):
            for dest in range(n):
                if self.is_legal_move(source, dest):
                    yield Move(source, dest)

    # -- transforms -----------------------------------------------------------

    def apply_move(self, source: int, dest: int) -> Puzzle:
        """Pour the top run of *source* into *dest* and return the new puzzle.

        The whole contiguous same-color run at the top of the source moves,
        clipped by the free space in the destination.
        """
        count = self.pour_size(source, dest)
        if count == 0:
            raise InvalidMove(source, dest)
        vials = list(self.vials)
        src = vials[source]
        vials[source] = src[:-count]
        vials[dest] = vials[dest] + src[-count:]
        return Puzzle(vials=tuple(vials))


def _check_color(color: object, vial: int) -> None:
    if not isinstance(color, str) or not color:
        raise PuzzleError(f"Vial {vial} has an invalid color {color!r}.")
    if LAYER_SEP in color or VIAL_SEP in color:
        raise PuzzleError(
            f"Color {color!r} in vial {vial} contains a reserved character "
            f"({LAYER_SEP!r} or {VIAL_SEP!r})."
        )
