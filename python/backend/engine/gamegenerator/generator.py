"""Generates water sort boards."""

from __future__ import annotations

import random

from backend.models.puzzle import CAPACITY, Puzzle

COLORS: tuple[str, ...] = (
    "lime",
    "cyan",
    "yellow",
    "red",
    "orange",
    "blue",
    "magenta",
)

# Two vials are always left for maneuvering room.
SPARE_VIALS = 2
MIN_VIALS = SPARE_VIALS + 1
MAX_VIALS = len(COLORS) + SPARE_VIALS


class GameGenerator:
    """Creates boards by shuffling full vials of color into the vials.

    No attempt is made to guarantee the result is solvable.
    """

    @staticmethod
    def solved(num_vials: int) -> Puzzle:
        """Return the goal-state board: one full vial per color, spares empty."""
        GameGenerator._check_size(num_vials)
        colors = COLORS[: num_vials - SPARE_VIALS]
        vials = [[c] * CAPACITY for c in colors]
        vials.extend([] for _ in range(SPARE_VIALS))
        return Puzzle.from_lists(vials)

    @staticmethod
    def deal(num_vials: int, layers: list[str]) -> Puzzle:
        """Deal *layers* into *num_vials* vials, popping from the end.

        Most vials receive 3 layers.  When the layers would not fit that
        way, the first few vials take a fourth.
        """
        pool = list(layers)
        total = len(pool)
        extra = total % 3
        vials: list[list[str]] = []
        for i in range(num_vials):
            vial: list[str] = []
            if i < extra and total > 3 * num_vials:
                vial.append(pool.pop())
            for _ in range(min(3, len(pool))):
                vial.append(pool.pop())
            vials.append(vial)
        return Puzzle.from_lists(vials)

    @staticmethod
    def generate(num_vials: int, rng: random.Random | None = None) -> Puzzle:
        """Return a random, unsolved board with *num_vials* vials."""
        GameGenerator._check_size(num_vials)
        rng = rng or random.Random()

        while True:
            colors = list(COLORS)
            rng.shuffle(colors)
            layers = [c for c in colors[: num_vials - SPARE_VIALS] for _ in range(CAPACITY)]
            rng.shuffle(layers)
            puzzle = GameGenerator.deal(num_vials, layers)
            if not puzzle.is_solved():
                return puzzle

    # -- helpers --------------------------------------------------------------

    @staticmethod
    def _check_size(num_vials: int) -> None:
        if not MIN_VIALS <= num_vials <= MAX_VIALS:
            raise ValueError(
                f"Expected {MIN_VIALS}-{MAX_VIALS} vials, got {num_vials}."
            )
