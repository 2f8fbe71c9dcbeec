"""Snake state machine: movement, food placement, eating and self-bites."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field

from .config import (
    DIRECTIONS,
    FOOD_PLACEMENT_ATTEMPTS,
    GRID_SIZE,
    OPPOSITE,
    START_DIRECTION,
    START_HEAD,
    START_TAIL,
)

logger = logging.getLogger(__name__)

Point = tuple[int, int]


def _wrap(value: int, size: int) -> int:
    if value > size:
        return 1
    if value < 1:
        return size
    return value


@dataclass(slots=True)
class Snake:
    """Head, body and pending moves of the snake on a toroidal grid.

    ``tail`` runs from the neck to the tail end. ``next_direction`` is the
    queued turn; it only becomes ``direction`` on the next :meth:`move`.
    """

    head: Point
    tail: list[Point]
    direction: str = START_DIRECTION
    next_direction: str = START_DIRECTION
    growth: int = 0
    next_point: Point | None = None
    grid_size: int = GRID_SIZE
    rng: random.Random = field(default_factory=random.Random, repr=False)

    @classmethod
    def initial(cls, rng: random.Random | None = None) -> Snake:
        """Return the snake in its starting position, heading up."""
        return cls(
            head=START_HEAD,
            tail=list(START_TAIL),
            direction=START_DIRECTION,
            next_direction=START_DIRECTION,
            rng=rng or random.Random(),
        )

    # --- Queries -------------------------------------------------------

    def occupies(self, point: Point) -> bool:
        return point == self.head or point in self.tail

    def segments(self) -> list[Point]:
        """Head first, then the tail from neck to end."""
        return [self.head, *self.tail]

    # --- Steering ------------------------------------------------------

    def steer(self, direction: str) -> bool:
        """Queue a turn unless it reverses the current heading."""
        if direction not in DIRECTIONS:
            raise ValueError(f"unknown direction: {direction!r}")
        if direction == OPPOSITE[self.direction]:
            return False
        self.next_direction = direction
        return True

    # --- Logic step ----------------------------------------------------

    def move(self) -> None:
        """Advance the head by exactly one cell, dragging or growing the tail."""
        if self.growth > 0:
            self.growth -= 1
            self.tail = [self.head, *self.tail]
        else:
            self.tail = [self.head, *self.tail][: len(self.tail)]

        self.direction = self.next_direction
        dx, dy = DIRECTIONS[self.direction]
        self.head = (
            _wrap(self.head[0] + dx, self.grid_size),
            _wrap(self.head[1] + dy, self.grid_size),
        )

    def generate_next_point(self) -> Point | None:
        """Place food on a random cell the snake does not cover.

        Both coordinates are drawn from ``[1, grid_size - 1]``. After
        ``FOOD_PLACEMENT_ATTEMPTS`` rejected samples the remaining free cells
        are listed and one is picked directly; on a board with no free cell
        the food point is cleared.
        """
        upper = self.grid_size - 1
        if upper < 1:
            return self._clear_food()
        for _ in range(FOOD_PLACEMENT_ATTEMPTS):
            candidate = (self.rng.randint(1, upper), self.rng.randint(1, upper))
            if not self.occupies(candidate):
                self.next_point = candidate
                return candidate

        free = [
            (x, y)
            for x in range(1, upper + 1)
            for y in range(1, upper + 1)
            if not self.occupies((x, y))
        ]
        if not free:
            return self._clear_food()
        self.next_point = self.rng.choice(free)
        return self.next_point

    def _clear_food(self) -> None:
        if self.next_point is not None:
            logger.warning("No free cell left for food; snake covers the board")
        self.next_point = None
        return None

    def check_point(self) -> bool:
        """Grow by one and relocate the food when the head is on it."""
        if self.next_point is None or self.head != self.next_point:
            return False
        self.growth += 1
        self.generate_next_point()
        return True

    def check_collisions(self) -> int:
        """Cut the tail off at the first segment the head bit into.

        Returns how many segments were lost (0 when there was no bite).
        """
        for idx, point in enumerate(self.tail):
            if point == self.head:
                lost = len(self.tail) - idx
                self.tail = self.tail[:idx]
                return lost
        return 0

    def tick(self) -> tuple[bool, int]:
        """Run one simulation step: move, eat, then resolve bites.

        A board left without food is retried every tick, so food comes back
        as soon as a bite or a move frees a cell.
        """
        self.move()
        ate = self.check_point()
        lost = self.check_collisions()
        if self.next_point is None:
            self.generate_next_point()
        return ate, lost
