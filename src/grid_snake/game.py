"""Grid Snake window loop: poll keys, tick at a fixed interval, redraw."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Sequence

import pygame

from .config import (
    FPS,
    KEY_TO_DIRECTION,
    PALETTE,
    TICK_INTERVAL,
    WINDOW_SIZE,
    WINDOW_TITLE,
)
from .food import Food, new_food
from .grid import draw_grid, draw_snake
from .snake import Snake

logger = logging.getLogger(__name__)


class WindowCreationError(RuntimeError):
    """Raised when pygame cannot open the game window."""


@dataclass(slots=True)
class TickTimer:
    """Accumulates frame time and fires once the interval is exceeded."""

    interval: float = TICK_INTERVAL
    elapsed: float = 0.0

    def advance(self, dt: float) -> bool:
        self.elapsed += dt
        if self.elapsed > self.interval:
            self.elapsed = 0.0
            return True
        return False


class GridSnake:
    """Owns the window, the snake, and the tick timer for one game."""

    def __init__(self, rng: random.Random | None = None) -> None:
        pygame.init()
        try:
            self.window = pygame.display.set_mode((WINDOW_SIZE, WINDOW_SIZE))
        except pygame.error as exc:
            raise WindowCreationError(f"could not open game window: {exc}") from exc
        pygame.display.set_caption(WINDOW_TITLE)

        self.rng = rng or random.Random()
        self.snake = Snake.initial(self.rng)
        self.timer = TickTimer()
        self.food: Food | None = None
        self._place_food()

    def _place_food(self) -> None:
        point = self.snake.generate_next_point()
        self._remember_food(point)

    def _remember_food(self, point: tuple[int, int] | None) -> None:
        # The glyph is kept alongside the pellet but never rendered.
        if point is None:
            self.food = None
            return
        self.food = new_food(point, rng=self.rng)
        logger.debug("Food at %s (%s)", point, self.food.emoji)

    def _food_point(self) -> tuple[int, int] | None:
        if self.food is None:
            return None
        return self.food.x, self.food.y

    # --- Input ---------------------------------------------------------

    def handle_events(self) -> bool:
        """Drain the event queue; return False once the window should close."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                return False
            if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                return False
        return True

    def read_keys(self, pressed: Sequence[bool]) -> None:
        """Steer from held arrow keys; a later key in the map wins."""
        for key, direction in KEY_TO_DIRECTION.items():
            if pressed[key]:
                self.snake.steer(direction)

    # --- Logic step ----------------------------------------------------

    def step(self) -> None:
        """Advance the snake by exactly one tick."""
        ate, lost = self.snake.tick()
        if ate:
            logger.info(
                "Food eaten at %s, growth %d", self.snake.head, self.snake.growth
            )
        if self._food_point() != self.snake.next_point:
            self._remember_food(self.snake.next_point)
        if lost:
            logger.info(
                "Snake bit itself at %s, lost %d segments", self.snake.head, lost
            )
        logger.debug(
            "Tick: head=%s direction=%s length=%d",
            self.snake.head,
            self.snake.direction,
            len(self.snake.tail) + 1,
        )

    # --- Draw ----------------------------------------------------------

    def draw(self) -> None:
        """Render background, food, snake, then the grid lines on top."""
        self.window.fill(PALETTE["background"])
        draw_snake(self.window, self.snake)
        draw_grid(self.window)

    def run_frame(self, dt: float, pressed: Sequence[bool]) -> bool:
        """Steer, maybe tick, and redraw. Returns whether a tick happened."""
        self.read_keys(pressed)
        ticked = self.timer.advance(dt)
        if ticked:
            self.step()
        self.draw()
        return ticked

    # --- Main loop -----------------------------------------------------

    def start(self) -> None:
        """Run until the window is closed."""
        clock = pygame.time.Clock()
        logger.info("Game started; food at %s", self.snake.next_point)

        while self.handle_events():
            dt = clock.tick(FPS) / 1000.0
            self.run_frame(dt, pygame.key.get_pressed())
            pygame.display.update()

        logger.info("Window closed; final length %d", len(self.snake.tail) + 1)
        pygame.quit()
