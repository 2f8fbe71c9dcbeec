"""Grid geometry and the square/line drawing used for every frame."""

from __future__ import annotations

import pygame

from .config import CELL_SIZE, GRID_SIZE, PALETTE, WINDOW_SIZE
from .snake import Point, Snake


def convert_coords(x: int, y: int) -> tuple[int, int]:
    """Map a 1-indexed cell to the top-left pixel of its square."""
    return (x - 1) * CELL_SIZE, (y - 1) * CELL_SIZE


def cell_rect(point: Point) -> pygame.Rect:
    return pygame.Rect(convert_coords(*point), (CELL_SIZE, CELL_SIZE))


def draw_square(surface: pygame.Surface, point: Point, color: pygame.Color) -> None:
    pygame.draw.rect(surface, color, cell_rect(point))


def draw_grid(surface: pygame.Surface) -> None:
    """Draw the 1px cell borders over the whole board."""
    for i in range(0, GRID_SIZE * CELL_SIZE, CELL_SIZE):
        pygame.draw.line(surface, PALETTE["grid"], (i, 0), (i, WINDOW_SIZE), 1)
        pygame.draw.line(surface, PALETTE["grid"], (0, i), (WINDOW_SIZE, i), 1)


def draw_snake(surface: pygame.Surface, snake: Snake) -> None:
    # food first so the head paints over it on the tick it is eaten
    if snake.next_point is not None:
        draw_square(surface, snake.next_point, PALETTE["food"])
    for point in snake.tail:
        draw_square(surface, point, PALETTE["body"])
    draw_square(surface, snake.head, PALETTE["head"])
