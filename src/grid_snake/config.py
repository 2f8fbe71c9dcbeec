"""Centralized configuration and palette definitions for Grid Snake."""

from __future__ import annotations

import os

import pygame

GRID_SIZE: int = 10
CELL_SIZE: int = 50  # 10 * 50 => 500px window
WINDOW_SIZE: int = GRID_SIZE * CELL_SIZE
WINDOW_TITLE: str = "Snake"

FPS: int = 60
TICK_INTERVAL: float = 0.25  # seconds between snake steps

FOOD_PLACEMENT_ATTEMPTS: int = 64
FOOD_POINTS: int = 10
FALLBACK_GLYPH: str = "@"

LOG_LEVEL: str = os.getenv("GRID_SNAKE_LOG_LEVEL", "INFO").upper()

DIRECTIONS: dict[str, tuple[int, int]] = {
    "UP": (0, -1),
    "DOWN": (0, 1),
    "LEFT": (-1, 0),
    "RIGHT": (1, 0),
}
OPPOSITE: dict[str, str] = {
    "UP": "DOWN",
    "DOWN": "UP",
    "LEFT": "RIGHT",
    "RIGHT": "LEFT",
}
# Polled in this order every frame; a later pressed key overrides an earlier one.
KEY_TO_DIRECTION = {
    pygame.K_LEFT: "LEFT",
    pygame.K_RIGHT: "RIGHT",
    pygame.K_UP: "UP",
    pygame.K_DOWN: "DOWN",
}

START_HEAD: tuple[int, int] = (3, 3)
START_TAIL: tuple[tuple[int, int], ...] = ((3, 4), (3, 5), (3, 6), (3, 7), (3, 8))
START_DIRECTION: str = "UP"

PALETTE = {
    "background": pygame.Color("aliceblue"),
    "grid": pygame.Color(0, 0, 0),
    "food": pygame.Color(0, 255, 0),
    "body": pygame.Color(0, 0, 255),
    "head": pygame.Color(255, 0, 0),
}
