import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame  # noqa: E402

from grid_snake.game import GridSnake  # noqa: E402


@pytest.fixture
def game():
    game = GridSnake(rng=random.Random(7))
    yield game
    pygame.quit()
