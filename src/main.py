"""Entry point for the Grid Snake game."""

from __future__ import annotations

import logging
import sys

from grid_snake.config import LOG_LEVEL
from grid_snake.game import GridSnake, WindowCreationError

logger = logging.getLogger(__name__)


def main() -> None:
    logging.basicConfig(
        level=LOG_LEVEL,
        format="%(asctime)s [%(levelname)s] %(message)s",
    )
    try:
        game = GridSnake()
    except WindowCreationError as exc:
        logger.critical("%s", exc)
        sys.exit(1)
    game.start()


if __name__ == "__main__":
    main()
