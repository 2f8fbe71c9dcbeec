"""Food glyph selection for terminals and locales that can show emoji."""

from __future__ import annotations

import os
import random
from dataclasses import dataclass
from typing import Mapping

from .config import FALLBACK_GLYPH, FOOD_POINTS

FOOD_EMOJIS: tuple[str, ...] = (
    "\U0001F352",  # cherries
    "\U0001F34D",  # pineapple
    "\U0001F351",  # peach
    "\U0001F347",  # grapes
    "\U0001F34F",  # green apple
    "\U0001F34C",  # banana
    "\U0001F36B",  # chocolate bar
    "\U0001F36D",  # lollipop
    "\U0001F355",  # pizza
    "\U0001F369",  # doughnut
    "\U0001F357",  # poultry leg
    "\U0001F356",  # meat on bone
    "\U0001F36C",  # candy
    "\U0001F364",  # fried shrimp
    "\U0001F36A",  # cookie
)


@dataclass(slots=True)
class Food:
    """A food pellet with its glyph and point value."""

    emoji: str
    x: int
    y: int
    points: int = FOOD_POINTS


def has_unicode_support(environ: Mapping[str, str] | None = None) -> bool:
    env = os.environ if environ is None else environ
    return "UTF-8" in env.get("LANG", "")


def random_food_emoji(rng: random.Random | None = None) -> str:
    return (rng or random).choice(FOOD_EMOJIS)


def get_food_emoji(
    environ: Mapping[str, str] | None = None, rng: random.Random | None = None
) -> str:
    """Return a random food emoji, or ``@`` when the locale is not UTF-8."""
    if has_unicode_support(environ):
        return random_food_emoji(rng)
    return FALLBACK_GLYPH


def new_food(
    point: tuple[int, int],
    environ: Mapping[str, str] | None = None,
    rng: random.Random | None = None,
) -> Food:
    return Food(emoji=get_food_emoji(environ, rng), x=point[0], y=point[1])
