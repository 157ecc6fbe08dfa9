"""Deterministic street patterns keyed by tile index.

The street is endless in both directions and must look the same every time a
tile scrolls back into view, without remembering anything per tile. Every
function here is therefore a pure function of the tile index: either a lookup
into a short repeating table, or a draw from a numpy generator freshly seeded
with the index. No generator is ever shared between calls.

Tables are indexed with Python's modulo, which is non-negative for a positive
period, so all functions are defined for negative indices too.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, Tuple

import numpy as np

from core.backend import Color, gray

# Park slots among the skyscrapers ('x' marks a gap)
GAP_LOOP = "    x      x           x                 x      x         x        "
GAP_DECORATION_LOOP = (0, 1, 2, 0, 2, 1, 0, 1, 0, 2, 0, 1)
SKYSCRAPER_LOOP = (0, 1, 2, 1, 2, 0, 2, 1, 0, 1, 2, 0, 1)
SKYSCRAPER_BRIGHTNESS_LOOP = (45, 57, 54, 63, 48, 60, 51)
FENCE_DOOR_LOOP = (0, 2, 0, 1, 0, 2, 1, 2, 0, 2, 1)
GROUND_DECORATION_LOOP = (4, 1, 0, 2, 4, 3, 1, 0, 2, 3, 2, 1, 2, 3, 1, 4, 2, 3)
BACKGROUND_SKYSCRAPER_LOOP = (2, 1, 0, 2, 0, 1, 0, 2, 0, 2, 1, 0, 2, 1, 2, 0)

STAR_JITTER_RANGE = 1200


class DecorationItem(NamedTuple):
    name: str
    dx: int
    dy: int


@dataclass(frozen=True)
class BackgroundSkyscraper:
    name: str
    dx: int
    dy: int
    tint: Color


# Bushes and trash cans in front of a skyscraper, offsets from its left edge
GROUND_DECORATIONS: Tuple[Tuple[DecorationItem, ...], ...] = (
    (
        DecorationItem("trashcan", -4, 5),
        DecorationItem("trashcan", -10, 4),
        DecorationItem("trashcan", 5, 3),
    ),
    (
        DecorationItem("bush_0", -10, 4),
        DecorationItem("bush_1", 5, 3),
    ),
    (
        DecorationItem("bush_1", 10, 4),
        DecorationItem("trashcan", -8, 4),
        DecorationItem("trashcan", 5, 2),
    ),
    (
        DecorationItem("bush_1", 10, 4),
        DecorationItem("bush_1", -9, 5),
        DecorationItem("bush_0", 2, 3),
    ),
    (
        DecorationItem("trashcan", 8, 4),
        DecorationItem("bush_0", -5, 3),
    ),
)

# Trees in a park, one layout per gap_decoration_set() value
GAP_FOLIAGE: Tuple[Tuple[DecorationItem, ...], ...] = (
    (
        DecorationItem("tree_0", -17, 80),
        DecorationItem("tree_1", 31, 52),
        DecorationItem("tree_0", -6, 43),
    ),
    (
        DecorationItem("tree_0", 15, 80),
        DecorationItem("tree_1", -15, 59),
        DecorationItem("tree_0", 40, 43),
        DecorationItem("tree_1", 12, 13),
    ),
    (
        DecorationItem("tree_1", 3, 62),
        DecorationItem("tree_0", 20, 26),
    ),
)

# Every park gets the same grass tufts
GAP_GRASS: Tuple[DecorationItem, ...] = tuple(
    DecorationItem("grass", dx, dy)
    for dx, dy in ((10, 19), (30, 40), (20, 53), (45, 61), (5, 74), (37, 87), (30, 110))
)


def _loop(table, i: int):
    return table[i % len(table)]


def is_gap(i: int) -> bool:
    return _loop(GAP_LOOP, i) == "x"


def gap_decoration_set(i: int) -> int:
    return _loop(GAP_DECORATION_LOOP, i)


def gap_foliage(i: int) -> Tuple[DecorationItem, ...]:
    return GAP_FOLIAGE[gap_decoration_set(i)]


def skyscraper_variant(i: int) -> str:
    return f"skyscraper_{_loop(SKYSCRAPER_LOOP, i)}"


def skyscraper_tint(i: int) -> Color:
    return gray(_loop(SKYSCRAPER_BRIGHTNESS_LOOP, i) / 100.0)


def fence_door_variant(i: int) -> str:
    return f"fence_door_{_loop(FENCE_DOOR_LOOP, i)}"


def ground_decoration_set(i: int) -> Tuple[DecorationItem, ...]:
    return GROUND_DECORATIONS[_loop(GROUND_DECORATION_LOOP, i)]


def background_skyscraper_variant(i: int) -> BackgroundSkyscraper:
    """Sprite, jitter and shade of the far skyscraper at tile `i`.

    The draws come from a generator seeded with |i| and are always taken in
    the same order (dx, dy, tint) so a tile looks the same on every visit.
    """
    i = abs(i)
    rng = np.random.default_rng(i)
    dx = -5 + int(rng.integers(0, 10))
    dy = -int(rng.integers(1, 26))
    a = 0.4 + 0.1 * float(rng.random())
    return BackgroundSkyscraper(
        name=f"background_skyscraper_{_loop(BACKGROUND_SKYSCRAPER_LOOP, i)}",
        dx=dx,
        dy=dy,
        tint=gray(a),
    )


def star_vertical_jitter(i: int) -> int:
    return int(np.random.default_rng(abs(i)).integers(0, STAR_JITTER_RANGE))
