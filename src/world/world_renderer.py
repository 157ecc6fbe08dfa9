"""Draws the static street scenery for the visible part of the world.

Layers, back to front: sky and stars, far skyscrapers, the front yard band,
parks and skyscrapers with their bushes and trash cans, the top fence, the
street, the bottom fence and the lamp posts. The lamp bases are a separate
pass (`draw_foreground`) so they can cover the vehicles.

Each horizontal strip starts at the grid tile containing the left edge of the
view and walks tile by tile, so a tile is always drawn at the same world x no
matter where the camera is.
"""

from __future__ import annotations

from dataclasses import dataclass

from camera import VisibleWindow, tile_start
from config import FRONT_YARD_COLOR, PARK_COLOR
from core.backend import rgb
from render.draw_commands import Painter
from render.sky_renderer import SkyRenderer
from world import patterns

BACKGROUND_SPACING = 15
BACKGROUND_MARGIN = 20
BACKGROUND_BASE_Y = 120
PARK_HEIGHT = 130
LAMP_GAP = 30
LAMP_OFFSET_X = -15
LAMP_TOP_Y = 26
LAMP_BOTTOM_DX = 16
LAMP_BOTTOM_Y = 7


@dataclass(frozen=True)
class StreetMetrics:
    """Sprite sizes the street layout is derived from."""

    street_w: int
    street_h: int
    fence_w: int
    fence_h: int
    skyscraper_w: int

    @classmethod
    def measure(cls, painter: Painter) -> "StreetMetrics":
        street_w, street_h = painter.size("street")
        fence_w, fence_h = painter.size("fence")
        skyscraper_w, _ = painter.size("skyscraper_0")
        return cls(street_w, street_h, fence_w, fence_h, skyscraper_w)

    @property
    def block_w(self) -> int:
        # Neighbouring skyscrapers overlap by one unit so no seam shows
        return self.skyscraper_w - 1

    @property
    def lamp_w(self) -> int:
        return self.street_w + LAMP_GAP

    @property
    def front_yard_h(self) -> int:
        return self.fence_h + 1


class WorldRenderer:
    def __init__(self) -> None:
        self.sky = SkyRenderer()
        self.front_yard = rgb(*FRONT_YARD_COLOR)
        self.park = rgb(*PARK_COLOR)

    def draw(self, painter: Painter, view: VisibleWindow) -> StreetMetrics:
        m = StreetMetrics.measure(painter)

        self.sky.draw(painter, view)
        self._draw_background_skyscrapers(painter, view, m)
        painter.fill_rect(view.left, m.street_h, view.width, m.front_yard_h, self.front_yard)
        self._draw_parks(painter, view, m)
        self._draw_skyscrapers(painter, view, m)
        self._draw_top_fence(painter, view, m)

        _, x = tile_start(view.left, m.street_w)
        while x < view.right:
            painter.draw("street", x, 0)
            x += m.street_w

        _, x = tile_start(view.left, m.fence_w)
        while x < view.right:
            painter.draw("fence", x, 0)
            x += m.fence_w

        for x in self._lamp_positions(view, m):
            painter.draw("lamp_top", x, LAMP_TOP_Y)
        return m

    def draw_foreground(self, painter: Painter, view: VisibleWindow, m: StreetMetrics) -> None:
        for x in self._lamp_positions(view, m):
            painter.draw("lamp_bottom", x + LAMP_BOTTOM_DX, LAMP_BOTTOM_Y)

    # ------------------------------------------------------------------
    def _draw_background_skyscrapers(self, painter, view, m) -> None:
        for x in range(view.left - BACKGROUND_MARGIN, view.right + BACKGROUND_MARGIN):
            if x % BACKGROUND_SPACING == 0:
                s = patterns.background_skyscraper_variant(x)
                painter.draw(s.name, x + s.dx, m.street_h + BACKGROUND_BASE_Y + s.dy, s.tint)

    def _draw_parks(self, painter, view, m) -> None:
        i, x = tile_start(view.left, m.block_w)
        while x < view.right + m.block_w:
            if patterns.is_gap(i):
                painter.fill_rect(x, m.street_h, m.block_w, PARK_HEIGHT, self.park)
                for item in patterns.GAP_GRASS + patterns.gap_foliage(i):
                    painter.draw(item.name, x + item.dx, m.street_h + item.dy)
            i += 1
            x += m.block_w

    def _draw_skyscrapers(self, painter, view, m) -> None:
        i, x = tile_start(view.left, m.block_w)
        while x < view.right + m.block_w:
            if not patterns.is_gap(i):
                painter.draw(
                    patterns.skyscraper_variant(i),
                    x,
                    m.street_h,
                    patterns.skyscraper_tint(i),
                )
                for item in patterns.ground_decoration_set(i):
                    painter.draw(item.name, x + item.dx, m.street_h + item.dy)
            i += 1
            x += m.block_w

    def _draw_top_fence(self, painter, view, m) -> None:
        i, x = tile_start(view.left, m.fence_w)
        while x < view.right:
            painter.draw(patterns.fence_door_variant(i), x, m.street_h)
            i += 1
            x += m.fence_w

    @staticmethod
    def _lamp_positions(view: VisibleWindow, m: StreetMetrics):
        _, x = tile_start(view.left, m.lamp_w)
        x += LAMP_OFFSET_X
        while x < view.right:
            yield x
            x += m.lamp_w
