"""2D side-view camera: world units to screen pixels.

World Y grows upward from the street, screen Y grows downward from the top of
the window. The camera offset pans the world (offset_x <= 0 scrolls right,
offset_y >= 0 lifts the view above the street) and `scale` is the number of
pixels per world unit.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from config import WIDTH, HEIGHT, START_SCALE


def round_half_away(x: float) -> int:
    """Round to the nearest int, halves away from zero (pixel rounding)."""
    if x < 0:
        return int(x - 0.5)
    return int(x + 0.5)


def tile_start(left: float, tile_width: int) -> Tuple[int, int]:
    """Return (first tile index, its world x) for a strip covering `left`.

    Tiles sit on the fixed grid k * tile_width, so panning by any amount never
    shifts where tiles are drawn.
    """
    index = math.floor(left / tile_width)
    return index, index * tile_width


@dataclass(frozen=True)
class VisibleWindow:
    """World-unit bounds of what the screen shows, padded to whole units."""

    left: int
    width: int
    right: int
    bottom: int
    height: int
    top: int


class Camera:
    def __init__(
        self,
        offset_x: float = 0.0,
        offset_y: float = 0.0,
        scale: float = START_SCALE,
        width: int = WIDTH,
        height: int = HEIGHT,
    ) -> None:
        if scale <= 0:
            raise ValueError("camera scale must be positive")
        self.offset_x = offset_x
        self.offset_y = offset_y
        self.scale = scale
        self.screen_width = width
        self.screen_height = height
        # Overlay opacity for fades. Values past 0 or 1 hold the screen
        # clear or black until the next phase.
        self.fade = 0.0
        # Intro cinematic state
        self.speed_y = 0.0
        self.zoom_timer = 0

    def resize(self, width: int, height: int) -> None:
        self.screen_width = width
        self.screen_height = height

    def clamp(self) -> None:
        """Keep the view from scrolling left of the origin or below the street."""
        self.offset_x = min(0.0, self.offset_x)
        self.offset_y = max(0.0, self.offset_y)

    @property
    def fade_alpha(self) -> float:
        return max(0.0, min(1.0, self.fade))

    def world_to_screen(self, x: float, y: float) -> Tuple[int, int]:
        sx = round_half_away((self.offset_x + x) * self.scale)
        sy = round_half_away(
            self.offset_y * self.scale + self.screen_height - self.scale * y
        )
        return sx, sy

    def world_rect_to_screen(
        self, x: float, y: float, w: float, h: float
    ) -> Tuple[int, int, int, int]:
        """Screen rectangle for a world rectangle whose bottom edge is at `y`."""
        s = self.scale
        return (
            round_half_away((self.offset_x + x) * s),
            round_half_away(self.offset_y * s + self.screen_height - s * (y + h)),
            round_half_away(w * s),
            round_half_away(h * s),
        )

    def sprite_screen_position(
        self, x: float, y: float, image_height: int
    ) -> Tuple[float, float]:
        """Top-left pixel of a sprite whose bottom-left corner is at world (x, y)."""
        s = self.scale
        return (
            (self.offset_x + x) * s,
            self.offset_y * s + self.screen_height - s * (y + image_height),
        )

    def visible_window(self) -> VisibleWindow:
        left = max(0, round_half_away(-self.offset_x - 0.51))
        width = round_half_away(self.screen_width / self.scale + 0.51)
        bottom = max(0, round_half_away(self.offset_y - 0.51))
        height = round_half_away(self.screen_height / self.scale + 0.51)
        return VisibleWindow(
            left=left,
            width=width,
            right=left + width - 1,
            bottom=bottom,
            height=height,
            top=bottom + height - 1,
        )
