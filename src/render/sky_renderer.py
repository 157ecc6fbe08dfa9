"""Night sky: a two-colour gradient and a scattered star field.

The sky is the first thing drawn each frame; everything else paints over it.
"""

from __future__ import annotations

from camera import VisibleWindow
from config import SKY_TOP, SKY_BOTTOM, STAR_COLOR
from core.backend import Gradient, rgb
from render.draw_commands import Painter
from world.patterns import star_vertical_jitter

# World height where the solid sky turns into the gradient
HORIZON_Y = 300
STAR_BASE_Y = 250
STAR_SPACING = 3


class SkyRenderer:
    def __init__(self) -> None:
        self.top = rgb(*SKY_TOP)
        self.bottom = rgb(*SKY_BOTTOM)
        self.star = rgb(*STAR_COLOR)

    def draw(self, painter: Painter, view: VisibleWindow) -> None:
        cam = painter.camera
        w, h = cam.screen_width, cam.screen_height

        _, horizon = cam.world_to_screen(0, HORIZON_Y)
        painter.fill_screen(0, horizon, w, h, Gradient.vertical(self.top, self.bottom))
        painter.fill_screen(0, 0, w, horizon, self.top)

        for x in range(view.left, view.right):
            if x % STAR_SPACING == 0:
                sx, sy = cam.world_to_screen(x, STAR_BASE_Y + star_vertical_jitter(x))
                painter.fill_screen(sx, sy, 1, 1, self.star)
