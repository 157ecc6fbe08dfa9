"""Full-screen black overlay used for every fade in the game.

The camera's `fade` value may run past 0 or 1 to hold the screen fully black
or fully clear for a while; only the drawn opacity is clamped.
"""

from __future__ import annotations

from render.draw_commands import Painter


class WorldShadeOverlay:
    def __init__(self, color: tuple[float, float, float] = (0.0, 0.0, 0.0)):
        self.color = color  # RGB in 0..1

    def draw(self, painter: Painter) -> None:
        cam = painter.camera
        r, g, b = self.color
        painter.fill_screen(0, 0, cam.screen_width, cam.screen_height, (r, g, b, cam.fade_alpha))
