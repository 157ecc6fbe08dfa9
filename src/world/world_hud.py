"""Race HUD: the "press left/right" hint over the bike and the miles counter.

The hint shows for the first ten seconds of the race, flipping between the
two arrow sprites and fading out over its last 100 frames. The miles counter
is centred at the top of the screen.
"""

from __future__ import annotations

from config import ARROW_HINT_SWAP, ARROW_HINT_FADE
from core.backend import Color, WHITE
from render.draw_commands import Painter
from ui.sprite_text import SpriteText
from camera import round_half_away
from world.race import RaceProgress
from world.vehicle import Vehicle

HINT_Y = 70
MILES_TOP = 5


def arrow_hint_sprite(timer: int) -> str:
    return "press_left" if (timer // ARROW_HINT_SWAP) % 2 else "press_right"


def arrow_hint_tint(timer: int) -> Color:
    if timer < ARROW_HINT_FADE:
        return (1.0, 1.0, 1.0, timer / ARROW_HINT_FADE)
    return WHITE


def format_miles(miles: float) -> str:
    return f"{miles:.3f}"


class WorldHUD:
    def __init__(self, progress: RaceProgress) -> None:
        self.progress = progress

    def tick(self) -> None:
        self.progress.arrow_hint_timer = max(0, self.progress.arrow_hint_timer - 1)

    def draw_hint(self, painter: Painter, bike: Vehicle, bike_w: int) -> None:
        timer = self.progress.arrow_hint_timer
        if timer <= 0:
            return
        sprite = arrow_hint_sprite(timer)
        keys_w, _ = painter.size("press_left")
        painter.draw(sprite, bike.x + (bike_w - keys_w) / 2, HINT_Y, arrow_hint_tint(timer))

    def draw_miles(self, painter: Painter) -> None:
        cam = painter.camera
        miles_w, _ = painter.size("miles")
        text = format_miles(self.progress.miles)
        label = SpriteText(cam.scale)

        text_w = label.width(text) + round_half_away(cam.scale * miles_w)
        x = int((cam.screen_width - text_w) / 2)
        y = round_half_away(MILES_TOP * cam.scale)
        x = label.draw(painter, text, x, y)
        x += label.letter_w
        painter.draw_screen("miles", x, y, cam.scale)
