"""Numbers drawn with one sprite per character.

Digits use the sprites ``"0"`` .. ``"9"``, the decimal point uses ``"dot"``.
"""

from __future__ import annotations

from typing import Dict

from camera import round_half_away
from render.draw_commands import Painter

CHAR_SPRITES: Dict[str, str] = {str(d): str(d) for d in range(10)}
CHAR_SPRITES["."] = "dot"

# Width of one character cell in sprite pixels
LETTER_WIDTH = 5


def char_sprite(ch: str) -> str:
    try:
        return CHAR_SPRITES[ch]
    except KeyError:
        raise ValueError(f"no sprite for character {ch!r}") from None


class SpriteText:
    def __init__(self, scale: float) -> None:
        self.scale = scale
        self.letter_w = round_half_away(LETTER_WIDTH * scale)

    def width(self, text: str) -> int:
        return len(text) * self.letter_w

    def draw(self, painter: Painter, text: str, x: int, y: int) -> int:
        """Draw `text` starting at screen (x, y); returns the x after it."""
        for ch in text:
            painter.draw_screen(char_sprite(ch), x, y, self.scale)
            x += self.letter_w
        return x
