from __future__ import annotations

from typing import TYPE_CHECKING

from core.backend import FrameInput
from render.draw_commands import Painter

if TYPE_CHECKING:  # pragma: no cover
    from core.game import Game


class Scene:
    """One screen of the game (the menu, the street).

    Scenes share the game's simulation context instead of owning their own
    camera, so the menu can hand the camera over to the intro cinematic.
    """

    def __init__(self, game: "Game") -> None:
        self.game = game

    @property
    def camera(self):
        return self.game.camera

    def update(self, frame: FrameInput, painter: Painter) -> None:
        pass
