"""Title menu: a single start button over a fading black screen.

Clicking the button (or pressing Space, Enter or Escape) fades the menu out
and starts the intro cinematic.
"""

from __future__ import annotations

from config import MENU_FADE_STEP
from core.backend import FrameInput, WHITE, gray
from core.scene import Scene
from core.states import GameState
from render.draw_commands import Painter
from world.world_shade_overlay import WorldShadeOverlay

# Pixels between the mouse hotspot and the cursor sprite's left edge
CURSOR_HOTSPOT_X = 4
IDLE_TINT = gray(0.5)


class MenuScene(Scene):
    def __init__(self, game) -> None:
        super().__init__(game)
        self.overlay = WorldShadeOverlay()

    def update(self, frame: FrameInput, painter: Painter) -> None:
        game = self.game
        cam = self.camera
        must_start = False

        mouse_x, mouse_y = frame.mouse_pos
        scale = max(1, cam.screen_height // 100)
        start_w, start_h = painter.size("start_button")
        start_w *= scale
        start_h *= scale
        start_x = (cam.screen_width - start_w) // 2
        start_y = (cam.screen_height - start_h) // 2

        tint = IDLE_TINT
        hovered = (
            start_x <= mouse_x < start_x + start_w
            and start_y <= mouse_y < start_y + start_h
        )
        if hovered:
            tint = WHITE
            if frame.clicks:
                must_start = True
        painter.draw_screen("start_button", start_x, start_y, scale, tint)
        painter.draw_screen("cursor", mouse_x - CURSOR_HOTSPOT_X, mouse_y, scale)

        if frame.start:
            must_start = True

        if must_start and game.state is not GameState.FADING_OUT_MENU:
            game.set_state(GameState.FADING_OUT_MENU)

        if game.state is GameState.FADING_IN_MENU:
            cam.fade = max(0.0, cam.fade - MENU_FADE_STEP)
        elif game.state is GameState.FADING_OUT_MENU:
            cam.fade += MENU_FADE_STEP
            if cam.fade >= 1:
                game.set_state(GameState.FADING_IN_GAME)
                game.controller.reset_to_intro()

        self.overlay.draw(painter)
