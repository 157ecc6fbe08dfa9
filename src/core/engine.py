"""Core engine loop & orchestration.

Separates concerns:
- Engine: sets up the window and GL state, collects input, runs the loop.
- Game: the simulation; turns one frame of input into draw commands.
- GLRenderer: replays those commands with OpenGL.

Asset errors are fatal: the engine reports the offending sprite and exits.
"""

from __future__ import annotations

import sys

import pygame

from config import *
from core.backend import FrameInput
from core.errors import AssetLoadFailure, InvalidDrawArgument
from core.game import Game
from core.renderer import GLRenderer, open_window
from render.draw_commands import submit
from textures.resoucepath import SPRITES_PATH
from textures.texture_manager import TextureManager


# ---------------------------------------------------------------------------
# Input
# ---------------------------------------------------------------------------
def collect_input(events) -> tuple[FrameInput, bool]:
    """Fold a frame's pygame events into a FrameInput. Also reports QUIT."""
    keys = set()
    clicks = []
    text = []
    quit_requested = False
    for event in events:
        if event.type == pygame.QUIT:
            quit_requested = True
        elif event.type == pygame.KEYDOWN:
            keys.add(event.key)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            clicks.append(event.pos)
        elif event.type == pygame.TEXTINPUT:
            text.append(event.text)
    frame = FrameInput(
        keys_pressed=frozenset(keys),
        mouse_pos=pygame.mouse.get_pos(),
        clicks=tuple(clicks),
        text="".join(text),
    )
    return frame, quit_requested


# ---------------------------------------------------------------------------
# Engine
# ---------------------------------------------------------------------------
class Engine:
    def __init__(
        self,
        width: int = WIDTH,
        height: int = HEIGHT,
        fullscreen: bool = FULLSCREEN,
        fps: int = FPS,
        assets_path: str = SPRITES_PATH,
    ):
        pygame.init()
        pygame.display.set_caption(TITLE)
        open_window((width, height))
        self.clock = pygame.time.Clock()
        self.fps = fps

        self.textures = TextureManager(base_path=assets_path)
        self.renderer = GLRenderer(self.textures, (width, height))
        self.game = Game(fullscreen=fullscreen)
        print(f"[Engine] {width}x{height}, sprites from {assets_path}")

    # ------------------------------------------------------------------
    def step(self) -> bool:
        """Run one frame. Returns False once the window should close."""
        frame, quit_requested = collect_input(pygame.event.get())
        if quit_requested:
            return False

        self.textures.poll()
        commands = self.game.update(frame, self.renderer)

        self.renderer.begin_frame()
        submit(commands, self.renderer)
        pygame.display.flip()
        return not self.renderer.close_requested

    # ------------------------------------------------------------------
    def run(self) -> int:  # pragma: no cover - visual
        try:
            running = True
            while running:
                # The simulation advances per frame, so the frame rate is the game speed
                self.clock.tick(self.fps)
                running = self.step()
        except (AssetLoadFailure, InvalidDrawArgument) as e:
            print(f"[Engine] fatal: {e}", file=sys.stderr)
            return 1
        finally:
            pygame.quit()
        return 0
