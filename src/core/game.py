"""Top-level game state machine.

`Game` owns the whole simulation context (state, camera, both vehicles, race
progress) and is advanced exactly once per rendered frame by `update`, which
returns that frame's draw commands. It never touches pygame's display itself;
everything goes through the `RenderBackend` it is handed.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

import pygame

from config import START_SCALE, MENU_FADE_START, DEBUG_EXIT_CHAR, FULLSCREEN
from camera import Camera, CameraController
from core.backend import FrameInput, RenderBackend
from core.errors import AssetStillLoading
from core.states import GameState, MENU_STATES
from render.draw_commands import DrawCommand, Painter
from textures.resoucepath import SPRITE_NAMES
from ui.menu import MenuScene
from world.race import RaceProgress
from world.vehicle import Vehicle
from world.worldscene import WorldScene


class Game:
    def __init__(
        self,
        manifest: Optional[Iterable[str]] = None,
        fullscreen: bool = FULLSCREEN,
    ) -> None:
        self.manifest = tuple(SPRITE_NAMES if manifest is None else manifest)
        self.fullscreen = fullscreen
        self.state = GameState.LOADING_ASSETS

        self.camera = Camera(scale=START_SCALE)
        self.controller = CameraController(self.camera)
        self.bike = Vehicle.bike()
        self.car = Vehicle.car()
        self.progress = RaceProgress()

        self.menu = MenuScene(self)
        self.world = WorldScene(self)

    def set_state(self, state: GameState) -> None:
        print(f"[Game] {self.state.name} -> {state.name}")
        self.state = state

    def update(self, frame: FrameInput, backend: RenderBackend) -> List[DrawCommand]:
        self.camera.resize(*backend.window_size())
        self._handle_close(frame, backend)

        painter = Painter(self.camera, backend)
        if self.state is GameState.LOADING_ASSETS:
            self._load(backend)
        elif self.state in MENU_STATES:
            self.menu.update(frame, painter)
        else:
            self.world.update(frame, painter)
        return painter.commands

    def _handle_close(self, frame: FrameInput, backend: RenderBackend) -> None:
        # In the menu Escape means "start", everywhere else it quits
        if DEBUG_EXIT_CHAR in frame.text:
            backend.close()
        elif frame.pressed(pygame.K_ESCAPE) and self.state not in MENU_STATES:
            backend.close()

    def _load(self, backend: RenderBackend) -> None:
        """Wait until every sprite reports a size; failures propagate."""
        loading = False
        for name in self.manifest:
            try:
                backend.image_size(name)
            except AssetStillLoading:
                loading = True

        if loading:
            return

        print(f"[Game] {len(self.manifest)} sprites ready")
        backend.set_fullscreen(self.fullscreen)
        backend.show_cursor(False)
        self.camera.fade = MENU_FADE_START
        self.set_state(GameState.FADING_IN_MENU)
