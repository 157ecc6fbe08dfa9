"""The street: intro cinematic, vehicle entrances and the race itself.

Every non-menu state runs through `WorldScene.update`. The scenery is drawn
first, then whatever the current state adds on top (vehicles, HUD, fades),
and finally the state's own update, which may hand over to the next state
within the same frame.
"""

from __future__ import annotations

from config import (
    MENU_FADE_STEP,
    INTRO_FADE_END,
    CAR_ENTRANCE_SPEED,
)
from camera import VisibleWindow, round_half_away
from core.backend import FrameInput
from core.scene import Scene
from core.states import GameState
from render.draw_commands import Painter
from world import race
from world.world_hud import WorldHUD
from world.world_renderer import WorldRenderer
from world.world_shade_overlay import WorldShadeOverlay

BIKE_START_Y = 24
BIKE_ENTRANCE_SPEED = 0.5
BIKE_ENTRANCE_ACCEL = 0.007
BIKE_ENTRANCE_MAX_SPEED = 1.0
# Half-width of the screen-centre band where the rider looks at the camera
BIKE_LOOK_BACK = 20
CAR_START_Y = 21


class WorldScene(Scene):
    def __init__(self, game) -> None:
        super().__init__(game)
        self.renderer = WorldRenderer()
        self.overlay = WorldShadeOverlay()
        self.hud = WorldHUD(game.progress)

    def update(self, frame: FrameInput, painter: Painter) -> None:
        game = self.game
        cam = self.camera
        cam.clamp()

        view = cam.visible_window()
        metrics = self.renderer.draw(painter, view)
        bike_w, _ = painter.size("bike_0")
        car_w, _ = painter.size("car_0")

        if game.state is GameState.BIKE_COMING_IN:
            self._bike_coming_in(painter, view, bike_w, car_w)

        if game.state is GameState.CAR_COMING_IN:
            self._car_coming_in(painter, view, car_w)

        if game.state is GameState.PLAYING:
            self._play(frame, painter, view, bike_w)

        self.renderer.draw_foreground(painter, view, metrics)

        if game.state is GameState.FADING_IN_GAME:
            cam.fade -= MENU_FADE_STEP
            self.overlay.draw(painter)
            if cam.fade < INTRO_FADE_END:
                game.set_state(GameState.ASCENDING_INTO_GAME)

        if game.state is GameState.ASCENDING_INTO_GAME:
            if game.controller.ascend():
                game.set_state(GameState.ZOOMING_INTO_GAME)

        if game.state is GameState.ZOOMING_INTO_GAME:
            if game.controller.zoom():
                bike = game.bike
                bike.place(view.left - 3 * bike_w, BIKE_START_Y)
                bike.speed = BIKE_ENTRANCE_SPEED
                game.set_state(GameState.BIKE_COMING_IN)

        cam.clamp()

    # ------------------------------------------------------------------
    def _bike_coming_in(self, painter: Painter, view: VisibleWindow, bike_w: int, car_w: int) -> None:
        game = self.game
        bike = game.bike
        bike.advance()

        center = round_half_away(bike.x) + bike_w // 2
        screen_center = view.left + view.width // 2
        variant = ""
        if screen_center - BIKE_LOOK_BACK <= center <= screen_center + BIKE_LOOK_BACK:
            variant = "_back"

        if center > screen_center + BIKE_LOOK_BACK:
            bike.speed = min(BIKE_ENTRANCE_MAX_SPEED, bike.speed + BIKE_ENTRANCE_ACCEL)

        if center > view.right:
            game.car.place(view.left - 2 * car_w, CAR_START_Y)
            game.set_state(GameState.CAR_COMING_IN)

        painter.draw(bike.sprite(variant), bike.x, bike.y)

    def _car_coming_in(self, painter: Painter, view: VisibleWindow, car_w: int) -> None:
        game = self.game
        car = game.car
        car.advance(CAR_ENTRANCE_SPEED)
        painter.draw(car.sprite(), car.x, car.y)

        if round_half_away(car.x) > view.right + car_w:
            race.start_race(game.bike, car, game.progress, view.right)
            game.set_state(GameState.PLAYING)

    def _play(self, frame: FrameInput, painter: Painter, view: VisibleWindow, bike_w: int) -> None:
        game = self.game
        bike, car = game.bike, game.car

        race.step(bike, car, game.progress, left=frame.left, right=frame.right)
        game.controller.follow(bike.x, bike_w, view.width)

        painter.draw(bike.sprite(), bike.x, bike.y)
        painter.draw(car.sprite(), car.x, car.y)

        self.hud.tick()
        self.hud.draw_hint(painter, bike, bike_w)
        self.hud.draw_miles(painter)
