import pygame
import pytest

from core.backend import FrameInput, WHITE
from core.errors import AssetLoadFailure
from core.game import Game
from core.states import GameState
from render.draw_commands import FillRect

from conftest import FakeBackend

SPACE = FrameInput(keys_pressed=frozenset({pygame.K_SPACE}))
ESCAPE = FrameInput(keys_pressed=frozenset({pygame.K_ESCAPE}))


def advance_until(game, backend, state, frame=FrameInput(), limit=5000, check=None):
    for _ in range(limit):
        if game.state is state:
            return
        game.update(frame, backend)
        cam = game.camera
        assert cam.offset_x <= 0
        assert cam.offset_y >= 0
        if check:
            check(game)
    raise AssertionError(f"never reached {state.name}, stuck in {game.state.name}")


@pytest.fixture
def game():
    return Game(fullscreen=True)


@pytest.fixture
def menu_game(game, backend):
    game.update(FrameInput(), backend)
    assert game.state is GameState.FADING_IN_MENU
    return game


def settle_menu(game, backend, frames=20):
    """Let the menu fade part way in, so a start request fades it out again."""
    for _ in range(frames):
        game.update(FrameInput(), backend)
    assert game.camera.fade < 0.99


@pytest.fixture
def ready_menu(menu_game, backend):
    settle_menu(menu_game, backend)
    return menu_game


def test_starts_loading():
    game = Game()
    assert game.state is GameState.LOADING_ASSETS
    assert game.camera.scale == 5


def test_loading_waits_for_every_sprite(game):
    backend = FakeBackend(loading={"car_3"})
    for _ in range(3):
        assert game.update(FrameInput(), backend) == []
        assert game.state is GameState.LOADING_ASSETS
    backend.loading.clear()
    game.update(FrameInput(), backend)
    assert game.state is GameState.FADING_IN_MENU
    assert game.camera.fade == pytest.approx(1.1)
    assert backend.fullscreen is True
    assert backend.cursor_visible is False


def test_broken_sprite_is_fatal(game):
    backend = FakeBackend(loading={"bike_0"}, broken={"tree_1"})
    with pytest.raises(AssetLoadFailure) as err:
        game.update(FrameInput(), backend)
    assert err.value.name == "tree_1"


def test_menu_fades_in(menu_game, backend):
    commands = menu_game.update(FrameInput(), backend)
    assert menu_game.camera.fade == pytest.approx(1.09)
    assert [c.name for c in commands[:2]] == ["start_button", "cursor"]
    overlay = commands[-1]
    assert isinstance(overlay, FillRect)
    assert overlay.color[3] == 1.0

    for _ in range(200):
        menu_game.update(FrameInput(), backend)
    assert menu_game.camera.fade == 0.0
    assert menu_game.state is GameState.FADING_IN_MENU


def test_start_button_hover_and_click(ready_menu, backend):
    menu_game = ready_menu
    # 800 px high => scale 8, button 320x96 centred
    inside = (750, 400)
    commands = menu_game.update(FrameInput(mouse_pos=inside), backend)
    button = commands[0]
    assert (button.x, button.y, button.scale) == (590, 352, 8)
    assert button.tint == WHITE
    assert menu_game.state is GameState.FADING_IN_MENU

    commands = menu_game.update(FrameInput(mouse_pos=(10, 10), clicks=((10, 10),)), backend)
    assert commands[0].tint != WHITE
    assert commands[1].x == 6
    assert menu_game.state is GameState.FADING_IN_MENU

    menu_game.update(FrameInput(mouse_pos=inside, clicks=(inside,)), backend)
    assert menu_game.state is GameState.FADING_OUT_MENU


def test_escape_starts_from_menu_without_closing(ready_menu, backend):
    ready_menu.update(ESCAPE, backend)
    assert ready_menu.state is GameState.FADING_OUT_MENU
    assert not backend.closed


def test_start_while_still_black_goes_straight_to_intro(menu_game, backend):
    # fade is still 1.1 right after loading, so fading out is already done
    menu_game.update(SPACE, backend)
    assert menu_game.state is GameState.FADING_IN_GAME
    assert menu_game.camera.fade == pytest.approx(1.4)
    assert menu_game.camera.scale == 3.0


def test_fading_out_hands_over_to_intro(menu_game, backend):
    for _ in range(50):
        menu_game.update(FrameInput(), backend)
    fade = menu_game.camera.fade
    menu_game.update(SPACE, backend)
    assert menu_game.state is GameState.FADING_OUT_MENU
    assert menu_game.camera.fade == pytest.approx(fade + 0.01)

    advance_until(menu_game, backend, GameState.FADING_IN_GAME)
    cam = menu_game.camera
    assert (cam.offset_x, cam.offset_y, cam.scale) == (-100.0, 300.0, 3.0)
    assert cam.fade == pytest.approx(1.4)


def test_intro_holds_black_before_ascending(menu_game, backend):
    menu_game.update(SPACE, backend)
    advance_until(menu_game, backend, GameState.FADING_IN_GAME)
    frames = 0
    while menu_game.state is GameState.FADING_IN_GAME:
        menu_game.update(FrameInput(), backend)
        frames += 1
    # 1.4 down past -0.3 in steps of 0.01
    assert 170 <= frames <= 171
    assert menu_game.state is GameState.ASCENDING_INTO_GAME
    assert menu_game.camera.fade < -0.3


def play_intro(game, backend):
    settle_menu(game, backend)
    game.update(SPACE, backend)
    seen = []

    def record(g):
        if not seen or seen[-1] is not g.state:
            seen.append(g.state)

    advance_until(game, backend, GameState.PLAYING, check=record)
    return seen


def test_full_intro_reaches_the_race(menu_game, backend):
    seen = play_intro(menu_game, backend)
    assert seen == [
        GameState.FADING_OUT_MENU,
        GameState.FADING_IN_GAME,
        GameState.ASCENDING_INTO_GAME,
        GameState.ZOOMING_INTO_GAME,
        GameState.BIKE_COMING_IN,
        GameState.CAR_COMING_IN,
        GameState.PLAYING,
    ]
    game = menu_game
    assert game.camera.scale == 10.0
    assert game.camera.offset_y == 0.0
    # The race already ran once in the frame that started it
    assert game.bike.speed == pytest.approx(0.9 * 0.9975)
    assert game.car.speed == 1.0
    assert game.progress.arrow_hint_timer == 599
    assert game.bike.x - game.car.x == pytest.approx(130 + 0.9 * 0.9975 - 1.0)


def test_bike_entrance(menu_game, backend):
    game = menu_game
    game.update(SPACE, backend)
    advance_until(game, backend, GameState.BIKE_COMING_IN)
    assert game.bike.speed == 0.5
    assert game.bike.y == 24
    assert game.bike.x < game.camera.visible_window().left - 20

    looked_back = False
    while game.state is GameState.BIKE_COMING_IN:
        commands = game.update(FrameInput(), backend)
        names = [c.name for c in commands if hasattr(c, "name")]
        looked_back |= any(n.startswith("bike_back_") for n in names)
        assert game.bike.speed <= 1.0
    assert looked_back
    assert game.state is GameState.CAR_COMING_IN
    assert game.car.y == 21


def test_race_frames_respect_invariants(menu_game, backend):
    game = menu_game
    play_intro(game, backend)

    miles = game.progress.miles
    timer = game.progress.arrow_hint_timer
    for n in range(700):
        key = pygame.K_LEFT if n % 2 == 0 else pygame.K_d
        commands = game.update(FrameInput(keys_pressed=frozenset({key})), backend)
        assert 0.1 <= game.bike.speed <= 1.75
        assert game.car.speed >= 1.0
        assert game.progress.miles >= miles
        assert game.progress.arrow_hint_timer == max(0, timer - 1)
        assert game.camera.offset_x <= 0
        assert 0 <= game.bike.frame < 4 and 0 <= game.car.frame < 8
        miles = game.progress.miles
        timer = game.progress.arrow_hint_timer
        names = [c.name for c in commands if hasattr(c, "name")]
        assert "miles" in names
        assert ("press_left" in names or "press_right" in names) == (timer > 0)
        # Lamp bases are drawn over the vehicles
        assert names.index(f"bike_{game.bike.frame}") < names.index("lamp_bottom")
    assert game.state is GameState.PLAYING
    assert game.bike.speed == 1.75


def test_escape_closes_during_race(menu_game, backend):
    play_intro(menu_game, backend)
    menu_game.update(ESCAPE, backend)
    assert backend.closed


def test_debug_character_closes_anywhere(game, backend):
    game.update(FrameInput(text="ö"), backend)
    assert backend.closed
