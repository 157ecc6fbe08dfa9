import pytest

from core.backend import WHITE
from render.draw_commands import DrawImage
from ui.sprite_text import SpriteText, char_sprite
from world.race import RaceProgress
from world.vehicle import Vehicle
from world.world_hud import WorldHUD, arrow_hint_sprite, arrow_hint_tint, format_miles


def test_arrow_hint_alternates_every_15_frames():
    assert arrow_hint_sprite(600) == "press_right"
    assert arrow_hint_sprite(599) == "press_left"
    assert arrow_hint_sprite(585) == "press_left"
    assert arrow_hint_sprite(584) == "press_right"
    assert arrow_hint_sprite(14) == "press_right"
    assert arrow_hint_sprite(15) == "press_left"


def test_arrow_hint_fades_out():
    assert arrow_hint_tint(600) == WHITE
    assert arrow_hint_tint(100) == WHITE
    assert arrow_hint_tint(50) == (1.0, 1.0, 1.0, 0.5)
    assert arrow_hint_tint(1)[3] == pytest.approx(0.01)


def test_hint_counts_down_and_disappears(painter):
    progress = RaceProgress(arrow_hint_timer=2)
    hud = WorldHUD(progress)
    bike = Vehicle.bike()
    bike.place(100, 24)

    hud.tick()
    hud.draw_hint(painter, bike, bike_w=20)
    hint = painter.images()[-1]
    assert hint.name == "press_right"
    # Centred over the bike: (20 - 30) / 2 = -5
    assert hint.world == (95, 70)

    hud.tick()
    hud.tick()
    assert progress.arrow_hint_timer == 0
    count = len(painter.commands)
    hud.draw_hint(painter, bike, bike_w=20)
    assert len(painter.commands) == count


def test_format_miles():
    assert format_miles(0.0) == "0.000"
    assert format_miles(1.23456) == "1.235"
    assert format_miles(12.0) == "12.000"


def test_miles_readout_layout(painter):
    hud = WorldHUD(RaceProgress(miles=0.0421))
    hud.draw_miles(painter)
    images = painter.images()
    assert [c.name for c in images] == ["0", "dot", "0", "4", "2", "miles"]
    assert all(c.world is None and c.scale == 5.0 for c in images)

    letter = 25
    text_w = 5 * letter + 22 * 5
    x0 = (1500 - text_w) // 2
    assert [c.x for c in images[:5]] == [x0 + i * letter for i in range(5)]
    assert images[-1].x == x0 + 6 * letter
    assert all(c.y == 25 for c in images)


def test_sprite_text(painter):
    label = SpriteText(scale=2.0)
    assert label.letter_w == 10
    end = label.draw(painter, "3.5", 7, 9)
    assert end == 37
    assert painter.names() == ["3", "dot", "5"]
    assert isinstance(painter.commands[0], DrawImage)


def test_char_sprite_rejects_unknown():
    assert char_sprite(".") == "dot"
    with pytest.raises(ValueError):
        char_sprite("x")
