import pytest

from core.backend import FrameInput
from core.errors import AssetLoadFailure, AssetStillLoading
from camera import Camera
from render.draw_commands import Painter
from textures.resoucepath import SPRITE_NAMES

SPRITE_SIZES = {name: (4, 5) for name in SPRITE_NAMES}
SPRITE_SIZES.update(
    {
        "street": (64, 24),
        "fence": (32, 8),
        "lamp_top": (12, 40),
        "lamp_bottom": (6, 20),
        "grass": (8, 4),
        "tree_0": (30, 50),
        "tree_1": (24, 40),
        "bush_0": (12, 8),
        "bush_1": (10, 7),
        "trashcan": (6, 8),
        "press_left": (30, 10),
        "press_right": (30, 10),
        "miles": (22, 5),
        "start_button": (40, 12),
        "cursor": (4, 6),
    }
)
SPRITE_SIZES.update({f"skyscraper_{i}": (70, 140) for i in range(3)})
SPRITE_SIZES.update({f"background_skyscraper_{i}": (40, 160) for i in range(3)})
SPRITE_SIZES.update({f"fence_door_{i}": (32, 14) for i in range(3)})
SPRITE_SIZES.update({f"bike_{i}": (20, 18) for i in range(4)})
SPRITE_SIZES.update({f"bike_back_{i}": (20, 18) for i in range(4)})
SPRITE_SIZES.update({f"car_{i}": (40, 16) for i in range(8)})


class FakeBackend:
    """Records what the game asks of a renderer without opening a window."""

    def __init__(self, size=(1500, 800), loading=(), broken=()):
        self.size = size
        self.sizes = dict(SPRITE_SIZES)
        self.loading = set(loading)
        self.broken = set(broken)
        self.fullscreen = None
        self.cursor_visible = True
        self.closed = False
        self.drawn = []

    def image_size(self, name):
        if name in self.broken:
            raise AssetLoadFailure(name, "corrupt image")
        if name in self.loading:
            raise AssetStillLoading(name)
        try:
            return self.sizes[name]
        except KeyError:
            raise AssetLoadFailure(name) from None

    def draw_image(self, name, x, y, scale, tint=None):
        self.drawn.append(("image", name, x, y, scale, tint))

    def fill_rect(self, x, y, w, h, color):
        self.drawn.append(("rect", x, y, w, h, color))

    def window_size(self):
        return self.size

    def set_fullscreen(self, fullscreen):
        self.fullscreen = fullscreen

    def show_cursor(self, visible):
        self.cursor_visible = visible

    def close(self):
        self.closed = True


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def camera():
    return Camera(offset_x=0.0, offset_y=0.0, scale=5.0, width=1500, height=800)


@pytest.fixture
def painter(camera, backend):
    return Painter(camera, backend)


@pytest.fixture
def no_input():
    return FrameInput()
