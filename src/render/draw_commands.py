"""Draw commands and the painter that records them.

A frame is described as an ordered list of commands in screen pixels. Later
commands cover earlier ones. The `Painter` converts world coordinates through
the camera while recording, so the list can be inspected (or replayed on any
`RenderBackend`) without touching a window.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from camera import Camera
from core.backend import Color, Fill, RenderBackend
from core.errors import InvalidDrawArgument


@dataclass(frozen=True)
class DrawImage:
    name: str
    x: float
    y: float
    scale: float
    tint: Optional[Color] = None
    # World position the sprite was placed at, None for screen-space sprites.
    # Kept for inspecting a recorded frame; backends ignore it.
    world: Optional[Tuple[float, float]] = None

    def submit(self, backend: RenderBackend) -> None:
        backend.draw_image(self.name, self.x, self.y, self.scale, self.tint)


@dataclass(frozen=True)
class FillRect:
    x: int
    y: int
    w: int
    h: int
    color: Fill

    def submit(self, backend: RenderBackend) -> None:
        backend.fill_rect(self.x, self.y, self.w, self.h, self.color)


DrawCommand = Union[DrawImage, FillRect]


class Painter:
    """Records draw commands for one frame."""

    def __init__(self, camera: Camera, backend: RenderBackend) -> None:
        self.camera = camera
        self.backend = backend
        self.commands: List[DrawCommand] = []

    def size(self, name: str) -> Tuple[int, int]:
        return self.backend.image_size(name)

    # --------------------------- world space ----------------------------
    def draw(
        self, name: str, x: float, y: float, tint: Optional[Color] = None
    ) -> None:
        """Draw sprite `name` with its bottom-left corner at world (x, y)."""
        _, h = self.size(name)
        sx, sy = self.camera.sprite_screen_position(x, y, h)
        self.commands.append(
            DrawImage(name, sx, sy, self.camera.scale, tint, world=(x, y))
        )

    def fill_rect(self, x: float, y: float, w: float, h: float, color: Fill) -> None:
        self.commands.append(FillRect(*self.camera.world_rect_to_screen(x, y, w, h), color))

    # --------------------------- screen space ---------------------------
    def draw_screen(
        self,
        name: str,
        x: float,
        y: float,
        scale: float,
        tint: Optional[Color] = None,
    ) -> None:
        if scale <= 0:
            raise InvalidDrawArgument(f"non-positive scale {scale} for {name}")
        self.commands.append(DrawImage(name, x, y, scale, tint))

    def fill_screen(self, x: int, y: int, w: int, h: int, color: Fill) -> None:
        self.commands.append(FillRect(x, y, w, h, color))

    # --------------------------- queries --------------------------------
    # Inspection hooks: the game only replays `commands`, these let a frame be
    # checked without a backend.
    def images(self) -> List[DrawImage]:
        return [c for c in self.commands if isinstance(c, DrawImage)]

    def names(self) -> List[str]:
        return [c.name for c in self.images()]


def submit(commands: List[DrawCommand], backend: RenderBackend) -> None:
    """Replay a frame's commands on a backend, in order."""
    for command in commands:
        command.submit(backend)
