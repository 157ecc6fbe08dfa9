"""The contract between the game core and whatever puts pixels on screen.

The core never talks to pygame's display or OpenGL directly. Each frame the
engine hands it a `FrameInput` snapshot and a `RenderBackend`; the core only
queries sprite sizes and window state through the backend and returns a list
of draw commands (see `render.draw_commands`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import FrozenSet, Optional, Protocol, Tuple, Union

import pygame

# RGBA, each channel 0..1
Color = Tuple[float, float, float, float]

WHITE: Color = (1.0, 1.0, 1.0, 1.0)


def rgb(r: int, g: int, b: int) -> Color:
    """8-bit RGB to an opaque float colour."""
    return (r / 255.0, g / 255.0, b / 255.0, 1.0)


def gray(v: float, alpha: float = 1.0) -> Color:
    return (v, v, v, alpha)


@dataclass(frozen=True)
class Gradient:
    """Four corner colours of a filled rectangle."""

    top_left: Color
    top_right: Color
    bottom_left: Color
    bottom_right: Color

    @classmethod
    def vertical(cls, top: Color, bottom: Color) -> "Gradient":
        return cls(top, top, bottom, bottom)


Fill = Union[Color, Gradient]


@dataclass(frozen=True)
class FrameInput:
    """Input gathered by the engine for a single frame.

    `keys_pressed` holds pygame key codes that went down this frame (not keys
    held from earlier frames). `clicks` are mouse button-down positions.
    """

    keys_pressed: FrozenSet[int] = frozenset()
    mouse_pos: Tuple[int, int] = (0, 0)
    clicks: Tuple[Tuple[int, int], ...] = ()
    text: str = ""

    def pressed(self, *keys: int) -> bool:
        return any(k in self.keys_pressed for k in keys)

    @property
    def left(self) -> bool:
        return self.pressed(pygame.K_LEFT, pygame.K_a)

    @property
    def right(self) -> bool:
        return self.pressed(pygame.K_RIGHT, pygame.K_d)

    @property
    def start(self) -> bool:
        return self.pressed(
            pygame.K_SPACE, pygame.K_RETURN, pygame.K_KP_ENTER, pygame.K_ESCAPE
        )


class RenderBackend(Protocol):
    def image_size(self, name: str) -> Tuple[int, int]:
        """Size of sprite `name` in pixels.

        Raises `AssetStillLoading` while the sprite is not ready yet and
        `AssetLoadFailure` if it never will be.
        """
        ...

    def draw_image(
        self,
        name: str,
        x: float,
        y: float,
        scale: float,
        tint: Optional[Color] = None,
    ) -> None: ...

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Fill) -> None: ...

    def window_size(self) -> Tuple[int, int]: ...

    def set_fullscreen(self, fullscreen: bool) -> None: ...

    def show_cursor(self, visible: bool) -> None: ...

    def close(self) -> None: ...
