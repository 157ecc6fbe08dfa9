"""OpenGL implementation of the game's `RenderBackend`.

Draws everything as textured or coloured quads in a pixel-space orthographic
projection (origin top-left, y down), using the fixed-function pipeline.
Sprites come from a `TextureManager`; window control goes through pygame.
"""

from __future__ import annotations

from typing import Optional, Tuple

import pygame
from OpenGL.GL import (
    glBegin,
    glEnd,
    glBindTexture,
    glBlendFunc,
    glClear,
    glClearColor,
    glColor4f,
    glDisable,
    glEnable,
    glLoadIdentity,
    glMatrixMode,
    glOrtho,
    glTexCoord2f,
    glVertex2f,
    glViewport,
    GL_BLEND,
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_TEST,
    GL_MODELVIEW,
    GL_ONE_MINUS_SRC_ALPHA,
    GL_PROJECTION,
    GL_QUADS,
    GL_SRC_ALPHA,
    GL_TEXTURE_2D,
)

from config import VSYNC
from core.backend import Color, Fill, Gradient, WHITE
from core.errors import AssetLoadFailure, AssetStillLoading, InvalidDrawArgument
from textures.texture_manager import TextureManager


def open_window(size: Tuple[int, int], fullscreen: bool = False) -> None:  # pragma: no cover - visual
    """Open (or reopen) the OpenGL window. (0, 0) with fullscreen means desktop size."""
    flags = pygame.DOUBLEBUF | pygame.OPENGL
    if fullscreen:
        flags |= pygame.FULLSCREEN
    try:
        # vsync: 1 to enable, 0 to disable
        pygame.display.set_mode(size, flags, vsync=(1 if VSYNC else 0))
    except (TypeError, pygame.error):
        # vsync was requested but unavailable on this system/driver
        pygame.display.set_mode(size, flags)


class GLRenderer:
    def __init__(self, textures: TextureManager, windowed_size: Tuple[int, int]) -> None:
        self.textures = textures
        self.windowed_size = windowed_size
        self.close_requested = False
        self._fullscreen = False

    # --------------------------- frame state ----------------------------
    def begin_frame(self) -> None:  # pragma: no cover - visual
        w, h = self.window_size()
        glViewport(0, 0, w, h)
        glClearColor(0.0, 0.0, 0.0, 1.0)
        glClear(GL_COLOR_BUFFER_BIT)

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        glOrtho(0, w, h, 0, -1, 1)
        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

        glDisable(GL_DEPTH_TEST)
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)

    # --------------------------- RenderBackend --------------------------
    def image_size(self, name: str) -> Tuple[int, int]:
        return self.textures.image_size(name)

    def draw_image(
        self,
        name: str,
        x: float,
        y: float,
        scale: float,
        tint: Optional[Color] = None,
    ) -> None:  # pragma: no cover - visual
        if scale <= 0:
            raise InvalidDrawArgument(f"non-positive scale {scale} for {name}")
        try:
            tex_id = self.textures.texture(name)
            w, h = self.textures.image_size(name)
        except (AssetLoadFailure, AssetStillLoading) as e:
            raise InvalidDrawArgument(f"cannot draw {name}: {e}") from e
        w *= scale
        h *= scale

        glEnable(GL_TEXTURE_2D)
        glBindTexture(GL_TEXTURE_2D, tex_id)
        glColor4f(*(tint or WHITE))
        glBegin(GL_QUADS)
        # pygame.image.tostring with flipped=True puts v=1 at the top row
        glTexCoord2f(0.0, 1.0)
        glVertex2f(x, y)
        glTexCoord2f(1.0, 1.0)
        glVertex2f(x + w, y)
        glTexCoord2f(1.0, 0.0)
        glVertex2f(x + w, y + h)
        glTexCoord2f(0.0, 0.0)
        glVertex2f(x, y + h)
        glEnd()
        glDisable(GL_TEXTURE_2D)

    def fill_rect(self, x: int, y: int, w: int, h: int, color: Fill) -> None:  # pragma: no cover - visual
        if w <= 0 or h <= 0:
            return
        if isinstance(color, Gradient):
            corners = (color.top_left, color.top_right, color.bottom_right, color.bottom_left)
        else:
            corners = (color,) * 4

        glDisable(GL_TEXTURE_2D)
        glBegin(GL_QUADS)
        for (vx, vy), c in zip(((x, y), (x + w, y), (x + w, y + h), (x, y + h)), corners):
            glColor4f(*c)
            glVertex2f(vx, vy)
        glEnd()

    def window_size(self) -> Tuple[int, int]:
        surface = pygame.display.get_surface()
        if surface is None:
            return (0, 0)
        return surface.get_size()

    def set_fullscreen(self, fullscreen: bool) -> None:  # pragma: no cover - visual
        if fullscreen == self._fullscreen:
            return
        if fullscreen:
            open_window((0, 0), fullscreen=True)
        else:
            open_window(self.windowed_size)
        self._fullscreen = fullscreen
        # The new window may come with a fresh GL context
        self.textures.reload()
        print(f"[Engine] {'fullscreen' if fullscreen else 'windowed'} at {self.window_size()}")

    def show_cursor(self, visible: bool) -> None:
        pygame.mouse.set_visible(visible)

    def close(self) -> None:
        self.close_requested = True
