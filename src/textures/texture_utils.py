"""Texture loading utilities for OpenGL.

An OpenGL context must exist before anything here is called.
"""

import pygame
from typing import Tuple
from OpenGL.GL import (
    glGenTextures,
    glBindTexture,
    glTexImage2D,
    glTexParameteri,
    GL_TEXTURE_2D,
    GL_RGBA,
    GL_UNSIGNED_BYTE,
    GL_TEXTURE_MIN_FILTER,
    GL_TEXTURE_MAG_FILTER,
    GL_TEXTURE_WRAP_S,
    GL_TEXTURE_WRAP_T,
    GL_NEAREST,
    GL_CLAMP_TO_EDGE,
)


def upload_surface(surface: pygame.Surface) -> int:
    """Upload a pygame surface as an RGBA texture and return its ID."""
    texture_data = pygame.image.tostring(surface, "RGBA", True)
    width, height = surface.get_size()

    texture_id = glGenTextures(1)
    glBindTexture(GL_TEXTURE_2D, texture_id)
    glTexImage2D(
        GL_TEXTURE_2D,
        0,
        GL_RGBA,
        width,
        height,
        0,
        GL_RGBA,
        GL_UNSIGNED_BYTE,
        texture_data,
    )

    # Pixel art stays crisp at every zoom level
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MIN_FILTER, GL_NEAREST)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_MAG_FILTER, GL_NEAREST)
    # No bleeding from the opposite edge when sprites are tiled side by side
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_S, GL_CLAMP_TO_EDGE)
    glTexParameteri(GL_TEXTURE_2D, GL_TEXTURE_WRAP_T, GL_CLAMP_TO_EDGE)
    return int(texture_id)


def load_texture(filename: str) -> Tuple[int, Tuple[int, int]]:
    """Load a sprite image into a texture.

    Parameters
    ----------
    filename : str
        Path to the image file

    Returns
    -------
    tuple
        (OpenGL texture ID, (width, height))

    Raises `FileNotFoundError` or `pygame.error` when the image can't be read.
    """
    surface = pygame.image.load(filename).convert_alpha()
    width, height = surface.get_size()
    return upload_surface(surface), (int(width), int(height))
