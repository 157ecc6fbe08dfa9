from .camera import Camera, VisibleWindow, round_half_away, tile_start
from .cameracontroller import CameraController, ease_in_out_quad

__all__ = [
    "Camera",
    "VisibleWindow",
    "round_half_away",
    "tile_start",
    "CameraController",
    "ease_in_out_quad",
]
