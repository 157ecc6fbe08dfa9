"""Scripted camera moves for the intro cinematic and the race.

The controller only mutates the camera it is given; deciding when a move is
over (and what happens next) is left to the world scene.
"""

from __future__ import annotations

from camera.camera import Camera
from config import (
    INTRO_OFFSET,
    INTRO_SCALE,
    INTRO_FADE,
    ASCEND_SLOWDOWN_ABOVE,
    ASCEND_ACCEL,
    ASCEND_MIN_SPEED,
    ZOOM_STEP,
    ZOOM_END_SCALE,
    CAMERA_FOLLOW,
)


def ease_in_out_quad(t: float) -> float:
    t = max(0.0, min(1.0, t))
    if t < 0.5:
        return 2.0 * t * t
    return -1.0 + (4.0 - 2.0 * t) * t


class CameraController:
    def __init__(self, camera: Camera) -> None:
        self.camera = camera

    def reset_to_intro(self) -> None:
        """High above the street, zoomed out, behind a black overlay."""
        cam = self.camera
        cam.offset_x, cam.offset_y = INTRO_OFFSET
        cam.scale = INTRO_SCALE
        cam.fade = INTRO_FADE
        cam.speed_y = 0.0
        cam.zoom_timer = 0

    def ascend(self) -> bool:
        """Sink the view down to street level. Returns True once it is there.

        The camera accelerates downward while high up, then brakes towards a
        small minimum speed so the landing is gentle.
        """
        cam = self.camera
        if cam.offset_y > ASCEND_SLOWDOWN_ABOVE:
            cam.speed_y -= ASCEND_ACCEL
        else:
            cam.speed_y = min(ASCEND_MIN_SPEED, cam.speed_y + ASCEND_ACCEL)
        cam.offset_y += cam.speed_y
        if cam.offset_y < 0:
            cam.offset_y = 0.0
            return True
        return False

    def zoom(self) -> bool:
        """Advance the eased zoom by one frame. Returns True when finished."""
        cam = self.camera
        before = cam.screen_width / cam.scale

        cam.zoom_timer += 1
        t = cam.zoom_timer * ZOOM_STEP
        done = t >= 1.0
        if done:
            cam.scale = ZOOM_END_SCALE
        else:
            cam.scale = INTRO_SCALE + ease_in_out_quad(t) * (
                ZOOM_END_SCALE - INTRO_SCALE
            )

        # Keep the centre of the view in place while the visible width shrinks
        after = cam.screen_width / cam.scale
        cam.offset_x += (after - before) / 2
        return done

    def follow(self, target_x: float, target_width: float, visible_width: int) -> None:
        """Ease the view so the target sits in the horizontal centre."""
        cam = self.camera
        dest = -(target_x - target_width / 2 - visible_width / 2)
        cam.offset_x = (1.0 - CAMERA_FOLLOW) * cam.offset_x + CAMERA_FOLLOW * dest
