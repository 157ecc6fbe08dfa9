from __future__ import annotations

from typing import Optional

from pygame.math import Vector2

from camera import round_half_away
from config import BIKE_MIN_SPEED

BIKE_FRAMES = 4
CAR_FRAMES = 8
# Frames per animation step at speed 1 (bike) and always (car)
FRAME_INTERVAL = 4


class Vehicle:
    """A side-view vehicle with a looping sprite animation.

    Parameters
    ----------
    name : str
        Sprite prefix; frame `n` is drawn as ``f"{name}_{n}"``.
    cycle_length : int
        Number of animation frames.
    fixed_interval : int | None
        Frames between animation steps. When None the interval follows the
        speed (`round(4 / speed)`), so the wheels spin faster as it speeds up.
    """

    def __init__(
        self,
        name: str,
        cycle_length: int,
        fixed_interval: Optional[int] = None,
    ) -> None:
        self.name = name
        self.cycle_length = cycle_length
        self.fixed_interval = fixed_interval
        self.position = Vector2(0.0, 0.0)
        self.speed = 0.0
        self.frame = 0
        self.frame_countdown = 0

    @classmethod
    def bike(cls) -> "Vehicle":
        return cls("bike", BIKE_FRAMES)

    @classmethod
    def car(cls) -> "Vehicle":
        return cls("car", CAR_FRAMES, fixed_interval=FRAME_INTERVAL)

    @property
    def x(self) -> float:
        return self.position.x

    @property
    def y(self) -> float:
        return self.position.y

    def place(self, x: float, y: Optional[float] = None) -> None:
        self.position.x = float(x)
        if y is not None:
            self.position.y = float(y)

    def frame_interval(self) -> int:
        if self.fixed_interval is not None:
            return self.fixed_interval
        # A standing vehicle animates at the slowest riding pace
        return round_half_away(FRAME_INTERVAL / max(self.speed, BIKE_MIN_SPEED))

    def animate(self) -> None:
        self.frame_countdown -= 1
        if self.frame_countdown <= 0:
            self.frame = (self.frame + 1) % self.cycle_length
            self.frame_countdown = self.frame_interval()

    def advance(self, distance: Optional[float] = None) -> None:
        """Move forward by `distance` (default: own speed) and animate."""
        self.position.x += self.speed if distance is None else distance
        self.animate()

    def sprite(self, variant: str = "") -> str:
        return f"{self.name}{variant}_{self.frame}"
