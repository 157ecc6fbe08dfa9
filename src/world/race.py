"""Bike versus car race rules, one call per frame.

The player pedals by tapping left and right in turn. Each correct tap pushes
the bike's speed up, a tap on the wrong side slows it a little, and drag
slows it all the time. The car keeps pace with the bike: it closes in quickly
when it is slower and eases off slowly when it is faster, but never drops
below its own cruising speed.
"""

from __future__ import annotations

from dataclasses import dataclass

from config import (
    BIKE_DRAG,
    BIKE_BOOST,
    BIKE_MIN_SPEED,
    BIKE_MAX_SPEED,
    CAR_MIN_SPEED,
    ARROW_HINT_FRAMES,
    MILES_PER_UNIT,
)
from world.vehicle import Vehicle

RACE_BIKE_SPEED = 0.9
RACE_CAR_SPEED = 0.75
BIKE_LEAD = 140
CAR_LEAD = 10


@dataclass
class RaceProgress:
    miles: float = 0.0
    arrow_hint_timer: int = 0
    expect_left: bool = True


def pedal(speed: float, progress: RaceProgress, left: bool, right: bool) -> float:
    """Apply drag and this frame's key presses to the bike speed."""
    speed *= BIKE_DRAG
    if (progress.expect_left and left) or (not progress.expect_left and right):
        speed /= BIKE_BOOST
        progress.expect_left = not progress.expect_left
    elif left or right:
        speed *= BIKE_DRAG
    return min(BIKE_MAX_SPEED, max(BIKE_MIN_SPEED, speed))


def chase(car_speed: float, bike_speed: float) -> float:
    if car_speed < bike_speed:
        car_speed = 0.9 * car_speed + 0.1 * bike_speed
    else:
        car_speed = 0.995 * car_speed + 0.005 * bike_speed
    return max(CAR_MIN_SPEED, car_speed)


def start_race(bike: Vehicle, car: Vehicle, progress: RaceProgress, right_edge: int) -> None:
    """Line both vehicles up just past the right edge of the view."""
    bike.place(right_edge + BIKE_LEAD)
    bike.speed = RACE_BIKE_SPEED
    car.place(right_edge + CAR_LEAD)
    car.speed = RACE_CAR_SPEED
    progress.arrow_hint_timer = ARROW_HINT_FRAMES


def step(
    bike: Vehicle,
    car: Vehicle,
    progress: RaceProgress,
    left: bool = False,
    right: bool = False,
) -> None:
    bike.speed = pedal(bike.speed, progress, left, right)
    car.speed = chase(car.speed, bike.speed)

    bike.advance()
    car.advance()

    progress.miles += bike.speed * MILES_PER_UNIT
