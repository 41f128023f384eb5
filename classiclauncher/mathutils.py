"""Small numeric helpers: clamping, random numbers and angles."""

from __future__ import annotations

import math
import random
from typing import TypeVar

T = TypeVar("T", int, float)

_generator = random.Random()


def clamp(value: T, low: T, high: T) -> T:
    """Limit ``value`` to ``high`` first, then raise it to at least ``low``."""
    return max(min(value, high), low)


def random_between(low: float, high: float) -> float:
    """Return a uniformly distributed float in ``[low, high)``."""
    return _generator.uniform(low, high)


def get_angle(v1x: float, v1y: float, v2x: float, v2y: float) -> float:
    """Angle in degrees from point 1 to point 2, with the y axis pointing down."""
    return -math.degrees(math.atan2(v2y - v1y, v2x - v1x))


def get_angle_360(v1x: float, v1y: float, v2x: float, v2y: float) -> float:
    """Like :func:`get_angle`, but mapped into the range ``[0, 360)``."""
    angle = get_angle(v1x, v1y, v2x, v2y)
    return angle + 360 if angle < 0 else angle