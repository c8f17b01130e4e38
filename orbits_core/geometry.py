#!/usr/bin/env python3
"""
Geometry helpers for 2D screen-space tests.

These are small, pure functions used by the engine and the layout code.
"""
import math
import random
from typing import Tuple


def outside(x: float, y: float, radius: float, width: float, height: float) -> bool:
    """Return True if a body of the given radius lies entirely outside [0, width] x [0, height]."""
    return (
        x + radius < 0.0
        or y + radius < 0.0
        or x - radius > width
        or y - radius > height
    )


def distance_sq(ax: float, ay: float, bx: float, by: float) -> float:
    dx = ax - bx
    dy = ay - by
    return dx * dx + dy * dy


def overlaps(ax: float, ay: float, a_radius: float, bx: float, by: float, b_radius: float) -> bool:
    """Circles overlap when their centre distance is strictly below the sum of radii."""
    return math.hypot(ax - bx, ay - by) < a_radius + b_radius


def random_color(rng: random.Random) -> Tuple[int, int, int]:
    """Return an opaque RGB color, each channel drawn independently."""
    return (rng.randint(0, 255), rng.randint(0, 255), rng.randint(0, 255))
