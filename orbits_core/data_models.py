#!/usr/bin/env python3
"""
Data models for Orbits.

This module defines the Planet and Satellite dataclasses shared between the
simulation engine and the renderer.

Units and usage
- positions are in pixels, velocities in pixels per second, radius in pixels.
- trail stores past positions oldest-first; the engine caps its length.
- color is an RGB tuple in 0..255 and is only used for drawing.
"""
from collections import deque
from dataclasses import dataclass, field
from typing import Deque, Tuple

Color = Tuple[int, int, int]


@dataclass(frozen=True)
class Planet:
    """
    A static gravitational attractor.

    Fields:
    - x, y: Centre position
    - mass: Attracting mass (> 0)
    - radius: Collision and draw radius (>= 0)
    - color: RGB tuple used for rendering
    """
    x: float
    y: float
    mass: float
    radius: float
    color: Color = (200, 200, 255)


@dataclass
class Satellite:
    """
    A light body pulled by every planet.

    Once ``dead`` is set the satellite no longer moves or collides; it is kept
    only until its trail has drained.
    """
    x: float
    y: float
    vx: float
    vy: float
    radius: float
    color: Color = (200, 200, 255)
    dead: bool = False
    trail: Deque[Tuple[float, float]] = field(default_factory=deque)

    def add_trail_point(self) -> None:
        """Append the current position to the trail."""
        self.trail.append((self.x, self.y))

    def drop_oldest_trail_point(self) -> None:
        if self.trail:
            self.trail.popleft()

    @property
    def expired(self) -> bool:
        """True once the satellite is dead and nothing is left to draw."""
        return self.dead and not self.trail
