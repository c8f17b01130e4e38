#!/usr/bin/env python3
"""
Physics for Orbits

Responsibilities
- Accumulate the velocity change each planet imparts on a satellite over one tick.
- Advance satellite positions with explicit Euler integration.
- Detect satellite/planet collisions.

Units and conventions
- Positions are in pixels, velocities in pixels per second, dt in seconds.
- Planets never move; only satellites are integrated.

Numerical notes
- The velocity change per planet is G * m * dt / r^2 applied along the
  separation vector. This is a deliberate simplification, not Newtonian
  acceleration integrated over the step, and it is what gives the familiar look.
- There is no softening. A satellite exactly on a planet centre gets no
  contribution from that planet and counts as having hit it, even when both
  radii are zero.
"""

import math
from typing import Iterable

from .data_models import Planet, Satellite
from .geometry import distance_sq, overlaps


def apply_gravity(sat: Satellite, planets: Iterable[Planet], gravity_constant: float, dt: float) -> bool:
    """
    Pull a satellite towards every planet.

    For each planet p the satellite's velocity changes by

        dv = G * m_p * dt / |r|^2

    directed from the satellite towards p, where r = (sat.x - p.x, sat.y - p.y).
    All planets are summed before the position is advanced.

    Args:
        sat: Satellite to update (velocity modified in place).
        planets: Attractors.
        gravity_constant: 'G' in pixel units.
        dt: Tick length in seconds.

    Returns:
        True if the satellite sat exactly on a planet centre.
    """
    struck = False
    for planet in planets:
        distance_x = sat.x - planet.x
        distance_y = sat.y - planet.y
        dist_sq = distance_x * distance_x + distance_y * distance_y
        if dist_sq == 0.0:
            struck = True
            continue
        delta_velocity = (gravity_constant * planet.mass * dt) / dist_sq
        angle = math.atan2(distance_y, distance_x)
        sat.vx -= delta_velocity * math.cos(angle)
        sat.vy -= delta_velocity * math.sin(angle)
    return struck


def integrate_position(sat: Satellite, dt: float) -> None:
    sat.x += sat.vx * dt
    sat.y += sat.vy * dt


def collides_with_any(sat: Satellite, planets: Iterable[Planet]) -> bool:
    """True if the satellite's disc overlaps any planet's disc or sits on its centre."""
    return any(
        overlaps(sat.x, sat.y, sat.radius, p.x, p.y, p.radius)
        or distance_sq(sat.x, sat.y, p.x, p.y) == 0.0
        for p in planets
    )
