#!/usr/bin/env python3
"""
Planet layout policy.

One planet sits in the centre of the viewport, two sit side by side, and
three or more are spaced evenly on a ring starting at the top.
"""
import logging
import math
import random
from typing import List

from .config import SimulationConfig
from .data_models import Planet
from .geometry import random_color

log = logging.getLogger(__name__)


def create_planets(config: SimulationConfig, rng: random.Random) -> List[Planet]:
    n = config.num_planets

    cx = config.width / 2.0
    cy = config.height / 2.0
    ring = min(config.width, config.height) / 4.0

    if n == 1:
        centres = [(cx, cy)]
    elif n == 2:
        centres = [(cx - ring, cy), (cx + ring, cy)]
    else:
        centres = []
        for i in range(n):
            theta = (math.pi * 2.0 * i / n) - math.pi / 2.0
            centres.append((cx + math.cos(theta) * ring, cy + math.sin(theta) * ring))

    planets = [
        Planet(
            x=x,
            y=y,
            mass=config.planet_mass,
            radius=config.planet_radius,
            color=random_color(rng),
        )
        for x, y in centres
    ]
    for p in planets:
        log.info("Planet at (%.1f, %.1f) mass=%g radius=%g", p.x, p.y, p.mass, p.radius)
    return planets
