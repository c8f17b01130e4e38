#!/usr/bin/env python3
"""
Simulation engine for Orbits.

Simulation owns the planets, the satellites and the random number generator.
Each call to update(dt) runs one tick:

1) maybe spawn a satellite
2) for live satellites: apply gravity from every planet, move, append to trail
3) drop the oldest trail point when over length, or every tick once dead
4) mark live satellites dead when they leave the viewport or hit a planet
5) forget satellites that are dead and have no trail left

The renderer only reads a Snapshot; nothing outside this class mutates the
satellite list.
"""
import logging
import math
import random
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from .config import SimulationConfig
from .data_models import Planet, Satellite
from .geometry import outside, random_color
from .physics import apply_gravity, collides_with_any, integrate_position

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Snapshot:
    """Read-only view handed to the renderer once per frame."""
    planets: Tuple[Planet, ...]
    satellites: Tuple[Satellite, ...]


class Simulation:
    def __init__(self, config: SimulationConfig, planets: Sequence[Planet],
                 rng: Optional[random.Random] = None):
        self.config = config
        self.rng = rng if rng is not None else random.Random(config.seed)
        self.planets: List[Planet] = list(planets)
        self.satellites: List[Satellite] = []
        self.ticks = 0
        self.spawned = 0

    def maybe_spawn(self) -> Optional[Satellite]:
        """Roll once against add_chance and spawn a satellite on success."""
        chance = self.rng.random()
        if chance >= self.config.add_chance:
            return None
        return self.spawn()

    def spawn(self) -> Satellite:
        cfg = self.config
        rng = self.rng
        color = random_color(rng)
        x = rng.random() * cfg.width
        y = rng.random() * cfg.height
        angle = rng.random() * 2.0 * math.pi
        sat = Satellite(
            x=x,
            y=y,
            vx=cfg.sat_velocity * math.cos(angle),
            vy=cfg.sat_velocity * math.sin(angle),
            radius=cfg.sat_radius,
            color=color,
        )
        self.satellites.append(sat)
        self.spawned += 1
        log.debug("Spawned satellite at (%.1f, %.1f) heading %.2f rad", x, y, angle)
        return sat

    def add_satellite(self, sat: Satellite) -> None:
        self.satellites.append(sat)

    def update(self, dt: float) -> None:
        """Advance the simulation by one tick of dt seconds."""
        if dt <= 0:
            raise ValueError(f"dt must be positive, got {dt}")
        cfg = self.config
        self.ticks += 1

        self.maybe_spawn()

        struck = set()
        for sat in self.satellites:
            if not sat.dead:
                if apply_gravity(sat, self.planets, cfg.gravity_constant, dt):
                    struck.add(id(sat))
                integrate_position(sat, dt)
                sat.add_trail_point()
            if sat.dead or len(sat.trail) > cfg.trail_length:
                sat.drop_oldest_trail_point()

        # Dead satellites are frozen; only live ones can newly die
        for sat in self.satellites:
            if sat.dead:
                continue
            if (
                id(sat) in struck
                or outside(sat.x, sat.y, sat.radius, cfg.width, cfg.height)
                or collides_with_any(sat, self.planets)
            ):
                sat.dead = True

        before = len(self.satellites)
        self.satellites = [sat for sat in self.satellites if not sat.expired]
        removed = before - len(self.satellites)
        if removed:
            log.debug("Removed %d satellite(s); %d remain", removed, len(self.satellites))

    def snapshot(self) -> Snapshot:
        return Snapshot(planets=tuple(self.planets), satellites=tuple(self.satellites))
