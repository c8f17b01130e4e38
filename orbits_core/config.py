#!/usr/bin/env python3
"""
Startup configuration for Orbits.

SimulationConfig is read once at startup and never changed afterwards. The
command line only exposes fullscreen, trail length, planet count and an RNG
seed; everything else keeps the defaults from constants.
"""
import argparse
from dataclasses import dataclass, replace
from typing import List, Optional

from .constants import (
    ADD_CHANCE,
    DEFAULT_HEIGHT,
    DEFAULT_NUM_PLANETS,
    DEFAULT_TRAIL_LENGTH,
    DEFAULT_WIDTH,
    GRAVITY_CONSTANT,
    PLANET_MASS,
    PLANET_RADIUS,
    SAT_RADIUS,
    SAT_VELOCITY,
    TITLE,
)


class ConfigError(ValueError):
    """Invalid startup configuration; fatal."""


@dataclass(frozen=True)
class SimulationConfig:
    """Container for simulation settings."""
    width: float = DEFAULT_WIDTH
    height: float = DEFAULT_HEIGHT
    add_chance: float = ADD_CHANCE
    sat_radius: float = SAT_RADIUS
    sat_velocity: float = SAT_VELOCITY
    gravity_constant: float = GRAVITY_CONSTANT
    trail_length: int = DEFAULT_TRAIL_LENGTH
    num_planets: int = DEFAULT_NUM_PLANETS
    planet_mass: float = PLANET_MASS
    planet_radius: float = PLANET_RADIUS
    fullscreen: bool = False
    title: str = TITLE
    seed: Optional[int] = None

    def __post_init__(self):
        if self.num_planets < 1:
            raise ConfigError("Num_planets must be greater than 0")
        if self.trail_length < 0:
            raise ConfigError("Trail length must be a non-negative integer")
        if self.width <= 0 or self.height <= 0:
            raise ConfigError(f"Viewport size must be positive, got {self.width}x{self.height}")
        if not 0.0 <= self.add_chance <= 1.0:
            raise ConfigError(f"Spawn chance must be within [0, 1], got {self.add_chance}")
        if self.sat_radius < 0 or self.planet_radius < 0:
            raise ConfigError("Radii must be non-negative")
        if self.planet_mass <= 0:
            raise ConfigError("Planet mass must be positive")

    def with_viewport(self, width: float, height: float) -> "SimulationConfig":
        """Return a copy sized to the given viewport (used for fullscreen)."""
        return replace(self, width=width, height=height)


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="orbits",
        description="Satellites spawn at random and fall around fixed planets.",
    )
    parser.add_argument("-f", "--fullscreen", action="store_true",
                        help="Run fullscreen on the first monitor")
    parser.add_argument("-t", "--trail-length", type=int, default=DEFAULT_TRAIL_LENGTH,
                        help="Trail length, measured in ticks of history (default: %(default)s)")
    parser.add_argument("-n", "--num-planets", type=int, default=DEFAULT_NUM_PLANETS,
                        help="Number of planets (default: %(default)s)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed for the random number generator")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="Log spawns and removals")
    return parser


def config_from_namespace(args: argparse.Namespace) -> SimulationConfig:
    return SimulationConfig(
        trail_length=args.trail_length,
        num_planets=args.num_planets,
        fullscreen=args.fullscreen,
        seed=args.seed,
    )


def config_from_args(argv: Optional[List[str]] = None) -> SimulationConfig:
    """
    Parse command-line arguments into a SimulationConfig.

    Non-integer values exit through argparse; semantic problems such as a zero
    planet count raise ConfigError.
    """
    return config_from_namespace(build_arg_parser().parse_args(argv))
