#!/usr/bin/env python3
"""
Orbits application entry point and renderer/host loop coordination.

What this module does
- Parses the command line into a SimulationConfig and lays out the planets.
- Opens a Pygame window (optionally fullscreen on the first monitor).
- Runs a single loop that pumps events, advances the Simulation in fixed
  ticks and draws one frame per iteration.

Threading model
- Everything runs on the main thread. The Simulation is the only mutator;
  PygameRenderer only reads a Snapshot.

Units and conventions
- Screen pixels throughout; the world is the viewport. Colors are RGB tuples in 0..255.

Running
1) Install dependencies: `pip install pygame`
2) Run this module: `python orbits.py [-f] [-t TRAIL_LENGTH] [-n NUM_PLANETS]`

Escape or closing the window quits.
"""

import logging
import math
import random
import sys
import time
from typing import Optional, Sequence, Tuple

import pygame
from pygame import gfxdraw

from orbits_core.config import ConfigError, SimulationConfig, build_arg_parser, config_from_namespace
from orbits_core.constants import (
    BACKGROUND_COLOR,
    FIXED_DT,
    MAX_FPS,
    MAX_UPDATES_PER_FRAME,
    SAFE_COORD_LIMIT,
)
from orbits_core.layout import create_planets
from orbits_core.simulation import Simulation, Snapshot

log = logging.getLogger("orbits")


def format_title(title: str, fps: float) -> str:
    return f"{title} ({int(round(fps))} fps)"


def _safe_point(pt) -> Optional[Tuple[int, int]]:
    x, y = pt
    if not (math.isfinite(x) and math.isfinite(y)):
        return None
    x, y = int(x), int(y)
    if -SAFE_COORD_LIMIT <= x <= SAFE_COORD_LIMIT and -SAFE_COORD_LIMIT <= y <= SAFE_COORD_LIMIT:
        return (x, y)
    return None


def _filled_circle(surf, pos, radius: float, color) -> None:
    center = _safe_point(pos)
    if center is None:
        return
    r = max(1, int(round(radius)))
    gfxdraw.filled_circle(surf, center[0], center[1], r, color)
    gfxdraw.aacircle(surf, center[0], center[1], r, color)


# ============================================================
# Pygame Renderer
# ============================================================

class PygameRenderer:
    """
    Draws planets, satellite trails and satellite bodies.

    Reads a Snapshot each frame and never touches the Simulation itself.
    """
    def __init__(self, title: str):
        self.title = title
        self.clock = pygame.time.Clock()

    def draw(self, surf, snapshot: Snapshot) -> None:
        surf.fill(BACKGROUND_COLOR)

        # Draw planets
        for planet in snapshot.planets:
            _filled_circle(surf, (planet.x, planet.y), planet.radius, planet.color)

        # Draw satellites
        for sat in snapshot.satellites:
            # Trail, oldest to newest
            if len(sat.trail) > 1:
                pts = [p for p in (_safe_point(t) for t in sat.trail) if p is not None]
                if len(pts) > 1:
                    pygame.draw.aalines(surf, sat.color, False, pts)

            if not sat.dead:
                _filled_circle(surf, (sat.x, sat.y), sat.radius, sat.color)

    def render(self, surf, snapshot: Snapshot) -> None:
        self.draw(surf, snapshot)
        pygame.display.flip()
        pygame.display.set_caption(format_title(self.title, self.clock.get_fps()))

    def tick(self) -> None:
        """Limit the frame rate; also feeds the fps measurement."""
        self.clock.tick(MAX_FPS)


# ============================================================
# Host loop
# ============================================================

def first_monitor_size() -> Tuple[int, int]:
    sizes = pygame.display.get_desktop_sizes()
    if not sizes:
        raise RuntimeError("Could not find any monitors")
    return sizes[0]


class App:
    """
    Owns the window and alternates fixed-size simulation ticks with rendering.

    Updates run at a fixed rate independent of the frame rate; the
    accumulator carries leftover real time between frames.
    """
    def __init__(self, config: SimulationConfig):
        self.config = config
        self.sim: Optional[Simulation] = None
        self.renderer: Optional[PygameRenderer] = None
        self.surface = None
        self.running = True
        self._accumulator = 0.0

    def open_window(self):
        pygame.init()
        if self.config.fullscreen:
            width, height = first_monitor_size()
            self.config = self.config.with_viewport(width, height)
            surface = pygame.display.set_mode((width, height), pygame.FULLSCREEN)
            pygame.mouse.set_visible(False)
            pygame.event.set_grab(True)
        else:
            surface = pygame.display.set_mode((int(self.config.width), int(self.config.height)))
        pygame.display.set_caption(self.config.title)
        return surface

    def setup(self) -> None:
        self.surface = self.open_window()
        rng = random.Random(self.config.seed)
        planets = create_planets(self.config, rng)
        self.sim = Simulation(self.config, planets, rng)
        self.renderer = PygameRenderer(self.config.title)
        log.info(
            "Viewport %dx%d, %d planet(s), trail length %d",
            self.config.width, self.config.height, len(planets), self.config.trail_length,
        )

    def handle_events(self) -> None:
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
            elif event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
                self.running = False

    def step(self, real_dt: float) -> int:
        """Run as many fixed ticks as real_dt allows; returns the number run."""
        self._accumulator += real_dt
        steps = 0
        while self._accumulator >= FIXED_DT and steps < MAX_UPDATES_PER_FRAME:
            self.sim.update(FIXED_DT)
            self._accumulator -= FIXED_DT
            steps += 1
        if steps == MAX_UPDATES_PER_FRAME:
            # Drop the backlog rather than spiral after a stall
            self._accumulator = 0.0
        return steps

    def run(self) -> None:
        try:
            self.setup()
            last_time = time.perf_counter()
            while self.running:
                now = time.perf_counter()
                real_dt = now - last_time
                last_time = now

                self.handle_events()
                if not self.running:
                    break
                self.step(real_dt)
                self.renderer.render(self.surface, self.sim.snapshot())
                self.renderer.tick()
            log.info("Exiting after %d ticks, %d satellites spawned", self.sim.ticks, self.sim.spawned)
        finally:
            pygame.quit()


# ============================================================
# Application Entry
# ============================================================

def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s  %(levelname)-7s  %(message)s",
        datefmt="%H:%M:%S",
    )

    try:
        config = config_from_namespace(args)
    except ConfigError as exc:
        parser.error(str(exc))

    try:
        App(config).run()
    except RuntimeError:  # pygame.error included
        log.exception("Could not run the simulation window")
        raise


if __name__ == "__main__":
    main(sys.argv[1:])
