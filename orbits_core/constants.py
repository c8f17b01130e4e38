#!/usr/bin/env python3
"""
Shared constants for Orbits (screen units: pixels, pixels per second).

Keeping defaults in one place keeps the CLI, the engine and the renderer in
agreement and makes tuning easier.
"""

TITLE = "orbits"

# Viewport
DEFAULT_WIDTH = 800
DEFAULT_HEIGHT = 800

# Satellites
ADD_CHANCE = 0.01  # probability of spawning a satellite each tick
SAT_RADIUS = 5.0  # px
SAT_VELOCITY = 200.0  # px/s, initial speed
DEFAULT_TRAIL_LENGTH = 100  # ticks of history

# Planets
DEFAULT_NUM_PLANETS = 1
PLANET_MASS = 1000.0
PLANET_RADIUS = 25.0

# 'G' used to update velocities; tuned for pixel space, not SI
GRAVITY_CONSTANT = 4000.0

# Host loop
UPDATES_PER_SECOND = 120
FIXED_DT = 1.0 / UPDATES_PER_SECOND
MAX_FPS = 60
MAX_UPDATES_PER_FRAME = 10  # cap catch-up after a stall

# Rendering
BACKGROUND_COLOR = (0, 0, 0)

# Safety: avoid drawing outside reasonable integer pixel ranges
SAFE_COORD_LIMIT = 30000
