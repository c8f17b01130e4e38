import random

import pytest

from orbits_core.config import ConfigError, SimulationConfig, config_from_args
from orbits_core.constants import DEFAULT_TRAIL_LENGTH
from orbits_core.layout import create_planets


def test_cli_defaults():
    config = config_from_args([])
    assert config.trail_length == DEFAULT_TRAIL_LENGTH == 100
    assert config.num_planets == 1
    assert config.fullscreen is False
    assert (config.width, config.height) == (800, 800)
    assert config.seed is None


def test_cli_overrides():
    config = config_from_args(["-f", "-t", "250", "-n", "3", "--seed", "7"])
    assert config.fullscreen is True
    assert config.trail_length == 250
    assert config.num_planets == 3
    assert config.seed == 7


def test_cli_rejects_non_integer_trail_length():
    with pytest.raises(SystemExit):
        config_from_args(["--trail-length", "long"])


def test_zero_planets_is_a_config_error():
    with pytest.raises(ConfigError, match="greater than 0"):
        config_from_args(["-n", "0"])


@pytest.mark.parametrize("overrides", [
    {"trail_length": -1},
    {"width": 0},
    {"add_chance": 1.5},
    {"sat_radius": -1.0},
    {"planet_mass": 0.0},
])
def test_invalid_values_rejected(overrides):
    with pytest.raises(ConfigError):
        SimulationConfig(**overrides)


def test_with_viewport_keeps_other_settings():
    config = SimulationConfig(trail_length=42, fullscreen=True)
    resized = config.with_viewport(1920, 1080)
    assert (resized.width, resized.height) == (1920, 1080)
    assert resized.trail_length == 42
    assert resized.fullscreen


def test_config_is_immutable():
    config = SimulationConfig()
    with pytest.raises(AttributeError):
        config.trail_length = 5


def test_single_planet_is_centred():
    planets = create_planets(SimulationConfig(num_planets=1), random.Random(0))
    assert [(p.x, p.y) for p in planets] == [(400.0, 400.0)]
    assert planets[0].mass == 1000.0
    assert planets[0].radius == 25.0


def test_two_planets_side_by_side():
    planets = create_planets(SimulationConfig(num_planets=2), random.Random(0))
    assert [(p.x, p.y) for p in planets] == [(200.0, 400.0), (600.0, 400.0)]


def test_many_planets_on_ring_starting_at_top():
    planets = create_planets(SimulationConfig(num_planets=4), random.Random(0))
    expected = [(400.0, 200.0), (600.0, 400.0), (400.0, 600.0), (200.0, 400.0)]
    for planet, (x, y) in zip(planets, expected):
        assert planet.x == pytest.approx(x)
        assert planet.y == pytest.approx(y)


def test_ring_uses_smaller_viewport_side():
    planets = create_planets(SimulationConfig(num_planets=3, width=1200, height=800), random.Random(0))
    assert planets[0].x == pytest.approx(600.0)
    assert planets[0].y == pytest.approx(200.0)
