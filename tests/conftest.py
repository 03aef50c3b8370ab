"""Shared test fixtures."""

import random
import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from asteroidfield import (
    EntityPool,
    FixedObserver,
    PopulationController,
    SpawnerSettings,
    Vec3,
    WeightedTypeSelector,
    default_registry,
)


class Rock:
    """Inert backing instance standing in for a rendered asteroid."""

    def __init__(self) -> None:
        self.resets = 0

    def clear(self) -> None:
        self.resets += 1


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def registry():
    return default_registry()


@pytest.fixture
def observer():
    """Observer parked at the origin."""
    return FixedObserver(Vec3(0.0, 0.0, 0.0))


@pytest.fixture
def settings():
    """Stock spawner settings, independent of the environment."""
    return SpawnerSettings(_env_file=None)


@pytest.fixture
def make_controller(registry, observer, settings):
    """Factory for controllers with explicit pool capacities."""

    def _make(
        initial_capacity=0,
        max_capacity=500,
        seed=99,
        **controller_kwargs,
    ):
        pool = EntityPool(
            Rock,
            max_capacity=max_capacity,
            initial_capacity=initial_capacity,
            reset=Rock.clear,
        )
        rand = random.Random(seed)
        selector = WeightedTypeSelector(registry, rng=rand)
        controller_kwargs.setdefault("settings", settings)
        controller_kwargs.setdefault("rng", rand)
        return PopulationController(pool, observer, selector, **controller_kwargs)

    return _make
