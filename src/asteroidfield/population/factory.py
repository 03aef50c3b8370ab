"""Wiring helper: build pool, selector and controller from settings.

Usage:
    controller = create_controller(Rock, ship_observer, rng=random.Random(9))
    controller.start()
"""

from __future__ import annotations

import random
from typing import TypeVar

from asteroidfield.config import PoolSettings, SpawnerSettings
from asteroidfield.core.catalog import TypeRegistry, WeightedTypeSelector, default_registry
from asteroidfield.pool import EntityPool, InstanceFactory, ResetHook
from asteroidfield.population.controller import PopulationController
from asteroidfield.population.policy import PopulationPolicy
from asteroidfield.population.protocol import Observer, ProgressionSource
from asteroidfield.tracing import PopulationMonitor

T = TypeVar("T")


def create_controller(
    factory: InstanceFactory[T],
    observer: Observer | None,
    *,
    registry: TypeRegistry | None = None,
    pool_settings: PoolSettings | None = None,
    spawner_settings: SpawnerSettings | None = None,
    reset: ResetHook[T] | None = None,
    policy: PopulationPolicy | None = None,
    rng: random.Random | None = None,
    progression: ProgressionSource | None = None,
    monitor: PopulationMonitor | None = None,
) -> PopulationController[T]:
    """Create a controller with its pool and selector from settings.

    The selector and the controller share ``rng`` so one seed drives a whole
    run.

    Args:
        factory: Creates inert backing instances for the pool.
        observer: Position source; None only with allow_origin_fallback.
        registry: Type catalogue. Defaults to default_registry().
        pool_settings: Pool capacities. Defaults to PoolSettings().
        spawner_settings: Controller parameters. Defaults to SpawnerSettings().
        reset: Optional per-release hook for the pool.
        policy: Sizing policy. Defaults to the pool capacity policy.
        rng: Shared random source.
        progression: Optional progression signal.
        monitor: Optional telemetry sink.

    Returns:
        A controller that has not been started yet.
    """
    pool_settings = pool_settings or PoolSettings()
    spawner_settings = spawner_settings or SpawnerSettings()
    rng = rng or random.Random()

    pool: EntityPool[T] = EntityPool(
        factory,
        max_capacity=pool_settings.max_capacity,
        initial_capacity=pool_settings.initial_capacity,
        reset=reset,
    )
    selector = WeightedTypeSelector(
        registry if registry is not None else default_registry(),
        tier_weights=spawner_settings.tier_weight_table(),
        rng=rng,
    )
    return PopulationController(
        pool,
        observer,
        selector,
        settings=spawner_settings,
        policy=policy,
        rng=rng,
        progression=progression,
        monitor=monitor,
    )
