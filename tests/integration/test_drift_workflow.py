"""End-to-end drift through the field with settings-built collaborators."""

import random

from asteroidfield import (
    FixedObserver,
    PoolSettings,
    PopulationHistory,
    SpawnerSettings,
    Vec3,
    create_controller,
)


class Rock:
    def __init__(self):
        self.resets = 0

    def clear(self):
        self.resets += 1


def _drift(ticks=300, speed=100.0, dt=0.1):
    ship = FixedObserver(Vec3(0.0, 0.0, 0.0))
    history = PopulationHistory(max_samples=ticks)
    controller = create_controller(
        Rock,
        ship,
        pool_settings=PoolSettings(_env_file=None, initial_capacity=50, max_capacity=120),
        spawner_settings=SpawnerSettings(_env_file=None),
        reset=Rock.clear,
        rng=random.Random(2024),
        monitor=history,
    )
    report = controller.start()
    populations = []
    for _ in range(ticks):
        ship.move_by(Vec3(0.0, 0.0, speed * dt))
        controller.tick(dt)
        populations.append(controller.population)
    return controller, ship, history, report, populations


def test_population_held_between_floor_and_ceiling():
    """CRITICAL: Travelling 3000 units never thins the field below its floor.

    Why: Sweeps refill their own losses; spawns only ever add.
    """
    controller, _, _, report, populations = _drift()

    assert report.complete
    assert min(populations) >= controller.min_population
    assert max(populations) <= controller.max_population


def test_field_follows_the_observer():
    controller, ship, history, _, _ = _drift()
    settings = controller.settings

    assert len(history.events("despawn")) > 0
    antipodal = [e for e in history.events("spawn") if e["placement"] == "antipodal"]
    assert antipodal, "trailing losses should be refilled ahead"

    # Entities may drift out between sweeps, never by more than a sweep of travel
    slack = 100.0
    for entity in controller:
        distance = (entity.position - ship.position).length()
        assert distance <= settings.despawn_distance + slack


def test_pool_accounting_matches_population():
    controller, _, _, _, _ = _drift(ticks=120)

    assert controller.pool.active_count == controller.population
    recycled = [e.instance for e in controller if e.instance.resets > 0]
    assert all(controller.pool.is_active(instance) for instance in recycled)

    controller.clear_all()
    assert controller.pool.active_count == 0
    assert controller.pool.total_created <= controller.pool.max_capacity
