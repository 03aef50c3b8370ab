"""Headless drift through an asteroid field.

Flies an observer in a straight line and prints how the population keeps up.

Usage:
    python drift_demo.py
    python drift_demo.py --ticks 1200 --speed 250 --seed 7
    python drift_demo.py --level-every 300   # raise progression periodically
"""

from __future__ import annotations

import argparse
import random
import sys
from collections import Counter

from asteroidfield import (
    FixedObserver,
    FixedProgression,
    LinearProgressionPolicy,
    PoolSettings,
    PopulationHistory,
    SpawnerSettings,
    Vec3,
    create_controller,
)


class Asteroid:
    """Stand-in for a rendered rock."""

    def __init__(self) -> None:
        self.recycled = 0

    def clear(self) -> None:
        self.recycled += 1


def run(ticks: int, speed: float, dt: float, seed: int, level_every: int) -> None:
    pool_settings = PoolSettings()
    ship = FixedObserver(Vec3(0.0, 0.0, 0.0))
    progression = FixedProgression(level=1)
    history = PopulationHistory(max_samples=ticks)
    controller = create_controller(
        Asteroid,
        ship,
        pool_settings=pool_settings,
        spawner_settings=SpawnerSettings(),
        reset=Asteroid.clear,
        policy=LinearProgressionPolicy(
            base_min=pool_settings.initial_capacity // 2,
            base_max=pool_settings.initial_capacity,
            min_step=10,
            max_step=25,
            ceiling=pool_settings.max_capacity,
        ),
        rng=random.Random(seed),
        progression=progression,
        monitor=history,
    )

    report = controller.start()
    print(f"Bulk populated {report.spawned}/{report.requested} in {report.attempts} attempts")

    for tick in range(1, ticks + 1):
        if level_every and tick % level_every == 0:
            progression.level += 1
        ship.move_by(Vec3(0.0, 0.0, speed * dt))
        controller.tick(dt)

        if tick % 60 == 0:
            sample = history.latest
            print(
                f"t={sample.timestamp:6.1f}s  level={controller.level}  "
                f"population={sample.population:4d}  "
                f"[{sample.min_population}, {sample.max_population}]  "
                f"pool idle={sample.pool_available}"
            )

    spawns = history.events("spawn")
    by_placement = Counter(event["placement"] for event in spawns)
    by_type = Counter(event["name"] for event in spawns)
    print(f"\nSpawns by placement: {dict(by_placement)}")
    print(f"Despawns: {len(history.events('despawn'))}")
    print("Most common types:")
    for name, count in by_type.most_common(5):
        print(f"  {name}: {count}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="drift-demo",
        description="Fly through a pooled asteroid field without rendering",
    )
    parser.add_argument("--ticks", type=int, default=600, help="Ticks to simulate")
    parser.add_argument("--speed", type=float, default=150.0, help="Observer speed (units/s)")
    parser.add_argument("--dt", type=float, default=1 / 30, help="Seconds per tick")
    parser.add_argument("--seed", type=int, default=42, help="Random seed")
    parser.add_argument("--level-every", type=int, default=0, help="Ticks per progression level")

    args = parser.parse_args(argv)
    run(args.ticks, args.speed, args.dt, args.seed, args.level_every)
    return 0


if __name__ == "__main__":
    sys.exit(main())
