"""Population sizing policies.

A policy maps the current progression integer to population targets. The
controller recomputes its floor and ceiling through the policy whenever the
progression changes; live entities are never touched by a recompute.

Usage:
    policy = LinearProgressionPolicy(base_min=100, base_max=200, min_step=10, max_step=25)
    policy.targets(3)  # PopulationTargets(min_population=120, max_population=250)
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from asteroidfield.population.models import PopulationTargets


@runtime_checkable
class PopulationPolicy(Protocol):
    """Maps progression state to population targets."""

    def targets(self, progression: int) -> PopulationTargets:
        """Compute floor and ceiling for a progression level."""
        ...


class PoolCapacityPolicy:
    """Floor from the pool's initial capacity, ceiling from its max capacity.

    Ignores progression. This is the default policy.
    """

    def __init__(self, pool: Any) -> None:
        self._pool = pool

    def targets(self, progression: int) -> PopulationTargets:
        return PopulationTargets(
            min_population=self._pool.initial_capacity,
            max_population=self._pool.max_capacity,
        )


class FixedPolicy:
    """Constant targets regardless of progression."""

    def __init__(self, min_population: int, max_population: int) -> None:
        self._targets = PopulationTargets(min_population, max_population)

    def targets(self, progression: int) -> PopulationTargets:
        return self._targets


class LinearProgressionPolicy:
    """Targets that grow linearly with progression, starting at level 1.

    Args:
        base_min: Floor at level 1.
        base_max: Ceiling at level 1.
        min_step: Floor increase per level.
        max_step: Ceiling increase per level.
        ceiling: Hard cap on both values (e.g. the pool's max capacity).
    """

    def __init__(
        self,
        base_min: int,
        base_max: int,
        min_step: int = 0,
        max_step: int = 0,
        ceiling: int | None = None,
    ) -> None:
        self._base_min = base_min
        self._base_max = base_max
        self._min_step = min_step
        self._max_step = max_step
        self._ceiling = ceiling

    def targets(self, progression: int) -> PopulationTargets:
        steps = max(progression - 1, 0)
        maximum = max(self._base_max + self._max_step * steps, 0)
        minimum = max(self._base_min + self._min_step * steps, 0)
        if self._ceiling is not None:
            maximum = min(maximum, self._ceiling)
        return PopulationTargets(min_population=min(minimum, maximum), max_population=maximum)
