"""Collaborator protocols consumed by the population controller.

Usage:
    class ShipObserver:
        def __init__(self, ship): self._ship = ship

        @property
        def position(self) -> Vec3:
            return self._ship.position

    controller = PopulationController(pool, ShipObserver(ship), selector)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol, runtime_checkable

from asteroidfield.core.vector import Vec3


@runtime_checkable
class Observer(Protocol):
    """The moving agent the field is maintained around. Read-only to the core."""

    @property
    def position(self) -> Vec3:
        """Current world position, read on every spawn attempt and sweep."""
        ...


@runtime_checkable
class ProgressionSource(Protocol):
    """External progression signal (sector, level, depth...)."""

    @property
    def level(self) -> int:
        """Current progression integer. Read each tick, acted on when it changes."""
        ...


@dataclass(slots=True)
class FixedObserver:
    """Observer whose position is set explicitly. For headless runs and tests."""

    position: Vec3 = field(default_factory=Vec3.zero)

    def move_to(self, position: Vec3) -> None:
        self.position = position

    def move_by(self, offset: Vec3) -> None:
        self.position = self.position + offset


@dataclass(slots=True)
class FixedProgression:
    """Progression source holding a plain integer."""

    level: int = 1
