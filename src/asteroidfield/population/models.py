"""Population models: live entities, targets and operation reports."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Generic, TypeVar

from asteroidfield.core.catalog import TypeRecord
from asteroidfield.core.identity import EntityHandle
from asteroidfield.core.vector import Vec3

T = TypeVar("T")


class SpawnPlacement(Enum):
    """Which path placed an entity."""

    STANDARD = auto()  # Per-tick attempt, separation enforced
    BULK = auto()  # force_spawn segmented burst
    ANTIPODAL = auto()  # Replacement opposite a despawned entity


@dataclass(slots=True)
class LiveEntity(Generic[T]):
    """A pool instance bound to a type record and a position.

    Handed to rendering, mining and radar collaborators. Only the controller
    creates or retires these; ``alive`` turns False once the backing instance
    is back in the pool.
    """

    instance: T
    handle: EntityHandle
    type_record: TypeRecord
    position: Vec3
    health: float
    spawn_tick: int = 0
    placement: SpawnPlacement = SpawnPlacement.STANDARD
    alive: bool = True

    def apply_damage(self, amount: float) -> bool:
        """Reduce health. Returns True once the entity is depleted."""
        if amount < 0.0:
            raise ValueError(f"Damage must be non-negative, got {amount}")
        self.health = max(self.health - amount, 0.0)
        return self.health <= 0.0

    @property
    def depleted(self) -> bool:
        return self.health <= 0.0

    @property
    def mining_progress(self) -> float:
        """Fraction of the type's health already mined, 0..1."""
        if self.type_record.health <= 0.0:
            return 1.0
        return 1.0 - self.health / self.type_record.health


@dataclass(frozen=True, slots=True)
class PopulationTargets:
    """Population floor and ceiling."""

    min_population: int
    max_population: int

    def __post_init__(self) -> None:
        if self.min_population < 0:
            raise ValueError(f"min_population must be >= 0, got {self.min_population}")
        if self.max_population < self.min_population:
            raise ValueError(
                f"max_population ({self.max_population}) is below "
                f"min_population ({self.min_population})"
            )


@dataclass(slots=True)
class SweepReport:
    """Outcome of one despawn sweep.

    Attributes:
        despawned: Entities released for exceeding the despawn distance.
        replaced: Antipodal replacements that were actually spawned.
        requested_replacements: Replacements the sweep asked for.
    """

    despawned: int = 0
    replaced: int = 0
    requested_replacements: int = 0


@dataclass(slots=True)
class ForceSpawnReport:
    """Best-effort outcome of a bulk population burst."""

    requested: int
    spawned: int = 0
    attempts: int = 0
    entities: list[LiveEntity[Any]] = field(default_factory=list)

    @property
    def success_rate(self) -> float:
        """Spawned per attempt, 0.0 when nothing was attempted."""
        return self.spawned / self.attempts if self.attempts else 0.0

    @property
    def complete(self) -> bool:
        return self.spawned >= self.requested
