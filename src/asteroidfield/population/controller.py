"""PopulationController: keeps a pooled field of entities around a moving observer.

Usage:
    pool = EntityPool(factory=Rock, max_capacity=500, initial_capacity=200)
    selector = WeightedTypeSelector(default_registry(), rng=random.Random(1))
    controller = PopulationController(pool, ship_observer, selector)

    controller.start()  # bulk-populate up to the floor
    while running:
        controller.tick(frame_seconds)

    # A mining collaborator reports a depleted rock
    controller.notify_depleted(entity.handle)
"""

from __future__ import annotations

import random
import warnings
from collections.abc import Iterator
from typing import Any, Generic, TypeVar

from asteroidfield.config import SpawnerSettings
from asteroidfield.core.catalog import ConfigurationWarning, TypeRecord, WeightedTypeSelector
from asteroidfield.core.identity import EntityHandle
from asteroidfield.core.placement import (
    antipodal_position,
    generate_distributed_position,
    generate_sphere_position,
    is_valid_placement,
)
from asteroidfield.core.vector import Vec3
from asteroidfield.pool import EntityPool
from asteroidfield.population.models import (
    ForceSpawnReport,
    LiveEntity,
    PopulationTargets,
    SpawnPlacement,
    SweepReport,
)
from asteroidfield.population.policy import PoolCapacityPolicy, PopulationPolicy
from asteroidfield.population.protocol import FixedObserver, Observer, ProgressionSource
from asteroidfield.tracing import PopulationMonitor, PopulationSample

T = TypeVar("T")


class MissingCollaboratorError(RuntimeError):
    """A required collaborator was not supplied; the controller refuses to start."""


class PopulationController(Generic[T]):
    """Spawns, despawns and replaces pooled entities around an observer.

    Owns the ordered spawned set and is the only caller of the pool. Runs
    two independent cadences off ``tick``: a spawn attempt every
    ``spawn_check_interval`` seconds and a despawn sweep every
    ``despawn_check_interval`` seconds. Everything runs synchronously inside
    the calling tick.

    Args:
        pool: Recycling pool of backing instances.
        observer: Position source the field is kept around.
        selector: Weighted type selector.
        settings: Spawner configuration. Defaults to SpawnerSettings().
        policy: Population sizing policy. Defaults to PoolCapacityPolicy(pool).
        rng: Random source for placement and spawn chance.
        progression: Optional progression signal driving the policy.
        monitor: Optional telemetry sink, fed one sample per tick.

    Raises:
        MissingCollaboratorError: If pool or selector is missing, or observer
            is missing and ``settings.allow_origin_fallback`` is off.
    """

    def __init__(
        self,
        pool: EntityPool[T] | None,
        observer: Observer | None,
        selector: WeightedTypeSelector | None,
        settings: SpawnerSettings | None = None,
        policy: PopulationPolicy | None = None,
        rng: random.Random | None = None,
        progression: ProgressionSource | None = None,
        monitor: PopulationMonitor | None = None,
    ) -> None:
        if pool is None:
            raise MissingCollaboratorError("PopulationController requires an EntityPool")
        if selector is None:
            raise MissingCollaboratorError("PopulationController requires a type selector")

        self._settings = settings or SpawnerSettings()

        if observer is None:
            if not self._settings.allow_origin_fallback:
                raise MissingCollaboratorError(
                    "PopulationController requires an observer "
                    "(set allow_origin_fallback to run around the world origin)"
                )
            warnings.warn(
                "No observer supplied; population is maintained around the world origin",
                ConfigurationWarning,
                stacklevel=2,
            )
            observer = FixedObserver()

        self._pool = pool
        self._observer = observer
        self._selector = selector
        self._rng = rng or random.Random()
        self._policy: PopulationPolicy = policy or PoolCapacityPolicy(pool)
        self._progression = progression
        self._monitor = monitor

        self._level = progression.level if progression is not None else 1
        self._targets = self._policy.targets(self._level)

        self._spawned: dict[EntityHandle, LiveEntity[T]] = {}
        self._spawn_timer = 0.0
        self._despawn_timer = 0.0
        self._tick = 0
        self._elapsed = 0.0
        self._events: list[dict[str, Any]] = []

    # Views

    @property
    def settings(self) -> SpawnerSettings:
        return self._settings

    @property
    def pool(self) -> EntityPool[T]:
        return self._pool

    @property
    def observer(self) -> Observer:
        return self._observer

    @property
    def targets(self) -> PopulationTargets:
        return self._targets

    @property
    def min_population(self) -> int:
        return self._targets.min_population

    @property
    def max_population(self) -> int:
        return self._targets.max_population

    @property
    def population(self) -> int:
        return len(self._spawned)

    @property
    def spawned(self) -> tuple[LiveEntity[T], ...]:
        """Snapshot of live entities in spawn order."""
        return tuple(self._spawned.values())

    @property
    def level(self) -> int:
        return self._level

    @property
    def tick_count(self) -> int:
        return self._tick

    def __iter__(self) -> Iterator[LiveEntity[T]]:
        return iter(tuple(self._spawned.values()))

    def get(self, handle: EntityHandle) -> LiveEntity[T] | None:
        return self._spawned.get(handle)

    # Lifecycle

    def start(self, initial_count: int | None = None) -> ForceSpawnReport:
        """Recompute targets and bulk-populate the field.

        Args:
            initial_count: Entities to place. Defaults to the population floor.
        """
        self._refresh_targets()
        count = self.min_population if initial_count is None else initial_count
        return self.force_spawn(count)

    def tick(self, dt: float) -> None:
        """Advance the cadence timers by ``dt`` seconds and run due work."""
        if dt < 0.0:
            raise ValueError(f"dt must be non-negative, got {dt}")

        self._tick += 1
        self._elapsed += dt

        if self._progression is not None and self._progression.level != self._level:
            self.set_progression(self._progression.level)

        self._spawn_timer += dt
        if self._spawn_timer >= self._settings.spawn_check_interval:
            self._spawn_timer = 0.0
            self.attempt_spawn()

        self._despawn_timer += dt
        if self._despawn_timer >= self._settings.despawn_check_interval:
            self._despawn_timer = 0.0
            self.sweep_despawn()

        self._emit_sample()

    def set_progression(self, level: int) -> PopulationTargets:
        """Recompute population targets for a progression level.

        Live entities are left untouched; a lowered ceiling only stops new
        spawns until despawns bring the population back under it.
        """
        self._level = level
        self._refresh_targets()
        self._record_event(
            "targets",
            level=level,
            min_population=self.min_population,
            max_population=self.max_population,
        )
        return self._targets

    def _refresh_targets(self) -> None:
        self._targets = self._policy.targets(self._level)

    # Spawning

    def attempt_spawn(self) -> LiveEntity[T] | None:
        """One standard spawn attempt. No retry within the call.

        Returns:
            The new entity, or None when the ceiling is reached, the spawn
            chance failed, the candidate was too close to a live entity, no
            type could be selected, or the pool refused.
        """
        if self.population >= self.max_population:
            return None

        below_floor = self.population < self.min_population
        if not below_floor and self._rng.random() >= self._settings.spawn_probability:
            return None

        candidate = generate_sphere_position(
            self._observer.position,
            self._settings.min_spawn_distance,
            self._settings.max_spawn_distance,
            self._rng,
        )
        if not is_valid_placement(candidate, self._positions(), self._settings.min_separation):
            return None

        record = self._selector.select_type()
        if record is None:
            return None

        return self._bind(record, candidate, SpawnPlacement.STANDARD)

    def force_spawn(self, count: int) -> ForceSpawnReport:
        """Best-effort bulk population across angular segments.

        Attempts walk the segments round-robin so every wedge of the circle
        gets candidates, with a budget of ``attempts_per_entity`` attempts per
        requested entity. Stops early at the population ceiling or when the
        pool refuses.

        Args:
            count: Entities requested.

        Returns:
            Report of requested vs. achieved placements.
        """
        if count < 0:
            raise ValueError(f"count must be non-negative, got {count}")

        report: ForceSpawnReport = ForceSpawnReport(requested=count)
        if count == 0:
            return report

        settings = self._settings
        segment_count = min(count, settings.max_segments)
        budget = count * settings.attempts_per_entity
        center = self._observer.position

        while report.spawned < count and report.attempts < budget:
            if self.population >= self.max_population:
                break

            segment = report.attempts % segment_count
            report.attempts += 1
            candidate = generate_distributed_position(
                segment,
                segment_count,
                center,
                settings.min_spawn_distance,
                settings.max_spawn_distance,
                self._rng,
            )
            if self._spawned and not is_valid_placement(
                candidate, self._positions(), settings.min_separation
            ):
                continue

            record = self._selector.select_type()
            if record is None:
                continue

            entity = self._bind(record, candidate, SpawnPlacement.BULK)
            if entity is None:
                break
            report.spawned += 1
            report.entities.append(entity)

        self._record_event(
            "force_spawn",
            requested=count,
            spawned=report.spawned,
            attempts=report.attempts,
        )
        return report

    def _bind(
        self, record: TypeRecord, position: Vec3, placement: SpawnPlacement
    ) -> LiveEntity[T] | None:
        instance = self._pool.acquire()
        if instance is None:
            return None

        entity = LiveEntity(
            instance=instance,
            handle=self._pool.handle_of(instance),
            type_record=record,
            position=position,
            health=record.health,
            spawn_tick=self._tick,
            placement=placement,
        )
        self._spawned[entity.handle] = entity
        self._record_event(
            "spawn",
            slot=entity.handle.slot,
            name=record.name,
            placement=placement.name.lower(),
        )
        return entity

    def _positions(self) -> Iterator[Vec3]:
        return (entity.position for entity in self._spawned.values())

    # Despawning

    def sweep_despawn(self) -> SweepReport:
        """Release entities beyond the despawn distance, then refill antipodally.

        When the sweep leaves the population under its floor, up to one
        replacement per removed entity is spawned on the far side of the
        observer from where that entity was lost. Replacements skip the
        separation test.
        """
        settings = self._settings
        center = self._observer.position
        limit_sq = settings.despawn_distance * settings.despawn_distance

        lost: list[Vec3] = []
        for entity in tuple(self._spawned.values()):
            offset = entity.position - center
            if offset.length_squared() > limit_sq:
                lost.append(offset)
                self._retire(entity, "despawn")

        report = SweepReport(despawned=len(lost))
        if not lost or self.population >= self.min_population:
            return report

        report.requested_replacements = min(len(lost), self.min_population - self.population)
        for offset in lost[: report.requested_replacements]:
            if self.population >= self.max_population:
                break
            position = antipodal_position(
                center,
                offset,
                self._rng,
                max_angle_degrees=settings.antipodal_jitter_degrees,
                distance_variation=settings.antipodal_distance_variation,
                r_min=settings.min_spawn_distance,
                r_max=settings.max_spawn_distance,
            )
            record = self._selector.select_type()
            if record is None:
                continue
            if self._bind(record, position, SpawnPlacement.ANTIPODAL) is not None:
                report.replaced += 1

        return report

    def notify_depleted(self, target: LiveEntity[T] | EntityHandle) -> bool:
        """Release a specific live entity immediately (health reached zero).

        Args:
            target: The entity or its handle.

        Returns:
            True if the entity was live and is now released; False for stale
            or unknown handles.
        """
        handle = target.handle if isinstance(target, LiveEntity) else target
        entity = self._spawned.get(handle)
        if entity is None:
            return False
        if isinstance(target, LiveEntity) and entity is not target:
            return False
        self._retire(entity, "depleted")
        return True

    def apply_damage(self, handle: EntityHandle, amount: float) -> bool:
        """Damage a live entity, releasing it when depleted.

        Returns:
            True if this damage depleted the entity.
        """
        entity = self._spawned.get(handle)
        if entity is None:
            return False
        if entity.apply_damage(amount):
            return self.notify_depleted(entity)
        return False

    def clear_all(self) -> int:
        """Release every live entity (sector transition or reset).

        Returns:
            Number of entities removed.
        """
        entities = tuple(self._spawned.values())
        for entity in entities:
            entity.alive = False
        self._spawned.clear()
        self._pool.release_all()
        if entities:
            self._record_event("clear", count=len(entities))
        return len(entities)

    def _retire(self, entity: LiveEntity[T], reason: str) -> None:
        del self._spawned[entity.handle]
        self._pool.release(entity.instance)
        entity.alive = False
        self._record_event(reason, slot=entity.handle.slot, name=entity.type_record.name)

    # Telemetry

    def _record_event(self, event_type: str, **data: Any) -> None:
        if self._monitor is not None:
            self._events.append({"type": event_type, "tick": self._tick, **data})

    def _emit_sample(self) -> None:
        if self._monitor is None:
            return
        events, self._events = self._events, []
        self._monitor.record(
            PopulationSample(
                tick=self._tick,
                timestamp=self._elapsed,
                population=self.population,
                min_population=self.min_population,
                max_population=self.max_population,
                pool_active=self._pool.active_count,
                pool_available=self._pool.available_count,
                events=events,
            )
        )

