"""Entity pool service.

EntityPool is a stateful service that recycles backing instances instead of
creating and destroying them per spawn.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Generic, TypeVar

from asteroidfield.core.identity import EntityHandle
from asteroidfield.pool.protocol import InstanceFactory, ResetHook

T = TypeVar("T")


@dataclass(slots=True)
class PoolEntry(Generic[T]):
    """One backing instance and its bookkeeping. Owned by the pool."""

    instance: T
    slot: int
    generation: int = 0
    active: bool = False

    @property
    def handle(self) -> EntityHandle:
        return EntityHandle(slot=self.slot, generation=self.generation)


class EntityPool(Generic[T]):
    """Fixed-then-growable recycling container of backing instances.

    Inactive instances are handed out first-in first-out. When none are
    available the pool grows lazily until ``max_capacity`` instances are
    active, after which ``acquire`` refuses with None. Each release bumps the
    slot generation so handles taken before the release become stale.

    Args:
        factory: Creates an inert backing instance.
        max_capacity: Ceiling on simultaneously active instances.
        initial_capacity: Instances pre-created at construction.
        reset: Optional hook run on every release.
    """

    def __init__(
        self,
        factory: InstanceFactory[T],
        max_capacity: int,
        initial_capacity: int = 0,
        reset: ResetHook[T] | None = None,
    ):
        """Initialize the pool and pre-create ``initial_capacity`` instances.

        Raises:
            ValueError: If capacities are negative or inconsistent.
        """
        if max_capacity < 1:
            raise ValueError(f"max_capacity must be >= 1, got {max_capacity}")
        if initial_capacity < 0 or initial_capacity > max_capacity:
            raise ValueError(
                f"initial_capacity must be within [0, {max_capacity}], got {initial_capacity}"
            )

        self._factory = factory
        self._reset = reset
        self._max_capacity = max_capacity
        self._initial_capacity = initial_capacity
        self._entries: list[PoolEntry[T]] = []
        self._by_id: dict[int, PoolEntry[T]] = {}
        self._available: deque[PoolEntry[T]] = deque()
        self._active_count = 0

        if initial_capacity:
            self.initialize(initial_capacity)

    # Configuration

    @property
    def initial_capacity(self) -> int:
        return self._initial_capacity

    @property
    def max_capacity(self) -> int:
        return self._max_capacity

    # Counters

    @property
    def active_count(self) -> int:
        return self._active_count

    @property
    def available_count(self) -> int:
        return len(self._available)

    @property
    def total_created(self) -> int:
        return len(self._entries)

    # Lifecycle

    def initialize(self, capacity: int) -> int:
        """Pre-create inactive instances until ``capacity`` exist in total.

        Args:
            capacity: Desired total instance count, capped at max_capacity.

        Returns:
            Number of instances created by this call.
        """
        target = min(capacity, self._max_capacity)
        created = 0
        while len(self._entries) < target:
            self._available.append(self._create_entry())
            created += 1
        return created

    def _create_entry(self) -> PoolEntry[T]:
        instance = self._factory()
        entry = PoolEntry(instance=instance, slot=len(self._entries))
        self._entries.append(entry)
        self._by_id[id(instance)] = entry
        return entry

    def acquire(self) -> T | None:
        """Hand out an inactive instance, growing the pool if allowed.

        Returns:
            An instance now marked active, or None when max_capacity
            instances are already active. Refusal is a normal condition.
        """
        if self._available:
            entry = self._available.popleft()
        elif self._active_count < self._max_capacity:
            entry = self._create_entry()
        else:
            return None

        entry.active = True
        self._active_count += 1
        return entry.instance

    def release(self, instance: T) -> bool:
        """Return an instance to the available set.

        Releasing an instance that is already inactive is a no-op.

        Args:
            instance: Instance previously returned by ``acquire``.

        Returns:
            True if the instance was active and is now released.

        Raises:
            ValueError: If the instance was not created by this pool.
        """
        entry = self._entry_for(instance)
        if not entry.active:
            return False

        if self._reset is not None:
            self._reset(entry.instance)
        entry.active = False
        entry.generation += 1
        self._active_count -= 1
        self._available.append(entry)
        return True

    def release_all(self) -> int:
        """Reclaim every active instance. Returns how many were released."""
        active = [entry.instance for entry in self._entries if entry.active]
        for instance in active:
            self.release(instance)
        return len(active)

    def teardown(self) -> None:
        """Drop every instance. The pool is empty but usable afterwards."""
        self._entries.clear()
        self._by_id.clear()
        self._available.clear()
        self._active_count = 0

    # Identity

    def _entry_for(self, instance: T) -> PoolEntry[T]:
        entry = self._by_id.get(id(instance))
        if entry is None or entry.instance is not instance:
            raise ValueError(f"Instance {instance!r} does not belong to this pool")
        return entry

    def owns(self, instance: T) -> bool:
        entry = self._by_id.get(id(instance))
        return entry is not None and entry.instance is instance

    def is_active(self, instance: T) -> bool:
        return self._entry_for(instance).active

    def handle_of(self, instance: T) -> EntityHandle:
        """Current handle (slot + generation) of an instance."""
        return self._entry_for(instance).handle

    def is_current(self, handle: EntityHandle) -> bool:
        """Check a handle still refers to an active, unrecycled slot.

        Returns:
            False if the slot was released since the handle was taken,
            or the slot does not exist.
        """
        if not 0 <= handle.slot < len(self._entries):
            return False
        entry = self._entries[handle.slot]
        return entry.active and entry.generation == handle.generation
