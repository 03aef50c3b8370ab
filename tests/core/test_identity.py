"""Tests for pool handle identity.

Critical Invariants:
- Generation increments on recycle
- Stale handles are detected
- Handles are value objects usable as dict keys
"""

import pytest

from asteroidfield.core.identity import EntityHandle
from asteroidfield.pool import EntityPool


@pytest.fixture
def pool():
    """Pool of plain objects."""
    return EntityPool(object, max_capacity=4)


def test_handles_are_hashable_values():
    assert EntityHandle(slot=3, generation=1) == EntityHandle(slot=3, generation=1)
    lookup = {EntityHandle(slot=3, generation=1): "rock"}
    assert lookup[EntityHandle(slot=3, generation=1)] == "rock"
    assert EntityHandle(slot=3, generation=1) != EntityHandle(slot=3, generation=2)


def test_next_generation_keeps_slot():
    handle = EntityHandle(slot=7, generation=2)
    assert handle.next_generation() == EntityHandle(slot=7, generation=3)


def test_generation_increments_on_recycle(pool):
    """CRITICAL: A released slot must come back with generation+1.

    Why: Prevents a depleted signal for an old rock from hitting its replacement.
    """
    instance = pool.acquire()
    first = pool.handle_of(instance)
    assert first.generation == 0

    pool.release(instance)
    again = pool.acquire()

    assert again is instance, "Should reuse the same instance"
    second = pool.handle_of(again)
    assert second.slot == first.slot
    assert second.generation == 1, "INVARIANT: generation must increment"


def test_stale_handle_detection(pool):
    """CRITICAL: is_current() returns False once the slot was released."""
    instance = pool.acquire()
    old = pool.handle_of(instance)
    assert pool.is_current(old)

    pool.release(instance)
    assert not pool.is_current(old)

    pool.acquire()
    assert not pool.is_current(old), "Recycled slot must not revive old handle"
    assert pool.is_current(old.next_generation())


def test_unknown_slot_is_not_current(pool):
    assert not pool.is_current(EntityHandle(slot=99, generation=0))
