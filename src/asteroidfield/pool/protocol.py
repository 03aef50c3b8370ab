"""Collaborator protocols for pool-backed instances.

The pool never knows what a backing instance is. A collaborator supplies a
factory creating inert instances on demand, and optionally a reset hook run
when an instance goes back to the pool.

Usage:
    pool = EntityPool(factory=AsteroidBody, max_capacity=500, reset=AsteroidBody.clear)
"""

from __future__ import annotations

from typing import Protocol, TypeVar

T_co = TypeVar("T_co", covariant=True)
T_contra = TypeVar("T_contra", contravariant=True)


class InstanceFactory(Protocol[T_co]):
    """Creates one inert backing instance."""

    def __call__(self) -> T_co:
        """Create instance. Visual or physical setup is the caller's concern."""
        ...


class ResetHook(Protocol[T_contra]):
    """Returns an instance to a neutral state before it is requeued."""

    def __call__(self, instance: T_contra) -> None:
        """Clear per-spawn state on the instance."""
        ...
