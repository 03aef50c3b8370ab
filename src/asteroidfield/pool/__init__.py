"""Instance pooling."""

from asteroidfield.pool.entity_pool import EntityPool, PoolEntry
from asteroidfield.pool.protocol import InstanceFactory, ResetHook

__all__ = [
    "EntityPool",
    "PoolEntry",
    "InstanceFactory",
    "ResetHook",
]
