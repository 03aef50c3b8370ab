"""Configuration module using Pydantic Settings.

Provides typed configuration for the pool and population controller with
environment variable support.

Usage:
    from asteroidfield.config import PoolSettings, SpawnerSettings

    pool = PoolSettings(initial_capacity=50, max_capacity=120)
    spawner = SpawnerSettings(despawn_distance=900.0)
"""

from asteroidfield.config.settings import PoolSettings, SpawnerSettings

__all__ = [
    "PoolSettings",
    "SpawnerSettings",
]
