"""Configuration settings using Pydantic Settings.

Provides typed configuration with environment variable support for the pool
and the population controller.

Usage:
    from asteroidfield.config import PoolSettings, SpawnerSettings

    # Load from environment variables (ASTEROIDFIELD_POOL_*, ASTEROIDFIELD_SPAWNER_*)
    pool_settings = PoolSettings()
    spawner_settings = SpawnerSettings()

    # Or override with explicit values
    spawner_settings = SpawnerSettings(min_separation=50.0)
"""

from __future__ import annotations

from typing import Self

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from asteroidfield.core.catalog.models import DEFAULT_TIER_WEIGHTS, RarityTier


class PoolSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the entity pool.

    Attributes:
        initial_capacity: Instances pre-created at startup.
        max_capacity: Ceiling on simultaneously active instances.

    Environment Variables:
        ASTEROIDFIELD_POOL_INITIAL_CAPACITY
        ASTEROIDFIELD_POOL_MAX_CAPACITY
    """

    model_config = SettingsConfigDict(
        env_prefix="ASTEROIDFIELD_POOL_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    initial_capacity: int = Field(default=200, ge=0)
    max_capacity: int = Field(default=500, ge=1)

    @model_validator(mode="after")
    def _check_capacities(self) -> Self:
        if self.initial_capacity > self.max_capacity:
            raise ValueError(
                f"initial_capacity ({self.initial_capacity}) exceeds "
                f"max_capacity ({self.max_capacity})"
            )
        return self


class SpawnerSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the population controller.

    Attributes:
        spawn_check_interval: Seconds between spawn attempts.
        despawn_check_interval: Seconds between despawn sweeps.
        min_spawn_distance: Inner radius of the spawn shell.
        max_spawn_distance: Outer radius of the spawn shell.
        despawn_distance: Entities further than this from the observer are reclaimed.
        min_separation: Minimum gap between entities at standard placement time.
        spawn_probability: Chance per attempt to spawn once the floor is met.
        max_segments: Angular segments used by bulk population.
        attempts_per_entity: Bulk population retry budget per requested entity.
        antipodal_jitter_degrees: Cone half-angle for antipodal replacement.
        antipodal_distance_variation: +/- distance perturbation for replacement.
        allow_origin_fallback: Run against a fixed observer at the origin when
            no observer is supplied, instead of refusing to start.
        tier_weights: Probability per rarity tier, keyed by tier name.

    Environment Variables:
        ASTEROIDFIELD_SPAWNER_<ATTRIBUTE> for each attribute above;
        ASTEROIDFIELD_SPAWNER_TIER_WEIGHTS takes a JSON object.
    """

    model_config = SettingsConfigDict(
        env_prefix="ASTEROIDFIELD_SPAWNER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    spawn_check_interval: float = Field(default=0.1, gt=0.0)
    despawn_check_interval: float = Field(default=0.5, gt=0.0)
    min_spawn_distance: float = Field(default=100.0, ge=0.0)
    max_spawn_distance: float = Field(default=500.0, gt=0.0)
    despawn_distance: float = Field(default=700.0, gt=0.0)
    min_separation: float = Field(default=35.0, ge=0.0)
    spawn_probability: float = Field(default=0.05, ge=0.0, le=1.0)
    max_segments: int = Field(default=24, ge=1)
    attempts_per_entity: int = Field(default=10, ge=1)
    antipodal_jitter_degrees: float = Field(default=10.0, ge=0.0, le=180.0)
    antipodal_distance_variation: float = Field(default=50.0, ge=0.0)
    allow_origin_fallback: bool = False
    tier_weights: dict[str, float] = Field(
        default_factory=lambda: {tier.value: w for tier, w in DEFAULT_TIER_WEIGHTS.items()}
    )

    @field_validator("tier_weights")
    @classmethod
    def _check_tier_names(cls, value: dict[str, float]) -> dict[str, float]:
        return {RarityTier.parse(name).value: weight for name, weight in value.items()}

    @model_validator(mode="after")
    def _check_distances(self) -> Self:
        if self.max_spawn_distance < self.min_spawn_distance:
            raise ValueError(
                f"max_spawn_distance ({self.max_spawn_distance}) is below "
                f"min_spawn_distance ({self.min_spawn_distance})"
            )
        if self.despawn_distance <= self.max_spawn_distance:
            raise ValueError(
                f"despawn_distance ({self.despawn_distance}) must exceed "
                f"max_spawn_distance ({self.max_spawn_distance})"
            )
        return self

    def tier_weight_table(self) -> dict[RarityTier, float]:
        """Tier weights keyed by RarityTier; missing tiers weigh 0."""
        return {tier: self.tier_weights.get(tier.value, 0.0) for tier in RarityTier}
