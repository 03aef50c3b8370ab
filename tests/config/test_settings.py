"""Tests for pool and spawner settings."""

import os

import pytest
from pydantic import ValidationError

from asteroidfield import PoolSettings, RarityTier, SpawnerSettings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep ambient ASTEROIDFIELD_* variables out of these tests."""
    for name in list(os.environ):
        if name.startswith("ASTEROIDFIELD_"):
            monkeypatch.delenv(name)


def test_spawner_defaults():
    settings = SpawnerSettings(_env_file=None)

    assert settings.spawn_check_interval == 0.1
    assert settings.despawn_check_interval == 0.5
    assert (settings.min_spawn_distance, settings.max_spawn_distance) == (100.0, 500.0)
    assert settings.despawn_distance == 700.0
    assert settings.min_separation == 35.0
    assert settings.spawn_probability == 0.05
    assert settings.max_segments == 24
    assert settings.attempts_per_entity == 10
    assert settings.allow_origin_fallback is False
    assert sum(settings.tier_weight_table().values()) == pytest.approx(1.0)


def test_pool_defaults():
    settings = PoolSettings(_env_file=None)
    assert (settings.initial_capacity, settings.max_capacity) == (200, 500)


def test_pool_initial_above_max_rejected():
    with pytest.raises(ValidationError, match="exceeds"):
        PoolSettings(_env_file=None, initial_capacity=600, max_capacity=500)


def test_despawn_must_exceed_spawn_shell():
    with pytest.raises(ValidationError, match="despawn_distance"):
        SpawnerSettings(_env_file=None, max_spawn_distance=500.0, despawn_distance=500.0)


def test_inverted_shell_rejected():
    with pytest.raises(ValidationError, match="below"):
        SpawnerSettings(_env_file=None, min_spawn_distance=300.0, max_spawn_distance=200.0)


def test_spawn_probability_bounded():
    with pytest.raises(ValidationError):
        SpawnerSettings(_env_file=None, spawn_probability=1.5)


def test_environment_override(monkeypatch):
    monkeypatch.setenv("ASTEROIDFIELD_SPAWNER_MIN_SEPARATION", "50")
    monkeypatch.setenv("ASTEROIDFIELD_POOL_MAX_CAPACITY", "800")

    assert SpawnerSettings(_env_file=None).min_separation == 50.0
    assert PoolSettings(_env_file=None).max_capacity == 800


def test_tier_weights_from_environment_json(monkeypatch):
    monkeypatch.setenv("ASTEROIDFIELD_SPAWNER_TIER_WEIGHTS", '{"Common": 0.7, "legendary": 0.3}')

    table = SpawnerSettings(_env_file=None).tier_weight_table()

    assert table[RarityTier.COMMON] == 0.7
    assert table[RarityTier.LEGENDARY] == 0.3
    assert table[RarityTier.RARE] == 0.0


def test_unknown_tier_name_rejected():
    with pytest.raises(ValidationError, match="Unknown rarity tier"):
        SpawnerSettings(_env_file=None, tier_weights={"mythic": 1.0})
