"""Type catalog functionality: tiers, records, registry and weighted selection."""

from asteroidfield.core.catalog.models import (
    DEFAULT_TIER_WEIGHTS,
    ConfigurationWarning,
    RarityTier,
    TypeRecord,
)
from asteroidfield.core.catalog.registry import TypeRegistry, default_registry
from asteroidfield.core.catalog.selector import WeightedTypeSelector

__all__ = [
    "DEFAULT_TIER_WEIGHTS",
    "ConfigurationWarning",
    "RarityTier",
    "TypeRecord",
    "TypeRegistry",
    "WeightedTypeSelector",
    "default_registry",
]
