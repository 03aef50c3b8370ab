"""Core functionalities: stateless primitives.

Architecture Note:
    core/ contains pure, stateless building blocks with no runtime state
    mutation (the selector only advances its injected random source).
    For stateful services, see pool/ and population/.
"""

from asteroidfield.core.catalog import (
    DEFAULT_TIER_WEIGHTS,
    ConfigurationWarning,
    RarityTier,
    TypeRecord,
    TypeRegistry,
    WeightedTypeSelector,
    default_registry,
)
from asteroidfield.core.identity import EntityHandle
from asteroidfield.core.placement import (
    antipodal_position,
    generate_distributed_position,
    generate_sphere_position,
    is_valid_placement,
    jitter_direction,
)
from asteroidfield.core.vector import Vec3

__all__ = [
    # Geometry
    "Vec3",
    # Identity
    "EntityHandle",
    # Catalog
    "DEFAULT_TIER_WEIGHTS",
    "ConfigurationWarning",
    "RarityTier",
    "TypeRecord",
    "TypeRegistry",
    "WeightedTypeSelector",
    "default_registry",
    # Placement
    "antipodal_position",
    "generate_distributed_position",
    "generate_sphere_position",
    "is_valid_placement",
    "jitter_direction",
]
