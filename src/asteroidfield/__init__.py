"""asteroidfield: pooled procedural population of mineable objects around a moving observer.

Usage:
    import random
    from asteroidfield import FixedObserver, Vec3, create_controller

    ship = FixedObserver(Vec3(0, 0, 0))
    controller = create_controller(object, ship, rng=random.Random(42))
    controller.start()

    for _ in range(600):
        ship.move_by(Vec3(0, 0, 5))
        controller.tick(1 / 60)
"""

__version__ = "0.1.0"

# Configuration
from asteroidfield.config import PoolSettings, SpawnerSettings

# Core primitives
from asteroidfield.core import (
    DEFAULT_TIER_WEIGHTS,
    ConfigurationWarning,
    EntityHandle,
    RarityTier,
    TypeRecord,
    TypeRegistry,
    Vec3,
    WeightedTypeSelector,
    default_registry,
)

# Pooling
from asteroidfield.pool import EntityPool

# Population control
from asteroidfield.population import (
    FixedObserver,
    FixedPolicy,
    FixedProgression,
    ForceSpawnReport,
    LinearProgressionPolicy,
    LiveEntity,
    MissingCollaboratorError,
    Observer,
    PoolCapacityPolicy,
    PopulationController,
    PopulationPolicy,
    PopulationTargets,
    ProgressionSource,
    SpawnPlacement,
    SweepReport,
    create_controller,
)

# Telemetry (optional)
from asteroidfield.tracing import (
    PopulationHistory,
    PopulationMonitor,
    PopulationSample,
)

__all__ = [
    # Version
    "__version__",
    # Core
    "Vec3",
    "EntityHandle",
    "RarityTier",
    "TypeRecord",
    "TypeRegistry",
    "WeightedTypeSelector",
    "DEFAULT_TIER_WEIGHTS",
    "ConfigurationWarning",
    "default_registry",
    # Config
    "PoolSettings",
    "SpawnerSettings",
    # Pool
    "EntityPool",
    # Population
    "PopulationController",
    "MissingCollaboratorError",
    "create_controller",
    "LiveEntity",
    "SpawnPlacement",
    "PopulationTargets",
    "SweepReport",
    "ForceSpawnReport",
    "PopulationPolicy",
    "PoolCapacityPolicy",
    "FixedPolicy",
    "LinearProgressionPolicy",
    "Observer",
    "ProgressionSource",
    "FixedObserver",
    "FixedProgression",
    # Tracing
    "PopulationHistory",
    "PopulationMonitor",
    "PopulationSample",
]
