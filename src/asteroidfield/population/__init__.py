"""Population control: spawning, despawning and sizing around an observer."""

from asteroidfield.population.controller import MissingCollaboratorError, PopulationController
from asteroidfield.population.factory import create_controller
from asteroidfield.population.models import (
    ForceSpawnReport,
    LiveEntity,
    PopulationTargets,
    SpawnPlacement,
    SweepReport,
)
from asteroidfield.population.policy import (
    FixedPolicy,
    LinearProgressionPolicy,
    PoolCapacityPolicy,
    PopulationPolicy,
)
from asteroidfield.population.protocol import (
    FixedObserver,
    FixedProgression,
    Observer,
    ProgressionSource,
)

__all__ = [
    # Controller
    "PopulationController",
    "MissingCollaboratorError",
    "create_controller",
    # Models
    "ForceSpawnReport",
    "LiveEntity",
    "PopulationTargets",
    "SpawnPlacement",
    "SweepReport",
    # Policies
    "PopulationPolicy",
    "PoolCapacityPolicy",
    "FixedPolicy",
    "LinearProgressionPolicy",
    # Collaborators
    "Observer",
    "ProgressionSource",
    "FixedObserver",
    "FixedProgression",
]
