"""Data models for population telemetry.

These models are plain and JSON-friendly so a debug overlay or metrics
collaborator can consume them without importing controller internals.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(slots=True)
class PopulationSample:
    """Population state captured at the end of one controller tick.

    Attributes:
        tick: The tick number.
        timestamp: Accumulated simulated seconds at this tick.
        population: Live entity count.
        min_population: Current population floor.
        max_population: Current population ceiling.
        pool_active: Active instances reported by the pool.
        pool_available: Idle instances waiting in the pool.
        events: Lifecycle events of this tick (spawn, despawn, replace, deplete).

    Example:
        sample = PopulationSample(
            tick=42,
            timestamp=4.2,
            population=180,
            min_population=200,
            max_population=500,
            pool_active=180,
            pool_available=20,
            events=[{"type": "spawn", "slot": 5, "name": "Gold"}],
        )
    """

    tick: int
    timestamp: float
    population: int
    min_population: int
    max_population: int
    pool_active: int = 0
    pool_available: int = 0
    events: list[dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Convert to JSON-serializable dictionary."""
        return {
            "tick": self.tick,
            "timestamp": self.timestamp,
            "population": self.population,
            "min_population": self.min_population,
            "max_population": self.max_population,
            "pool_active": self.pool_active,
            "pool_available": self.pool_available,
            "events": self.events,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> PopulationSample:
        """Create from dictionary (for deserialization)."""
        return cls(
            tick=data["tick"],
            timestamp=data["timestamp"],
            population=data["population"],
            min_population=data["min_population"],
            max_population=data["max_population"],
            pool_active=data.get("pool_active", 0),
            pool_available=data.get("pool_available", 0),
            events=data.get("events", []),
        )
