"""Catalog models: rarity tiers and immutable type records.

Usage:
    iron = TypeRecord(name="Iron Ore", rarity=RarityTier.COMMON, value=2, health=3.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any


class ConfigurationWarning(UserWarning):
    """Authoring or data defect that was absorbed with a deterministic fallback."""


class RarityTier(Enum):
    """Rarity classes in fixed selection order, most common first."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"

    @classmethod
    def parse(cls, value: RarityTier | str) -> RarityTier:
        """Accept a tier, its value, or its name in any case."""
        if isinstance(value, RarityTier):
            return value
        try:
            return cls(value.lower())
        except ValueError:
            raise ValueError(f"Unknown rarity tier: {value!r}") from None


DEFAULT_TIER_WEIGHTS: dict[RarityTier, float] = {
    RarityTier.COMMON: 0.60,
    RarityTier.UNCOMMON: 0.20,
    RarityTier.RARE: 0.12,
    RarityTier.EPIC: 0.06,
    RarityTier.LEGENDARY: 0.02,
}


@dataclass(frozen=True, slots=True)
class TypeRecord:
    """Immutable description of one mineable object type.

    Attributes:
        name: Display/resource name.
        rarity: Tier the type belongs to.
        value: Credits awarded when the object is depleted.
        health: Mining hits required to deplete the object.
        spawn_weight: Relative weight within its tier (higher = more common).
        color: Opaque RGB presentation hint.
        size_range: Opaque (min, max) scale hint for the visual collaborator.
        rotation_speed_range: Opaque (min, max) degrees/second hint.
    """

    name: str
    rarity: RarityTier
    value: int
    health: float
    spawn_weight: float = 1.0
    color: tuple[float, float, float] = (0.5, 0.5, 0.5)
    size_range: tuple[float, float] = (3.0, 8.0)
    rotation_speed_range: tuple[float, float] = (10.0, 30.0)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> TypeRecord:
        """Create from a plain mapping (for data-file loading)."""
        kwargs: dict[str, Any] = {
            "name": data["name"],
            "rarity": RarityTier.parse(data["rarity"]),
            "value": int(data["value"]),
            "health": float(data["health"]),
            "spawn_weight": float(data.get("spawn_weight", 1.0)),
        }
        for key in ("color", "size_range", "rotation_speed_range"):
            if key in data:
                kwargs[key] = tuple(float(v) for v in data[key])
        return cls(**kwargs)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "rarity": self.rarity.value,
            "value": self.value,
            "health": self.health,
            "spawn_weight": self.spawn_weight,
            "color": list(self.color),
            "size_range": list(self.size_range),
            "rotation_speed_range": list(self.rotation_speed_range),
        }
