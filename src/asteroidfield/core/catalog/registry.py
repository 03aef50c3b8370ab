"""Read-only registry of type records grouped by rarity tier.

Usage:
    registry = default_registry()
    commons = registry.by_tier(RarityTier.COMMON)

    # Or from a data file already parsed into dicts
    registry = TypeRegistry.from_dicts(json.load(fp))
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from asteroidfield.core.catalog.models import RarityTier, TypeRecord


class TypeRegistry:
    """Immutable registry mapping tiers to their type records.

    Records keep authoring order within each tier, which is the order the
    weighted walk uses.
    """

    def __init__(self, records: Iterable[TypeRecord]) -> None:
        self._records: tuple[TypeRecord, ...] = tuple(records)
        grouped: dict[RarityTier, list[TypeRecord]] = {tier: [] for tier in RarityTier}
        for record in self._records:
            grouped[record.rarity].append(record)
        self._by_tier: dict[RarityTier, tuple[TypeRecord, ...]] = {
            tier: tuple(items) for tier, items in grouped.items()
        }
        self._by_name = {record.name: record for record in self._records}

    @classmethod
    def from_dicts(cls, rows: Iterable[dict[str, Any]]) -> TypeRegistry:
        return cls(TypeRecord.from_dict(row) for row in rows)

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self) -> Iterator[TypeRecord]:
        return iter(self._records)

    def by_tier(self, tier: RarityTier) -> tuple[TypeRecord, ...]:
        """Records assigned to a tier (empty tuple if none)."""
        return self._by_tier[tier]

    def first(self) -> TypeRecord | None:
        """Deterministic default: the first record in authoring order."""
        return self._records[0] if self._records else None

    def find(self, name: str) -> TypeRecord | None:
        return self._by_name.get(name)

    def issues(self) -> list[str]:
        """Describe configuration defects without raising.

        Returns:
            Human-readable problems: empty registry, empty tiers, tiers whose
            per-type weights do not sum to a positive value, duplicate names.
        """
        if not self._records:
            return ["type registry is empty"]

        problems: list[str] = []
        for tier, records in self._by_tier.items():
            if not records:
                problems.append(f"tier {tier.name} has no assigned types")
            elif sum(r.spawn_weight for r in records) <= 0.0:
                problems.append(f"tier {tier.name} has non-positive total type weight")
        if len(self._by_name) != len(self._records):
            problems.append("type registry contains duplicate names")
        return problems


_DEFAULT_CATALOG: tuple[tuple[str, RarityTier, int, tuple[float, float, float]], ...] = (
    ("Iron Ore", RarityTier.COMMON, 2, (0.47, 0.47, 0.51)),
    ("Copper", RarityTier.COMMON, 5, (0.72, 0.45, 0.20)),
    ("Nickel", RarityTier.UNCOMMON, 12, (0.78, 0.78, 0.71)),
    ("Silver", RarityTier.UNCOMMON, 18, (0.75, 0.75, 0.75)),
    ("Titanium", RarityTier.UNCOMMON, 25, (0.59, 0.59, 0.63)),
    ("Gold", RarityTier.RARE, 40, (1.0, 0.84, 0.0)),
    ("Emerald", RarityTier.RARE, 55, (0.0, 0.79, 0.34)),
    ("Platinum", RarityTier.RARE, 70, (0.90, 0.89, 0.89)),
    ("Ruby", RarityTier.EPIC, 100, (0.88, 0.07, 0.37)),
    ("Sapphire", RarityTier.EPIC, 120, (0.06, 0.32, 0.73)),
    ("Obsidian", RarityTier.EPIC, 140, (0.24, 0.20, 0.27)),
    ("Quantum Crystal", RarityTier.LEGENDARY, 200, (0.59, 0.20, 1.0)),
    ("Nebulite", RarityTier.LEGENDARY, 250, (0.0, 1.0, 0.78)),
    ("Dark Matter", RarityTier.LEGENDARY, 350, (0.39, 0.0, 0.59)),
)

# Mining hits per tier; rarer rocks take longer to break.
_TIER_HEALTH: dict[RarityTier, float] = {
    RarityTier.COMMON: 3.0,
    RarityTier.UNCOMMON: 5.0,
    RarityTier.RARE: 8.0,
    RarityTier.EPIC: 12.0,
    RarityTier.LEGENDARY: 20.0,
}


def default_registry() -> TypeRegistry:
    """The stock asteroid catalogue, equal weights within each tier."""
    return TypeRegistry(
        TypeRecord(
            name=name,
            rarity=tier,
            value=value,
            health=_TIER_HEALTH[tier],
            color=color,
        )
        for name, tier, value, color in _DEFAULT_CATALOG
    )
