"""Two-stage weighted type selection: rarity tier first, then type within tier.

Usage:
    selector = WeightedTypeSelector(default_registry(), rng=random.Random(7))
    record = selector.select_type()
"""

from __future__ import annotations

import math
import random
import warnings
from collections.abc import Mapping, Sequence

from asteroidfield.core.catalog.models import (
    DEFAULT_TIER_WEIGHTS,
    ConfigurationWarning,
    RarityTier,
    TypeRecord,
)
from asteroidfield.core.catalog.registry import TypeRegistry


def _warn(message: str) -> None:
    warnings.warn(message, ConfigurationWarning, stacklevel=3)


class WeightedTypeSelector:
    """Samples type records from a registry using tier and per-type weights.

    Cumulative walks pick the first entry whose running total is >= the draw,
    so floating-point boundary ties resolve toward the earlier, more common
    entry.

    Args:
        registry: Read-only type registry.
        tier_weights: Probability per tier. Missing tiers weigh 0.
            Defaults to DEFAULT_TIER_WEIGHTS.
        rng: Random source. A fresh unseeded generator if omitted.
    """

    def __init__(
        self,
        registry: TypeRegistry,
        tier_weights: Mapping[RarityTier, float] | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self._registry = registry
        self._rng = rng or random.Random()
        weights = DEFAULT_TIER_WEIGHTS if tier_weights is None else tier_weights

        self._tier_weights: tuple[tuple[RarityTier, float], ...] = tuple(
            (tier, self._checked_weight(tier, weights.get(tier, 0.0))) for tier in RarityTier
        )
        self._tier_total = sum(weight for _, weight in self._tier_weights)
        self._normalised = math.isclose(self._tier_total, 1.0, abs_tol=1e-6)

        if self._tier_total > 0.0 and not self._normalised:
            _warn(f"Tier weights sum to {self._tier_total:.6f}, not 1.0; sampling is normalised")

    @staticmethod
    def _checked_weight(tier: RarityTier, weight: float) -> float:
        if weight < 0.0:
            _warn(f"Tier {tier.name} has negative weight {weight}; treated as 0")
            return 0.0
        return float(weight)

    @property
    def registry(self) -> TypeRegistry:
        return self._registry

    def tier_probabilities(self) -> dict[RarityTier, float]:
        """Normalised tier table in enumeration order."""
        if self._tier_total <= 0.0:
            return {tier: 0.0 for tier, _ in self._tier_weights}
        return {tier: weight / self._tier_total for tier, weight in self._tier_weights}

    def select_tier(self) -> RarityTier | None:
        """Stage one: pick a tier, or None when the tier table is unusable."""
        if self._tier_total <= 0.0:
            return None

        roll = self._rng.random()
        if not self._normalised:
            roll *= self._tier_total
        cumulative = 0.0
        chosen: RarityTier | None = None
        for tier, weight in self._tier_weights:
            if weight <= 0.0:
                continue
            cumulative += weight
            chosen = tier
            if roll <= cumulative:
                return tier
        # Rounding overshoot lands on the last weighted tier
        return chosen

    def select_from_tier(self, tier: RarityTier) -> TypeRecord | None:
        """Stage two: weighted pick among the tier's records."""
        candidates = self._registry.by_tier(tier)
        if not candidates:
            return None
        return self._weighted_pick(tier, candidates)

    def _weighted_pick(self, tier: RarityTier, candidates: Sequence[TypeRecord]) -> TypeRecord:
        total = sum(max(record.spawn_weight, 0.0) for record in candidates)
        if total <= 0.0:
            _warn(f"Tier {tier.name} has non-positive total type weight; using {candidates[0].name}")
            return candidates[0]

        roll = self._rng.random() * total
        cumulative = 0.0
        for record in candidates:
            weight = max(record.spawn_weight, 0.0)
            if weight <= 0.0:
                continue
            cumulative += weight
            if roll <= cumulative:
                return record
        return candidates[0]

    def select_type(self) -> TypeRecord | None:
        """Pick a type record.

        Configuration defects (empty tier, unusable weights) emit a
        ConfigurationWarning and fall back to the first type of the tier, or
        the first type of the registry.

        Returns:
            The selected record, or None only when the registry is empty.
        """
        fallback = self._registry.first()
        if fallback is None:
            _warn("Type registry is empty; nothing can be selected")
            return None

        tier = self.select_tier()
        if tier is None:
            _warn(f"Tier weights have non-positive total; using {fallback.name}")
            return fallback

        record = self.select_from_tier(tier)
        if record is None:
            _warn(f"No types assigned to tier {tier.name}; using {fallback.name}")
            return fallback
        return record
