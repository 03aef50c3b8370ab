"""Bounded in-memory population history."""

from __future__ import annotations

from collections import deque
from typing import Any

from asteroidfield.tracing.models import PopulationSample


class PopulationHistory:
    """Keeps the most recent samples; older ones are evicted.

    Args:
        max_samples: Number of samples retained.
    """

    def __init__(self, max_samples: int = 1000) -> None:
        if max_samples < 1:
            raise ValueError(f"max_samples must be >= 1, got {max_samples}")
        self._samples: deque[PopulationSample] = deque(maxlen=max_samples)

    def record(self, sample: PopulationSample) -> None:
        self._samples.append(sample)

    @property
    def latest(self) -> PopulationSample | None:
        return self._samples[-1] if self._samples else None

    @property
    def samples(self) -> tuple[PopulationSample, ...]:
        return tuple(self._samples)

    def __len__(self) -> int:
        return len(self._samples)

    def events(self, event_type: str | None = None) -> list[dict[str, Any]]:
        """Flattened events across retained samples, optionally filtered by type."""
        return [
            event
            for sample in self._samples
            for event in sample.events
            if event_type is None or event.get("type") == event_type
        ]

    def clear(self) -> None:
        self._samples.clear()
