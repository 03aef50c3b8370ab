"""Protocols for population telemetry.

These protocols define the interface for consumers of per-tick population
samples, allowing different implementations (in-memory, debug HUD, metrics).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from asteroidfield.tracing.models import PopulationSample


@runtime_checkable
class PopulationMonitor(Protocol):
    """Protocol for receiving population samples from the controller.

    The controller calls ``record`` once per tick, synchronously, at the end
    of the tick. Implementations must not mutate the controller from inside
    ``record``.

    Usage:
        history = PopulationHistory(max_samples=600)
        controller = PopulationController(pool, observer, selector, monitor=history)
    """

    def record(self, sample: PopulationSample) -> None:
        """Receive one tick's sample.

        Args:
            sample: Population state at the end of the tick.
        """
        ...
