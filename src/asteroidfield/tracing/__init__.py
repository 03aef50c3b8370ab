"""Telemetry for population counts and lifecycle events.

Usage:
    from asteroidfield.tracing import PopulationHistory, PopulationMonitor

    history = PopulationHistory(max_samples=600)
    controller = PopulationController(pool, observer, selector, monitor=history)
    controller.tick(0.1)
    history.latest.population
"""

from asteroidfield.tracing.history import PopulationHistory
from asteroidfield.tracing.models import PopulationSample
from asteroidfield.tracing.protocol import PopulationMonitor

__all__ = [
    "PopulationHistory",
    "PopulationMonitor",
    "PopulationSample",
]
