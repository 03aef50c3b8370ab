"""Pool handle identity models.

Usage:
    handle = EntityHandle(slot=42, generation=1)
"""

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EntityHandle:
    """Lightweight handle to a pool slot with generation for safe reuse.

    The generation is bumped every time the slot is released, so a handle
    captured before a release no longer matches the slot afterwards.
    """

    slot: int = 0
    generation: int = 0

    def __hash__(self) -> int:
        return hash((self.slot, self.generation))

    def next_generation(self) -> "EntityHandle":
        """Handle the same slot will carry after its next release."""
        return EntityHandle(slot=self.slot, generation=self.generation + 1)
