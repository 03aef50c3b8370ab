"""Entity identity functionality: lightweight pool handles."""

from asteroidfield.core.identity.models import EntityHandle

__all__ = [
    "EntityHandle",
]
