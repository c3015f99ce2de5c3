"""In-memory repository implementations."""

from .bed_tag import InMemoryBedTagRepository

__all__ = [
    "InMemoryBedTagRepository",
]
