"""Domain services."""

from .base import Service
from .bed_tag_service import BedTagService

__all__ = [
    "BedTagService",
    "Service",
]
