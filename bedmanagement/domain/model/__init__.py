"""Domain model entities for bed management."""

from bedmanagement.domain.model.bed_tag import BedTag

__all__ = [
    "BedTag",
]
