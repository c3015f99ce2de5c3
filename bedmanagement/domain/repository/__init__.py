"""Repository interfaces for the bed management domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from bedmanagement.domain.repository.bed_tag import BedTagRepository

__all__ = [
    "BedTagRepository",
]
