"""Domain value objects for bed management."""

from bedmanagement.domain.value.common import ValueObject
from bedmanagement.domain.value.identifiers import BedTagId

__all__ = [
    # Identifiers
    "BedTagId",
    # Base
    "ValueObject",
]
