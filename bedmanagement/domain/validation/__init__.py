"""Domain validators.

Validators record failures on an Errors collector instead of raising, so a
single pass reports every problem with a candidate entity.
"""

from .bed_tag_validator import BedTagLookup, BedTagValidator
from .errors import (
    ErrorCode,
    Errors,
    FieldError,
    ObjectError,
    reject_if_empty_or_whitespace,
)
from .field_length import FieldLengthPolicy

__all__ = [
    "BedTagLookup",
    "BedTagValidator",
    "ErrorCode",
    "Errors",
    "FieldError",
    "FieldLengthPolicy",
    "ObjectError",
    "reject_if_empty_or_whitespace",
]
