"""Declarative field length limits."""

from collections.abc import Mapping
from typing import Any, Optional

from bedmanagement.domain.validation.errors import ErrorCode, Errors


class FieldLengthPolicy:
    """Maximum text lengths per entity type and field.

    Limits are declared up front, e.g. ``{BedTag: {"name": 50}}``. Fields
    without a declared limit are unbounded.
    """

    def __init__(self, limits: Mapping[type, Mapping[str, int]]) -> None:
        """Initialize policy.

        Args:
            limits: Maximum length per field, keyed by entity type

        Raises:
            ValueError: If any limit is not a positive integer
        """
        for entity_type, fields in limits.items():
            for field, max_length in fields.items():
                if max_length < 1:
                    name = f"{entity_type.__name__}.{field}"
                    raise ValueError(f"Max length for {name} must be positive")
        self._limits = {
            entity_type: dict(fields) for entity_type, fields in limits.items()
        }

    def max_length(self, entity_type: type, field: str) -> Optional[int]:
        """Get the declared limit for a field.

        Subclasses inherit the limits of their nearest declared base class.
        """
        for cls in entity_type.__mro__:
            if cls in self._limits:
                return self._limits[cls].get(field)
        return None

    def check_lengths(self, errors: Errors, target: Any, *fields: str) -> None:
        """Reject every listed field whose text exceeds its limit.

        Args:
            errors: Collector to record failures on
            target: Object being validated
            fields: Names of the fields to check
        """
        for field in fields:
            max_length = self.max_length(type(target), field)
            if max_length is None:
                continue

            value = getattr(target, field, None)
            if isinstance(value, str) and len(value) > max_length:
                errors.reject_value(
                    field,
                    ErrorCode.FIELD_TOO_LONG,
                    default_message=f"Field '{field}' exceeds {max_length} characters",
                    args=(max_length,),
                    rejected_value=value,
                )
