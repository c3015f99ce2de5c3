"""Error collection for domain validators.

Validators never raise for invalid input. They record failures on an
``Errors`` instance and the caller decides what to do with them. Failures are
either global (about the object as a whole) or scoped to a single field.
"""

from enum import Enum
from typing import Any, Optional

from bedmanagement.domain.value import ValueObject


class ErrorCode(str, Enum):
    """Validation failure codes.

    Values are the message keys used to look up user-facing text.
    """

    INVALID_TYPE = "error.general"
    MISSING_REQUIRED_FIELD = "error.name"
    DUPLICATE_ACTIVE_NAME = "general.error.nameAlreadyInUse"
    FIELD_TOO_LONG = "error.exceededMaxLengthOfField"


class ObjectError(ValueObject):
    """A failure about the validated object as a whole."""

    object_name: str
    code: ErrorCode
    args: tuple[Any, ...] = ()
    default_message: Optional[str] = None


class FieldError(ObjectError):
    """A failure scoped to one field of the validated object."""

    field: str
    rejected_value: Any = None


class Errors:
    """Accumulates global and field errors for one validated object."""

    def __init__(self, object_name: str) -> None:
        """Initialize an empty collector.

        Args:
            object_name: Name of the validated object, used in messages
        """
        self.object_name = object_name
        self._global_errors: list[ObjectError] = []
        self._field_errors: list[FieldError] = []

    def reject(self, code: ErrorCode, default_message: Optional[str] = None) -> None:
        """Record a global error."""
        self._global_errors.append(
            ObjectError(
                object_name=self.object_name,
                code=code,
                default_message=default_message,
            )
        )

    def reject_value(
        self,
        field: str,
        code: ErrorCode,
        default_message: Optional[str] = None,
        args: tuple[Any, ...] = (),
        rejected_value: Any = None,
    ) -> None:
        """Record an error on a single field."""
        self._field_errors.append(
            FieldError(
                object_name=self.object_name,
                field=field,
                code=code,
                args=args,
                default_message=default_message,
                rejected_value=rejected_value,
            )
        )

    @property
    def global_errors(self) -> list[ObjectError]:
        return list(self._global_errors)

    @property
    def field_errors(self) -> list[FieldError]:
        return list(self._field_errors)

    @property
    def error_count(self) -> int:
        return len(self._global_errors) + len(self._field_errors)

    def has_errors(self) -> bool:
        return self.error_count > 0

    def has_global_errors(self) -> bool:
        return bool(self._global_errors)

    def has_field_errors(self, field: Optional[str] = None) -> bool:
        """Whether any field error exists, or any error on ``field`` if given."""
        return bool(self.get_field_errors(field))

    def get_field_errors(self, field: Optional[str] = None) -> list[FieldError]:
        if field is None:
            return self.field_errors
        return [error for error in self._field_errors if error.field == field]

    def codes(self) -> list[str]:
        """Message keys of every recorded error, global errors first."""
        return [error.code.value for error in self._global_errors] + [
            error.code.value for error in self._field_errors
        ]

    def __repr__(self) -> str:
        return f"Errors({self.object_name!r}, codes={self.codes()!r})"


def reject_if_empty_or_whitespace(
    errors: Errors, target: Any, field: str, code: ErrorCode
) -> bool:
    """Reject ``field`` when its value is None, empty, or only whitespace.

    Returns:
        True if the field was rejected
    """
    value = getattr(target, field, None)
    if value is None or not str(value).strip():
        errors.reject_value(field, code, rejected_value=value)
        return True
    return False

