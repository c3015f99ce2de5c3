"""Domain layer errors."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bedmanagement.domain.validation.errors import Errors


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BedTagValidationError(ValidationError):
    """Raised by the save workflow when a bed tag failed validation.

    The collected errors are kept on the exception so callers can surface
    every failure, not only the first one.
    """

    def __init__(self, errors: "Errors"):
        self.errors = errors
        codes = ", ".join(errors.codes()) or "unknown"
        super().__init__(f"Invalid {errors.object_name}: {codes}")


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")
