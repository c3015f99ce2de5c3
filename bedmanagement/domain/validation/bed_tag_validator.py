"""Bed tag validator."""

from typing import Optional, Protocol

import logfire

from bedmanagement.domain.model.bed_tag import BedTag
from bedmanagement.domain.validation.errors import (
    ErrorCode,
    Errors,
    reject_if_empty_or_whitespace,
)
from bedmanagement.domain.validation.field_length import FieldLengthPolicy


class BedTagLookup(Protocol):
    """Read-only access to existing bed tags."""

    async def get_all_bed_tags(self) -> list[BedTag]: ...

    async def get_bed_tag_by_name(self, name: str) -> Optional[BedTag]: ...


class BedTagValidator:
    """Validates a bed tag before it is saved.

    Ensures:
    - name is not None, empty, or whitespace
    - no other active bed tag has the same name (case-insensitive)
    - name fits the declared field length

    A duplicate name is allowed when the conflicting tag is expired.
    Failures are recorded on the Errors collector; nothing is raised.
    """

    def __init__(
        self,
        lookup: BedTagLookup,
        length_policy: FieldLengthPolicy,
        check_expired_candidates: bool = True,
    ) -> None:
        """Initialize validator.

        Args:
            lookup: Source of existing bed tags
            length_policy: Field length limits
            check_expired_candidates: When False, a candidate that is itself
                expired skips the duplicate name check
        """
        self.lookup = lookup
        self.length_policy = length_policy
        self.check_expired_candidates = check_expired_candidates

    def supports(self, cls: type) -> bool:
        """Whether this validator can check instances of ``cls``."""
        return issubclass(cls, BedTag)

    async def validate(self, obj: object, errors: Errors) -> None:
        """Check a candidate bed tag for inconsistencies.

        Args:
            obj: Candidate to validate
            errors: Collector that receives every failure
        """
        if not isinstance(obj, BedTag):
            errors.reject(
                ErrorCode.INVALID_TYPE, "Invalid object type for validation"
            )
            logfire.warn(
                "Rejected non bed tag object", object_type=type(obj).__name__
            )
            return

        with logfire.span("bed_tag_validator.validate", bed_tag_id=str(obj.id)):
            if reject_if_empty_or_whitespace(
                errors, obj, "name", ErrorCode.MISSING_REQUIRED_FIELD
            ):
                return

            if self._should_check_duplicates(obj) and await self._is_name_in_use(
                obj
            ):
                errors.reject_value(
                    "name",
                    ErrorCode.DUPLICATE_ACTIVE_NAME,
                    default_message="Name already in use",
                    rejected_value=obj.name,
                )

            self.length_policy.check_lengths(errors, obj, "name")

            if errors.has_errors():
                logfire.info("Bed tag rejected", codes=errors.codes())

    def _should_check_duplicates(self, candidate: BedTag) -> bool:
        return self.check_expired_candidates or not candidate.expired

    async def _is_name_in_use(self, candidate: BedTag) -> bool:
        """Whether another, non-expired tag already uses the candidate's name."""
        name = candidate.name.lower()
        existing_tags = await self.lookup.get_all_bed_tags()

        return any(
            tag.id != candidate.id and not tag.expired
            for tag in existing_tags
            if tag.name is not None and tag.name.lower() == name
        )
