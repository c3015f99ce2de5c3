"""Update bed tag use case."""

from typing import Optional
from uuid import UUID

import logfire
from pydantic import BaseModel

from bedmanagement.application.usecase.base import BaseUseCase
from bedmanagement.application.usecase.bed_tag.common import BedTagItem
from bedmanagement.domain.error import BedTagValidationError, NotFoundError
from bedmanagement.domain.service import BedTagService
from bedmanagement.domain.validation import BedTagValidator, Errors
from bedmanagement.domain.value import BedTagId


class UpdateBedTagRequest(BaseModel):
    """Update bed tag request."""

    bed_tag_id: str
    name: Optional[str] = None


class UpdateBedTagResponse(BaseModel):
    """Update bed tag response."""

    bed_tag: BedTagItem


class UpdateBedTagUseCase(BaseUseCase):
    """Use case for renaming an existing bed tag."""

    def __init__(
        self, bed_tag_service: BedTagService, bed_tag_validator: BedTagValidator
    ) -> None:
        """Initialize update bed tag use case.

        Args:
            bed_tag_service: Bed tag domain service
            bed_tag_validator: Validator run before saving
        """
        self.bed_tag_service = bed_tag_service
        self.bed_tag_validator = bed_tag_validator

    async def execute(self, request: UpdateBedTagRequest) -> UpdateBedTagResponse:
        """Execute update bed tag flow.

        Args:
            request: Update bed tag request

        Returns:
            Updated bed tag

        Raises:
            NotFoundError: If the bed tag does not exist
            BedTagValidationError: If the renamed tag fails validation
        """
        with logfire.span(
            "update_bed_tag.execute", bed_tag_id=request.bed_tag_id, name=request.name
        ):
            bed_tag_id = BedTagId(UUID(request.bed_tag_id))
            existing = await self.bed_tag_service.get_bed_tag_by_id(bed_tag_id)
            if existing is None:
                raise NotFoundError("BedTag", request.bed_tag_id)

            candidate = existing.rename(request.name)

            errors = Errors("bedTag")
            await self.bed_tag_validator.validate(candidate, errors)
            if errors.has_errors():
                raise BedTagValidationError(errors)

            saved = await self.bed_tag_service.save_bed_tag(candidate)
            return UpdateBedTagResponse(bed_tag=BedTagItem.from_bed_tag(saved))
