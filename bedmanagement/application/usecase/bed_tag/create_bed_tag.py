"""Create bed tag use case."""

from typing import Optional

import logfire
from pydantic import BaseModel

from bedmanagement.application.usecase.base import BaseUseCase
from bedmanagement.application.usecase.bed_tag.common import BedTagItem
from bedmanagement.domain.error import BedTagValidationError
from bedmanagement.domain.model.bed_tag import BedTag
from bedmanagement.domain.service import BedTagService
from bedmanagement.domain.validation import BedTagValidator, Errors


class CreateBedTagRequest(BaseModel):
    """Create bed tag request.

    The name is not constrained here; BedTagValidator reports every problem.
    """

    name: Optional[str] = None


class CreateBedTagResponse(BaseModel):
    """Create bed tag response."""

    bed_tag: BedTagItem


class CreateBedTagUseCase(BaseUseCase):
    """Use case for creating a new bed tag."""

    def __init__(
        self, bed_tag_service: BedTagService, bed_tag_validator: BedTagValidator
    ) -> None:
        """Initialize create bed tag use case.

        Args:
            bed_tag_service: Bed tag domain service
            bed_tag_validator: Validator run before saving
        """
        self.bed_tag_service = bed_tag_service
        self.bed_tag_validator = bed_tag_validator

    async def execute(self, request: CreateBedTagRequest) -> CreateBedTagResponse:
        """Execute create bed tag flow.

        Args:
            request: Create bed tag request

        Returns:
            Created bed tag

        Raises:
            BedTagValidationError: If the new tag fails validation
        """
        with logfire.span("create_bed_tag.execute", name=request.name):
            candidate = BedTag(name=request.name)

            errors = Errors("bedTag")
            await self.bed_tag_validator.validate(candidate, errors)
            if errors.has_errors():
                raise BedTagValidationError(errors)

            saved = await self.bed_tag_service.save_bed_tag(candidate)
            return CreateBedTagResponse(bed_tag=BedTagItem.from_bed_tag(saved))
