"""Void bed tag use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from bedmanagement.application.usecase.base import BaseUseCase
from bedmanagement.application.usecase.bed_tag.common import BedTagItem
from bedmanagement.domain.service import BedTagService
from bedmanagement.domain.value import BedTagId


class VoidBedTagRequest(BaseModel):
    """Void bed tag request."""

    bed_tag_id: str
    reason: str = Field(min_length=1, max_length=255)


class VoidBedTagResponse(BaseModel):
    """Void bed tag response."""

    bed_tag: BedTagItem


class VoidBedTagUseCase(BaseUseCase):
    """Use case for voiding a bed tag so its name can be reused."""

    def __init__(self, bed_tag_service: BedTagService) -> None:
        self.bed_tag_service = bed_tag_service

    async def execute(self, request: VoidBedTagRequest) -> VoidBedTagResponse:
        """Execute void bed tag flow.

        Raises:
            NotFoundError: If the bed tag does not exist
        """
        with logfire.span("void_bed_tag.execute", bed_tag_id=request.bed_tag_id):
            voided = await self.bed_tag_service.void_bed_tag(
                BedTagId(UUID(request.bed_tag_id)), request.reason
            )
            return VoidBedTagResponse(bed_tag=BedTagItem.from_bed_tag(voided))
