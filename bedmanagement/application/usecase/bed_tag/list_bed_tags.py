"""List bed tags use case."""

import logfire
from pydantic import BaseModel

from bedmanagement.application.usecase.base import BaseUseCase
from bedmanagement.application.usecase.bed_tag.common import BedTagItem
from bedmanagement.domain.service import BedTagService


class ListBedTagsRequest(BaseModel):
    """List bed tags request."""

    include_voided: bool = False


class ListBedTagsResponse(BaseModel):
    """List bed tags response."""

    bed_tags: list[BedTagItem]


class ListBedTagsUseCase(BaseUseCase):
    """Use case for listing bed tags."""

    def __init__(self, bed_tag_service: BedTagService) -> None:
        """Initialize list bed tags use case.

        Args:
            bed_tag_service: Bed tag domain service
        """
        self.bed_tag_service = bed_tag_service

    async def execute(self, request: ListBedTagsRequest) -> ListBedTagsResponse:
        """Execute list bed tags flow.

        Args:
            request: List bed tags request

        Returns:
            Bed tags ordered by name
        """
        with logfire.span(
            "list_bed_tags.execute", include_voided=request.include_voided
        ):
            bed_tags = await self.bed_tag_service.get_all_bed_tags(
                include_voided=request.include_voided
            )

            items = [BedTagItem.from_bed_tag(bed_tag) for bed_tag in bed_tags]
            logfire.info("Bed tags listed", count=len(items))

            return ListBedTagsResponse(bed_tags=items)
