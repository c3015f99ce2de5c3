"""Test configuration and fixtures."""

from datetime import datetime
from uuid import UUID, uuid4

import logfire

from bedmanagement.domain.model.bed_tag import BedTag
from bedmanagement.domain.value import BedTagId

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)


def make_bed_tag(
    name: str | None,
    bed_tag_id: UUID | None = None,
    voided: bool = False,
) -> BedTag:
    """Helper function to build bed tags for tests.

    Args:
        name: Bed tag name
        bed_tag_id: Optional fixed identifier
        voided: Whether the tag is already voided

    Returns:
        BedTag entity
    """
    return BedTag(
        id=BedTagId(bed_tag_id or uuid4()),
        name=name,
        date_voided=datetime.now() if voided else None,
        void_reason="retired" if voided else None,
    )
