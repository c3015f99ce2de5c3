"""Shared request/response models for bed tag use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from bedmanagement.domain.model.bed_tag import BedTag


class BedTagItem(BaseModel):
    """Bed tag in responses."""

    id: str
    name: Optional[str]
    expired: bool
    date_created: datetime
    date_voided: Optional[datetime] = None
    void_reason: Optional[str] = None

    @classmethod
    def from_bed_tag(cls, bed_tag: BedTag) -> "BedTagItem":
        return cls(
            id=str(bed_tag.id),
            name=bed_tag.name,
            expired=bed_tag.expired,
            date_created=bed_tag.date_created,
            date_voided=bed_tag.date_voided,
            void_reason=bed_tag.void_reason,
        )
