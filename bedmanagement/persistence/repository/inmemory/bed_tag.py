"""In-memory implementation of BedTag repository."""

from copy import deepcopy
from typing import Optional

from bedmanagement.domain.model.bed_tag import BedTag
from bedmanagement.domain.repository.bed_tag import BedTagRepository
from bedmanagement.domain.value import BedTagId


class InMemoryBedTagRepository(BedTagRepository):
    """In-memory implementation of BedTagRepository."""

    def __init__(self) -> None:
        """Initialize empty repository."""
        self._bed_tags: dict[BedTagId, BedTag] = {}

    async def save(self, bed_tag: BedTag) -> BedTag:
        """Save or update a bed tag."""
        self._bed_tags[bed_tag.id] = deepcopy(bed_tag)
        return deepcopy(bed_tag)

    async def find_by_id(self, bed_tag_id: BedTagId) -> Optional[BedTag]:
        """Find bed tag by ID."""
        bed_tag = self._bed_tags.get(bed_tag_id)
        return deepcopy(bed_tag) if bed_tag else None

    async def find_by_name(self, name: str) -> list[BedTag]:
        """Find bed tags by name, ignoring case."""
        wanted = name.lower()
        return [
            bed_tag
            for bed_tag in await self.find_all()
            if bed_tag.name is not None and bed_tag.name.lower() == wanted
        ]

    async def find_all(self, include_voided: bool = True) -> list[BedTag]:
        """Find all bed tags."""
        bed_tags = [
            bed_tag
            for bed_tag in self._bed_tags.values()
            if include_voided or not bed_tag.expired
        ]
        bed_tags.sort(key=lambda t: ((t.name or "").lower(), t.date_created))
        return [deepcopy(bed_tag) for bed_tag in bed_tags]
