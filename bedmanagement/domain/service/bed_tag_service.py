"""Bed tag domain service."""

from typing import Optional

import logfire

from bedmanagement.domain.error import NotFoundError
from bedmanagement.domain.model.bed_tag import BedTag
from bedmanagement.domain.repository.bed_tag import BedTagRepository
from bedmanagement.domain.value import BedTagId

from .base import Service


class BedTagService(Service):
    """Domain service for bed tag operations.

    Also serves as the BedTagLookup consumed by BedTagValidator.
    """

    def __init__(self, bed_tag_repository: BedTagRepository) -> None:
        """Initialize bed tag service.

        Args:
            bed_tag_repository: Bed tag repository
        """
        self.bed_tag_repository = bed_tag_repository

    async def get_all_bed_tags(self, include_voided: bool = True) -> list[BedTag]:
        """Get all bed tags ordered by name.

        Args:
            include_voided: Whether to include voided tags

        Returns:
            List of bed tags
        """
        with logfire.span(
            "bed_tag_service.get_all_bed_tags", include_voided=include_voided
        ):
            bed_tags = await self.bed_tag_repository.find_all(
                include_voided=include_voided
            )
            logfire.info("Bed tags retrieved", count=len(bed_tags))
            return bed_tags

    async def get_bed_tag_by_name(self, name: str) -> Optional[BedTag]:
        """Get a bed tag by name, ignoring case.

        When several tags share the name, the active one wins.

        Args:
            name: Bed tag name

        Returns:
            Bed tag if found, None otherwise
        """
        with logfire.span("bed_tag_service.get_bed_tag_by_name", bed_tag_name=name):
            matches = await self.bed_tag_repository.find_by_name(name)
            if not matches:
                logfire.warn("Bed tag not found", bed_tag_name=name)
                return None

            active = [bed_tag for bed_tag in matches if not bed_tag.expired]
            return active[0] if active else matches[0]

    async def get_bed_tag_by_id(self, bed_tag_id: BedTagId) -> Optional[BedTag]:
        """Get a bed tag by ID."""
        return await self.bed_tag_repository.find_by_id(bed_tag_id)

    async def save_bed_tag(self, bed_tag: BedTag) -> BedTag:
        """Persist a bed tag that has already passed validation.

        Args:
            bed_tag: Bed tag to save

        Returns:
            Saved bed tag
        """
        with logfire.span("bed_tag_service.save_bed_tag", bed_tag_id=str(bed_tag.id)):
            saved = await self.bed_tag_repository.save(bed_tag)
            logfire.info("Bed tag saved", bed_tag_id=str(saved.id), name=saved.name)
            return saved

    async def void_bed_tag(self, bed_tag_id: BedTagId, reason: str) -> BedTag:
        """Void a bed tag, freeing its name for reuse.

        Args:
            bed_tag_id: Bed tag identifier
            reason: Why the tag is being voided

        Returns:
            Voided bed tag

        Raises:
            NotFoundError: If the bed tag does not exist
        """
        with logfire.span("bed_tag_service.void_bed_tag", bed_tag_id=str(bed_tag_id)):
            bed_tag = await self.bed_tag_repository.find_by_id(bed_tag_id)
            if bed_tag is None:
                raise NotFoundError("BedTag", str(bed_tag_id))

            if bed_tag.expired:
                logfire.info("Bed tag already voided", bed_tag_id=str(bed_tag_id))
                return bed_tag

            voided = await self.bed_tag_repository.save(bed_tag.void(reason))
            logfire.info("Bed tag voided", bed_tag_id=str(bed_tag_id), reason=reason)
            return voided
