"""Bed tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from bedmanagement.domain.model.bed_tag import BedTag
from bedmanagement.domain.value import BedTagId


class BedTagRepository(ABC):
    """Repository interface for BedTag aggregate."""

    @abstractmethod
    async def save(self, bed_tag: BedTag) -> BedTag:
        """Save or update a bed tag.

        Args:
            bed_tag: Bed tag to save

        Returns:
            Saved bed tag
        """
        pass

    @abstractmethod
    async def find_by_id(self, bed_tag_id: BedTagId) -> Optional[BedTag]:
        """Find bed tag by ID.

        Args:
            bed_tag_id: Bed tag identifier

        Returns:
            Bed tag if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: str) -> list[BedTag]:
        """Find bed tags by name, ignoring case.

        Several tags can share a name when all but one are voided.

        Args:
            name: Bed tag name

        Returns:
            Matching bed tags, voided ones included
        """
        pass

    @abstractmethod
    async def find_all(self, include_voided: bool = True) -> list[BedTag]:
        """Find all bed tags ordered by name.

        Args:
            include_voided: Whether to include voided tags

        Returns:
            List of bed tags
        """
        pass
