"""Bed tag entity for labelling beds."""

from datetime import datetime
from typing import Optional
from uuid import uuid4

from pydantic import Field

from bedmanagement.domain.model.common import DomainModel
from bedmanagement.domain.value import BedTagId


class BedTag(DomainModel):
    """Bed tag entity for labelling beds.

    Tags such as "Isolation" or "ICU" are attached to beds. Tags are never
    removed; they are voided instead, and a voided tag is expired.

    The name is deliberately unconstrained here so that an invalid candidate
    can still be built and handed to BedTagValidator.
    """

    id: BedTagId = Field(default_factory=lambda: BedTagId(uuid4()))
    name: Optional[str] = None
    date_created: datetime = Field(default_factory=datetime.now)
    date_voided: Optional[datetime] = None
    void_reason: Optional[str] = None

    @property
    def expired(self) -> bool:
        """Whether this tag has been voided."""
        return self.date_voided is not None

    def rename(self, name: Optional[str]) -> "BedTag":
        """Return a copy of this tag with a new name, keeping its identity."""
        return self.model_copy(update={"name": name})

    def void(self, reason: str, at: Optional[datetime] = None) -> "BedTag":
        """Return a voided copy of this tag.

        Args:
            reason: Why the tag is being voided
            at: Void timestamp (defaults to now)

        Returns:
            Voided tag with the same identity
        """
        return self.model_copy(
            update={"date_voided": at or datetime.now(), "void_reason": reason}
        )
