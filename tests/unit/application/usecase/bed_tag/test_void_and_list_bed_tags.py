"""Unit tests for VoidBedTagUseCase and ListBedTagsUseCase."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from bedmanagement.application.usecase.bed_tag import (
    CreateBedTagRequest,
    CreateBedTagUseCase,
    ListBedTagsRequest,
    ListBedTagsUseCase,
    VoidBedTagRequest,
    VoidBedTagUseCase,
)
from bedmanagement.domain.error import NotFoundError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestVoidBedTagUseCase:
    """Tests for VoidBedTagUseCase."""

    @pytest.mark.asyncio
    async def test_void_frees_name_for_reuse(self, unit_env):
        """After voiding, a new tag can take the same name."""
        # Arrange
        create = await unit_env.get(CreateBedTagUseCase)
        void = await unit_env.get(VoidBedTagUseCase)
        created = await create.execute(CreateBedTagRequest(name="Isolation"))

        # Act
        voided = await void.execute(
            VoidBedTagRequest(bed_tag_id=created.bed_tag.id, reason="Ward closed")
        )
        recreated = await create.execute(CreateBedTagRequest(name="Isolation"))

        # Assert
        assert voided.bed_tag.expired
        assert voided.bed_tag.void_reason == "Ward closed"
        assert recreated.bed_tag.id != created.bed_tag.id

    @pytest.mark.asyncio
    async def test_void_missing_tag_raises(self, unit_env):
        void = await unit_env.get(VoidBedTagUseCase)

        with pytest.raises(NotFoundError):
            await void.execute(VoidBedTagRequest(bed_tag_id=str(uuid4()), reason="x"))

    def test_void_requires_reason(self):
        with pytest.raises(ValidationError):
            VoidBedTagRequest(bed_tag_id=str(uuid4()), reason="")


class TestListBedTagsUseCase:
    """Tests for ListBedTagsUseCase."""

    @pytest.mark.asyncio
    async def test_list_hides_voided_by_default(self, unit_env):
        # Arrange
        create = await unit_env.get(CreateBedTagUseCase)
        void = await unit_env.get(VoidBedTagUseCase)
        list_tags = await unit_env.get(ListBedTagsUseCase)
        await create.execute(CreateBedTagRequest(name="ICU"))
        old = await create.execute(CreateBedTagRequest(name="Annex"))
        await void.execute(
            VoidBedTagRequest(bed_tag_id=old.bed_tag.id, reason="Closed")
        )

        # Act
        active = await list_tags.execute(ListBedTagsRequest())
        everything = await list_tags.execute(ListBedTagsRequest(include_voided=True))

        # Assert
        assert [t.name for t in active.bed_tags] == ["ICU"]
        assert [t.name for t in everything.bed_tags] == ["Annex", "ICU"]
