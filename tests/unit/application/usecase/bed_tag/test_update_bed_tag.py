"""Unit tests for UpdateBedTagUseCase."""

from uuid import uuid4

import pytest

from bedmanagement.application.usecase.bed_tag import (
    UpdateBedTagRequest,
    UpdateBedTagUseCase,
)
from bedmanagement.domain.error import BedTagValidationError, NotFoundError
from bedmanagement.domain.repository import BedTagRepository
from bedmanagement.domain.validation import ErrorCode
from tests.conftest import make_bed_tag
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpdateBedTagUseCase:
    """Tests for UpdateBedTagUseCase."""

    @pytest.mark.asyncio
    async def test_rename_success(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateBedTagUseCase)
        repo = await unit_env.get(BedTagRepository)
        bed_tag = await repo.save(make_bed_tag("ICU"))

        # Act
        response = await use_case.execute(
            UpdateBedTagRequest(bed_tag_id=str(bed_tag.id), name="Intensive Care")
        )

        # Assert
        assert response.bed_tag.id == str(bed_tag.id)
        assert response.bed_tag.name == "Intensive Care"
        stored = await repo.find_by_id(bed_tag.id)
        assert stored.name == "Intensive Care"

    @pytest.mark.asyncio
    async def test_resave_same_name_passes(self, unit_env):
        """Re-saving a tag under its own name should not be a duplicate."""
        # Arrange
        use_case = await unit_env.get(UpdateBedTagUseCase)
        repo = await unit_env.get(BedTagRepository)
        bed_tag = await repo.save(make_bed_tag("Isolation"))

        # Act
        response = await use_case.execute(
            UpdateBedTagRequest(bed_tag_id=str(bed_tag.id), name="ISOLATION")
        )

        # Assert
        assert response.bed_tag.name == "ISOLATION"

    @pytest.mark.asyncio
    async def test_rename_to_active_name_fails(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateBedTagUseCase)
        repo = await unit_env.get(BedTagRepository)
        await repo.save(make_bed_tag("Isolation"))
        bed_tag = await repo.save(make_bed_tag("ICU"))

        # Act & Assert
        with pytest.raises(BedTagValidationError) as exc_info:
            await use_case.execute(
                UpdateBedTagRequest(bed_tag_id=str(bed_tag.id), name="Isolation")
            )

        assert exc_info.value.errors.get_field_errors("name")[0].code == (
            ErrorCode.DUPLICATE_ACTIVE_NAME
        )
        stored = await repo.find_by_id(bed_tag.id)
        assert stored.name == "ICU"

    @pytest.mark.asyncio
    async def test_update_missing_tag_raises(self, unit_env):
        use_case = await unit_env.get(UpdateBedTagUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateBedTagRequest(bed_tag_id=str(uuid4()), name="ICU")
            )
