"""Application layer DI providers."""

from dishka import Scope, provide

from bedmanagement.application.usecase.bed_tag import (
    CreateBedTagUseCase,
    ListBedTagsUseCase,
    UpdateBedTagUseCase,
    VoidBedTagUseCase,
)
from bedmanagement.domain.service import BedTagService
from bedmanagement.domain.validation import BedTagValidator
from bedmanagement.util.di.base import ProviderBase


class ApplicationProvider(ProviderBase):
    """Application use cases provider."""

    @provide(scope=Scope.REQUEST)
    def get_create_bed_tag_use_case(
        self, bed_tag_service: BedTagService, bed_tag_validator: BedTagValidator
    ) -> CreateBedTagUseCase:
        """Provide create bed tag use case."""
        return CreateBedTagUseCase(
            bed_tag_service=bed_tag_service, bed_tag_validator=bed_tag_validator
        )

    @provide(scope=Scope.REQUEST)
    def get_update_bed_tag_use_case(
        self, bed_tag_service: BedTagService, bed_tag_validator: BedTagValidator
    ) -> UpdateBedTagUseCase:
        """Provide update bed tag use case."""
        return UpdateBedTagUseCase(
            bed_tag_service=bed_tag_service, bed_tag_validator=bed_tag_validator
        )

    @provide(scope=Scope.REQUEST)
    def get_void_bed_tag_use_case(
        self, bed_tag_service: BedTagService
    ) -> VoidBedTagUseCase:
        """Provide void bed tag use case."""
        return VoidBedTagUseCase(bed_tag_service=bed_tag_service)

    @provide(scope=Scope.REQUEST)
    def get_list_bed_tags_use_case(
        self, bed_tag_service: BedTagService
    ) -> ListBedTagsUseCase:
        """Provide list bed tags use case."""
        return ListBedTagsUseCase(bed_tag_service=bed_tag_service)
