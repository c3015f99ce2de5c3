"""Domain layer DI providers."""

from dishka import Scope, provide

from bedmanagement.config import ValidationSettings
from bedmanagement.domain.model.bed_tag import BedTag
from bedmanagement.domain.repository import BedTagRepository
from bedmanagement.domain.service import BedTagService
from bedmanagement.domain.validation import BedTagValidator, FieldLengthPolicy
from bedmanagement.util.di.base import ProviderBase


class DomainProvider(ProviderBase):
    """Domain services and validators provider.

    Services are REQUEST-scoped; the field length policy only depends on
    settings and is shared for the container's lifetime.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_field_length_policy(
        self, validation_settings: ValidationSettings
    ) -> FieldLengthPolicy:
        """Provide field length limits built from settings."""
        return FieldLengthPolicy(
            {BedTag: {"name": validation_settings.bed_tag_name_max_length}}
        )

    @provide
    def get_bed_tag_service(
        self, bed_tag_repository: BedTagRepository
    ) -> BedTagService:
        """Provide bed tag domain service."""
        return BedTagService(bed_tag_repository=bed_tag_repository)

    @provide
    def get_bed_tag_validator(
        self,
        bed_tag_service: BedTagService,
        length_policy: FieldLengthPolicy,
        validation_settings: ValidationSettings,
    ) -> BedTagValidator:
        """Provide bed tag validator backed by the bed tag service."""
        return BedTagValidator(
            lookup=bed_tag_service,
            length_policy=length_policy,
            check_expired_candidates=validation_settings.check_expired_candidates,
        )
