"""Unit tests for application bootstrap."""

import logging

import pytest

from bedmanagement import bootstrap as bootstrap_module
from bedmanagement.application.usecase.bed_tag import (
    CreateBedTagRequest,
    CreateBedTagUseCase,
    ListBedTagsRequest,
    ListBedTagsUseCase,
)
from bedmanagement.config import Settings
from bedmanagement.util.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo setup_logging's root logger changes after each test."""
    root = logging.getLogger()
    app_logger = logging.getLogger("bedmanagement")
    handlers = list(root.handlers)
    root_level = root.level
    app_level = app_logger.level

    yield

    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(root_level)
    app_logger.setLevel(app_level)


class TestSetupLogging:
    """Tests for setup_logging."""

    def test_debug_enables_debug_level(self):
        setup_logging(Settings(_env_file=None, environment="test", debug=True))

        assert get_logger("bedmanagement").level == logging.DEBUG

    def test_production_logs_warnings_only(self):
        setup_logging(Settings(_env_file=None, environment="production"))

        assert get_logger("bedmanagement").level == logging.WARNING


class TestBootstrap:
    """Tests for bootstrap."""

    @pytest.mark.asyncio
    async def test_bootstrap_builds_working_container(self, monkeypatch):
        """Bootstrap should wire a container whose use cases share one store."""
        # Arrange
        configured = []
        monkeypatch.setattr(
            bootstrap_module, "configure_logfire", lambda s: configured.append(s)
        )
        settings = Settings(_env_file=None, environment="test")

        # Act
        container = bootstrap_module.bootstrap(settings)
        async with container() as request_container:
            create = await request_container.get(CreateBedTagUseCase)
            await create.execute(CreateBedTagRequest(name="ICU"))

        async with container() as request_container:
            list_tags = await request_container.get(ListBedTagsUseCase)
            response = await list_tags.execute(ListBedTagsRequest())
        await container.close()

        # Assert
        assert configured == [settings]
        assert [t.name for t in response.bed_tags] == ["ICU"]


class TestLoggingIsolation:
    """Runs last in this module: earlier setup_logging calls must not leak."""

    def test_logging_state_restored(self):
        root = logging.getLogger()

        assert get_logger("bedmanagement").level == logging.NOTSET
        assert not any(type(h) is logging.StreamHandler for h in root.handlers)
