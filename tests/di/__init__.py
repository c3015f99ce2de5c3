"""Container wiring for tests."""

from .container import build_test_container, default_settings

__all__ = [
    "build_test_container",
    "default_settings",
]
