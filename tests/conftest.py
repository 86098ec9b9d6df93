"""Pytest configuration for all tests."""

import pytest

from hookwire.core.config import Settings, get_settings
from hookwire.core.hooks import HookDecorator, HookEngine
from hookwire.runtime import Runtime


@pytest.fixture(autouse=True)
def _clear_settings_cache():
    """Make every test load settings from a clean environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def settings() -> Settings:
    """Settings for the testing environment."""
    return Settings(environment="testing", log_format="json", log_level="WARNING")


@pytest.fixture
def engine() -> HookEngine:
    return HookEngine()


@pytest.fixture
def hooks(engine: HookEngine) -> HookDecorator:
    return HookDecorator(engine)


@pytest.fixture
def runtime(settings: Settings) -> Runtime:
    return Runtime(settings)
