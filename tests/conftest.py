"""
Pytest configuration for country_record.

Provides fixtures for:
- Sample country records
- Settings isolation (the cached settings are reset around each test)
"""

from __future__ import annotations

import logging
from typing import Generator

import pytest

from country_record.config import Settings, get_settings
from country_record.domain.actions import SetArea, SetCapital, SetPopulation
from country_record.domain.country import Country


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None, None, None]:
    """
    Clear the cached Settings so environment overrides apply per test.
    """
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logging() -> Generator[None, None, None]:
    """
    Restore root handlers and level; the CLI reconfigures logging per command.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def test_settings(monkeypatch: pytest.MonkeyPatch) -> Settings:
    """
    Settings with test-specific overrides applied through the environment.
    """
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("APP_ENV", "test")
    return get_settings()


@pytest.fixture
def sampleland() -> Country:
    return Country("Sampleland", 5_000_000, 100_000, "Sample City")


@pytest.fixture
def flatland() -> Country:
    return Country("Flatland", 100_000, 0, "Flat City")


@pytest.fixture
def full_update_actions() -> list:
    """
    One action of each kind, as used for full-replay scenarios.
    """
    return [SetPopulation(1_500_000), SetArea(250_000), SetCapital("New Capital")]
