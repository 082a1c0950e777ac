"""
Pytest configuration and fixtures for shukujitsu tests.
"""
from datetime import date

import pytest

from shukujitsu.calendars import JapanCalendar
from shukujitsu.config import Settings


def d(text: str) -> date:
    """Shorthand for ISO date literals in parametrized cases."""
    return date.fromisoformat(text)


@pytest.fixture
def calendar() -> JapanCalendar:
    """A calendar with an empty year cache."""
    return JapanCalendar()


@pytest.fixture
def settings() -> Settings:
    return Settings(log_level="WARNING", log_format="text")


@pytest.fixture
def settings_file(tmp_path):
    """Write a YAML settings file and return its path."""
    def _write(content: str):
        path = tmp_path / "shukujitsu.yaml"
        path.write_text(content, encoding="utf-8")
        return path
    return _write
