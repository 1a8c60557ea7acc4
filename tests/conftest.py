"""Shared pytest fixtures and configuration."""

import pytest

from roster.student_store import Gender, Student


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


# Shared fixtures


@pytest.fixture
def jamila() -> Student:
    """A transient student used across store and service tests."""
    return Student("Jamila", "jamila@gmail.com", Gender.FEMALE)
