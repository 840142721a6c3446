"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from cv_profile_core.models.profile import CVProfile
from tests.mocks.mock_factories import make_cv_profile
from tests.mocks.mock_settings import make_settings
from tests.mocks.mock_tools import FakeDecoder, load_resume_text


@pytest.fixture
def mock_settings() -> MagicMock:
    """Return a MagicMock Settings with sensible defaults."""
    return make_settings()


@pytest.fixture
def sample_profile() -> CVProfile:
    """Return a fully populated CVProfile."""
    return make_cv_profile()


@pytest.fixture
def resume_text() -> str:
    """Return the fixture resume text."""
    return load_resume_text()


@pytest.fixture
def fake_decoder() -> FakeDecoder:
    """Return a decoder serving the fixture resume."""
    return FakeDecoder()
