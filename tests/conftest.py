"""
Shared pytest fixtures for face viewer tests.
"""
import os
from unittest.mock import MagicMock, patch

import pytest

from face_viewer.core.config import reset_settings
from face_viewer.di.container import reset_container
from face_viewer.infrastructure.cache.session_store import SessionStore


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "PACKAGE_NAME": "com.example.faceviewer",
        "MENTRAOS_API_KEY": "test_mentra_key",
        "ROBOFLOW_API_KEY": "test_roboflow_key",
        "JWT_SECRET_KEY": "test_secret_key_for_testing_only",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        reset_settings()
        yield env_vars
    reset_settings()


@pytest.fixture
def mock_settings():
    """Fixture to mock get_settings for tests. Patches all modules that use it."""
    mock = MagicMock()
    mock.jwt_secret_key = "test_jwt_secret"
    mock.jwt_algorithm = "HS256"
    mock.access_token_expire_minutes = 60

    # Patch at source and at use sites (modules import get_settings at load time)
    with patch("face_viewer.core.config.get_settings", return_value=mock), patch(
        "face_viewer.core.security.get_settings", return_value=mock
    ):
        yield mock


@pytest.fixture
def session_store() -> SessionStore:
    return SessionStore()


@pytest.fixture
def fresh_container():
    """Start and end the test with an empty global DI container (and empty caches)."""
    reset_container()
    yield
    reset_container()
