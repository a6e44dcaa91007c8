"""
Shared pytest fixtures for login backend tests.
"""
import os
from unittest.mock import patch

import pytest

from login_backend.di.container import get_container, reset_container
from login_backend.infrastructure.db.in_memory_user_repository import InMemoryUserRepository


@pytest.fixture
def mock_env():
    """Fixture to set common test environment variables."""
    env_vars = {
        "CORS_ORIGINS": "http://localhost:5173",
        "LOG_LEVEL": "DEBUG",
        "PORT": "3000",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def user_repository():
    """Empty in-memory user store."""
    return InMemoryUserRepository()


@pytest.fixture
def fresh_container():
    """Process-wide container with an empty user store, discarded afterwards."""
    reset_container()
    yield get_container()
    reset_container()


@pytest.fixture
def registration_fields():
    return {
        "nombre": "Ana Lopez",
        "dpi": "1234567890123",
        "email": "ana@example.com",
        "password": "secret1",
    }
