"""Shared fixtures for the test suite."""

import pytest
from fastapi.testclient import TestClient

from user_directory_api.app.core.config import Settings
from user_directory_api.app.core.store import UserStore
from user_directory_api.app.main import create_app
from user_directory_api.app.services.user_service import UserService


@pytest.fixture
def store():
    """A store holding the two sample users."""
    return UserStore()


@pytest.fixture
def empty_store():
    return UserStore(seed=False)


@pytest.fixture
def service(store):
    return UserService(store)


@pytest.fixture
def client():
    """A test client bound to a fresh application with sample users."""
    app = create_app(Settings(seed_sample_users=True))
    with TestClient(app) as test_client:
        yield test_client
