"""Shared fixtures for the proxy tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from app.config import Credentials, get_credentials
from app.main import app



@pytest.fixture
def credentials() -> Credentials:
    return Credentials(client_id="test-client-id", client_secret="test-client-secret")


@pytest.fixture
def client(credentials: Credentials) -> Iterator[TestClient]:
    """Test client with fake credentials injected in place of the environment."""
    app.dependency_overrides[get_credentials] = lambda: credentials
    yield TestClient(app)
    app.dependency_overrides.clear()
