"""Fixtures for API tests."""

import pytest
from falcon.testing import TestClient

from descregistry.interfaces.api.app import create_app


@pytest.fixture
def app(registry):
    """Falcon ASGI app over an in-memory registry (deployer holds ADMIN)."""
    return create_app(registry)


@pytest.fixture
def client(app) -> TestClient:
    """Falcon ASGI test client."""
    return TestClient(app)


@pytest.fixture
def as_caller():
    """Build the caller header for an account."""

    def _headers(account) -> dict[str, str]:
        return {"X-Caller-Address": account.to_hex()}

    return _headers
