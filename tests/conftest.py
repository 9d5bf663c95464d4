'''
Pytest configuration for the FastAPI application.

This file sets up fixtures for:
1. Forcing the application into TEST_MODE before any code is imported.
2. Replacing the BackendClient dependency with a recording fake, so no
   test ever reaches a real backend.
3. Providing a FastAPI TestClient for endpoint testing.
'''
import os

os.environ["TEST_MODE"] = "True"
os.environ["COOKIE_SECURE"] = "False"

import pytest
from typing import Any, Optional
from fastapi.testclient import TestClient

from dorm_laundry.main import app
from dorm_laundry.common.config import settings
from dorm_laundry.common.exceptions import BackendUnavailableError
from dorm_laundry.services.backend_client import BackendClient
from tests.constants import TEST_TOKEN


class FakeBackendClient:
    """
    Stands in for BackendClient. Returns `response` (or raises `error`) and
    records every call for assertions.
    """
    def __init__(self):
        self.response: Optional[dict[str, Any]] = {"success": True, "message": "ok"}
        self.error: Optional[Exception] = None
        self.calls: list[dict[str, Any]] = []

    async def safe_json_fetch(self, endpoint, method="GET", body=None, token=None, params=None):
        self.calls.append({
            "endpoint": endpoint,
            "method": method,
            "body": body,
            "token": token,
            "params": params,
        })
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture(scope="session")
def anyio_backend():
    """
    Override the default 'anyio_backend' fixture.
    1. Forces the backend to 'asyncio' (solves 'trio' error).
    2. Promotes the scope to 'session' (solves 'ScopeMismatch').
    """
    return "asyncio"


@pytest.fixture(scope="function")
def fake_backend() -> FakeBackendClient:
    return FakeBackendClient()


@pytest.fixture(scope="function")
def client(fake_backend: FakeBackendClient) -> TestClient:
    """
    TestClient with the BackendClient dependency overridden by the fake.
    """
    assert settings.TEST_MODE is True, \
        "TEST_MODE was not set to True! Check your .env file or environment."

    app.dependency_overrides[BackendClient] = lambda: fake_backend

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture(scope="function")
def authed_client(client: TestClient) -> TestClient:
    """The same client, carrying a session cookie."""
    client.cookies.set(settings.AUTH_COOKIE_NAME, TEST_TOKEN)
    return client


@pytest.fixture
def backend_down(fake_backend: FakeBackendClient) -> FakeBackendClient:
    fake_backend.error = BackendUnavailableError("connection refused")
    return fake_backend
