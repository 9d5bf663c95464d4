"""
Tests for the BackendClient.
"""
import pytest
import httpx
from unittest.mock import AsyncMock

from dorm_laundry.common.config import settings
from dorm_laundry.common.exceptions import BackendUnavailableError
from dorm_laundry.services.backend_client import BackendClient


@pytest.mark.anyio
class TestBackendClient:
    """Test suite for the BackendClient."""

    @pytest.fixture
    def backend(self) -> BackendClient:
        return BackendClient()

    async def test_sends_api_key_and_token(self, backend: BackendClient, mocker):
        mocked = mocker.patch(
            'httpx.AsyncClient.request',
            new_callable=AsyncMock,
            return_value=httpx.Response(200, json={"success": True, "message": "ok"}),
        )

        data = await backend.safe_json_fetch("/timeslots/get", "GET", token="abc")

        assert data == {"success": True, "message": "ok"}
        args, kwargs = mocked.call_args
        assert args == ("GET", f"{settings.API_BASE_URL.rstrip('/')}/timeslots/get")
        assert kwargs["headers"]["Api-Key"] == settings.API_AUTH_TOKEN
        assert kwargs["headers"]["Authorization"] == "abc"
        assert kwargs["headers"]["Content-Type"] == "application/json"
        assert kwargs["json"] is None

    async def test_no_authorization_header_without_token(self, backend: BackendClient, mocker):
        mocked = mocker.patch(
            'httpx.AsyncClient.request',
            new_callable=AsyncMock,
            return_value=httpx.Response(200, json={"message": "sent"}),
        )

        await backend.safe_json_fetch("/auth/send-code", "POST", body={"phone": "0912"})

        kwargs = mocked.call_args.kwargs
        assert "Authorization" not in kwargs["headers"]
        assert kwargs["json"] == {"phone": "0912"}

    async def test_error_body_is_returned(self, backend: BackendClient, mocker):
        mocker.patch(
            'httpx.AsyncClient.request',
            new_callable=AsyncMock,
            return_value=httpx.Response(422, json={"success": False, "message": "نوبت پر شده است"}),
        )

        data = await backend.safe_json_fetch("/reservations/add", "POST", body={"slot_id": "s-1"})

        assert data == {"success": False, "message": "نوبت پر شده است"}

    async def test_error_without_json_returns_none(self, backend: BackendClient, mocker):
        mocker.patch(
            'httpx.AsyncClient.request',
            new_callable=AsyncMock,
            return_value=httpx.Response(502, text="Bad Gateway"),
        )
        assert await backend.safe_json_fetch("/timeslots/get") is None

    async def test_empty_body_returns_none(self, backend: BackendClient, mocker):
        mocker.patch(
            'httpx.AsyncClient.request',
            new_callable=AsyncMock,
            return_value=httpx.Response(200, text=""),
        )
        assert await backend.safe_json_fetch("/timeslots/get") is None

    async def test_invalid_json_returns_none(self, backend: BackendClient, mocker):
        mocker.patch(
            'httpx.AsyncClient.request',
            new_callable=AsyncMock,
            return_value=httpx.Response(200, text="<html>"),
        )
        assert await backend.safe_json_fetch("/timeslots/get") is None

    async def test_transport_error_raises(self, backend: BackendClient, mocker):
        mocker.patch(
            'httpx.AsyncClient.request',
            new_callable=AsyncMock,
            side_effect=httpx.ConnectError("Connection refused"),
        )
        with pytest.raises(BackendUnavailableError):
            await backend.safe_json_fetch("/timeslots/get")
