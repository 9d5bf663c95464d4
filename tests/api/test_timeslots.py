import pytest
from fastapi.testclient import TestClient

from dorm_laundry.common import messages
from tests.constants import TEST_TIMESLOTS, TEST_TOKEN


@pytest.mark.anyio
class TestTimeSlotsAPI:

    async def test_requires_session_cookie(self, client: TestClient, fake_backend):
        response = client.get("/api/timeslots/get")

        assert response.status_code == 400
        assert response.json() == {"success": False, "message": messages.TOKEN_NOT_FOUND}
        assert fake_backend.calls == []

    async def test_empty_cookie_is_missing(self, client: TestClient, fake_backend):
        response = client.get("/api/timeslots/get", headers={"Cookie": "auth_token="})

        assert response.status_code == 400
        assert fake_backend.calls == []

    async def test_get_passes_backend_payload_through(self, authed_client: TestClient, fake_backend):
        fake_backend.response = {"success": True, "message": "ok", "timeslots": TEST_TIMESLOTS}

        response = authed_client.get("/api/timeslots/get")

        assert response.status_code == 200
        assert response.json() == fake_backend.response
        assert fake_backend.calls[0] == {
            "endpoint": "/timeslots/get",
            "method": "GET",
            "body": None,
            "token": TEST_TOKEN,
            "params": None,
        }

    async def test_empty_message_is_401(self, authed_client: TestClient, fake_backend):
        fake_backend.response = {"success": True, "message": ""}

        response = authed_client.get("/api/timeslots/get")

        assert response.status_code == 401
        assert response.json()["message"] == messages.SLOTS_FETCH_FAILED

    async def test_unparseable_backend_answer_is_401(self, authed_client: TestClient, fake_backend):
        fake_backend.response = None

        response = authed_client.get("/api/timeslots/get")

        assert response.status_code == 401

    async def test_backend_down_is_500(self, authed_client: TestClient, backend_down):
        response = authed_client.get("/api/timeslots/get")

        assert response.status_code == 500
        assert response.json() == {"success": False, "message": messages.SERVER_ERROR}

    async def test_new_forwards_slots_data(self, authed_client: TestClient, fake_backend):
        slots_data = {"date_selection": {"mode": "specific", "specific_date": "2024-03-20"}, "slots": []}

        response = authed_client.post("/api/timeslots/new", json={"slotsData": slots_data})

        assert response.status_code == 200
        assert fake_backend.calls[0]["endpoint"] == "/timeslots/new"
        assert fake_backend.calls[0]["body"] == slots_data

    async def test_new_without_slots_data(self, authed_client: TestClient, fake_backend):
        response = authed_client.post("/api/timeslots/new", json={})

        assert response.status_code == 400
        assert response.json()["message"] == messages.SLOTS_DATA_MISSING
        assert fake_backend.calls == []

    async def test_edit_rejects_short_range(self, authed_client: TestClient, fake_backend):
        response = authed_client.post(
            "/api/timeslots/edit",
            json={"slot_id": "s-1", "start_time": "10:00", "end_time": "10:29"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == messages.MIN_SLOT_DURATION
        assert fake_backend.calls == []

    async def test_edit_rejects_inverted_range(self, authed_client: TestClient):
        response = authed_client.post(
            "/api/timeslots/edit",
            json={"slot_id": "s-1", "start_time": "11:00", "end_time": "10:00"},
        )

        assert response.status_code == 400
        assert response.json()["message"] == messages.END_AFTER_START

    async def test_edit_accepts_thirty_minutes(self, authed_client: TestClient, fake_backend):
        response = authed_client.post(
            "/api/timeslots/edit",
            json={"slot_id": "s-1", "start_time": "10:00", "end_time": "10:30"},
        )

        assert response.status_code == 200
        assert fake_backend.calls[0]["body"] == {"slot_id": "s-1", "start_time": "10:00", "end_time": "10:30"}

    async def test_edit_with_missing_field(self, authed_client: TestClient):
        response = authed_client.post("/api/timeslots/edit", json={"slot_id": "s-1", "start_time": "10:00"})

        assert response.status_code == 400
        assert response.json()["message"] == messages.SLOT_DATA_MISSING

    async def test_delete(self, authed_client: TestClient, fake_backend):
        response = authed_client.post("/api/timeslots/delete", json={"slot_id": "s-2"})

        assert response.status_code == 200
        assert fake_backend.calls[0]["endpoint"] == "/timeslots/delete"
        assert fake_backend.calls[0]["body"] == {"slot_id": "s-2"}

    async def test_unknown_route_uses_envelope(self, authed_client: TestClient):
        response = authed_client.get("/api/timeslots/nope")

        assert response.status_code == 404
        assert response.json()["success"] is False
