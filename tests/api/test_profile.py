import pytest
from fastapi.testclient import TestClient

from dorm_laundry.common import messages


@pytest.mark.anyio
class TestProfileAPI:

    async def test_edit_forwards_values(self, authed_client: TestClient, fake_backend):
        fake_backend.response = {"success": True, "message": "پروفایل ویرایش شد"}

        response = authed_client.post(
            "/api/profile/edit",
            json={"user_id": "u-1001", "values": {"first_name": "حسین", "student_id": "400999"}},
        )

        assert response.status_code == 200
        assert fake_backend.calls[0]["endpoint"] == "/users/edit-profile"
        assert fake_backend.calls[0]["body"] == {
            "user_id": "u-1001",
            "values": {"first_name": "حسین", "student_id": "400999"},
        }

    @pytest.mark.parametrize("field, value", [("phone", "09129999999"), ("dormitory", "dormitory-2")])
    async def test_identity_fields_are_not_editable(self, authed_client: TestClient, fake_backend, field: str, value: str):
        response = authed_client.post(
            "/api/profile/edit",
            json={"user_id": "u-1001", "values": {field: value}},
        )

        assert response.status_code == 400
        assert fake_backend.calls == []

    async def test_latin_name_is_rejected(self, authed_client: TestClient, fake_backend):
        response = authed_client.post(
            "/api/profile/edit",
            json={"user_id": "u-1001", "values": {"last_name": "Smith"}},
        )

        assert response.status_code == 400
        assert fake_backend.calls == []

    async def test_missing_values(self, authed_client: TestClient):
        response = authed_client.post("/api/profile/edit", json={"user_id": "u-1001"})

        assert response.status_code == 400
        assert response.json()["message"] == messages.PROFILE_DATA_MISSING
