'''
Client for the same-origin `/api` proxy routes, used by client-side code
(the slot wizard submits through `create_timeslots`).
'''
from typing import Any, Optional

import httpx

from ..common.config import settings
from ..common.exceptions import ApiRequestError
from ..common.logger import log
from ..common import messages
from ..models.enums import ReservationStatus
from ..models.reservation import Reservation, ReservationPage
from ..models.timeslot import TimeSlotsByDate, DaySlots, available_only
from ..core.reservations import build_listing_query, can_cancel


class ApiClient:
    """
    Sends JSON requests to `{base_url}/api{endpoint}` carrying the session cookie.
    Non-2xx answers raise ApiRequestError with the envelope's message.
    """
    def __init__(self, base_url: str, auth_token: Optional[str] = None, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.base_url = base_url.rstrip("/")
        self.auth_token = auth_token
        self.transport = transport

    def _cookies(self) -> dict[str, str]:
        if not self.auth_token:
            return {}
        return {settings.AUTH_COOKIE_NAME: self.auth_token}

    async def fetch_api(
        self,
        endpoint: str,
        method: str = "GET",
        body: Optional[Any] = None,
        params: Optional[dict[str, str]] = None,
    ) -> dict[str, Any]:
        try:
            async with httpx.AsyncClient(
                base_url=self.base_url,
                cookies=self._cookies(),
                transport=self.transport,
            ) as client:
                response = await client.request(
                    method,
                    f"/api{endpoint}",
                    json=body,
                    params=params,
                    headers={"Content-Type": "application/json"},
                )
        except httpx.RequestError as e:
            log.error(f"API error for {endpoint}: {e}", exc_info=True)
            raise ApiRequestError(messages.SERVER_ERROR) from e

        if not response.is_success:
            try:
                error_data = response.json()
            except ValueError:
                error_data = {}
            if not isinstance(error_data, dict):
                error_data = {}
            message = error_data.get("message") or f"Error: {response.status_code}"
            log.error(f"API error for {endpoint}: {message}")
            raise ApiRequestError(message, status_code=response.status_code)

        try:
            data = response.json()
        except ValueError as e:
            log.error(f"API response for {endpoint} is not JSON: {e}")
            raise ApiRequestError(messages.SERVER_ERROR, status_code=response.status_code) from e
        if not isinstance(data, dict):
            log.error(f"API response for {endpoint} is not an object.")
            raise ApiRequestError(messages.SERVER_ERROR, status_code=response.status_code)
        return data

    # --- Time slots ---

    async def get_timeslots(self) -> TimeSlotsByDate:
        data = await self.fetch_api("/timeslots/get")
        if not data.get("success"):
            raise ApiRequestError(data.get("message") or messages.SLOTS_FETCH_FAILED)
        return {
            date_key: DaySlots.model_validate(day_data)
            for date_key, day_data in (data.get("timeslots") or {}).items()
        }

    async def get_bookable_timeslots(self) -> TimeSlotsByDate:
        """Only slots with seats left, for the new-reservation page."""
        return available_only(await self.get_timeslots())

    async def create_timeslots(self, slots_data: dict[str, Any]) -> dict[str, Any]:
        return await self.fetch_api("/timeslots/new", "POST", {"slotsData": slots_data})

    async def edit_timeslot(self, slot_id: str, start_time: str, end_time: str) -> dict[str, Any]:
        return await self.fetch_api(
            "/timeslots/edit",
            "POST",
            {"slot_id": slot_id, "start_time": start_time, "end_time": end_time},
        )

    async def delete_timeslot(self, slot_id: str) -> dict[str, Any]:
        return await self.fetch_api("/timeslots/delete", "POST", {"slot_id": slot_id})

    # --- Reservations ---

    async def recent_reservations(self, page: int = 1, status: Optional[str] = "all", search: Optional[str] = None) -> ReservationPage:
        data = await self.fetch_api(
            "/reservations/recent",
            params=build_listing_query(page, status, search),
        )
        if not data.get("success"):
            raise ApiRequestError(data.get("message") or messages.RECENT_FETCH_FAILED)
        return ReservationPage.model_validate(data.get("recent") or {})

    async def add_reservation(self, slot_id: str) -> dict[str, Any]:
        return await self.fetch_api("/reservations/add", "POST", {"slot_id": slot_id})

    async def cancel_reservation(self, reservation: Reservation) -> dict[str, Any]:
        """Only pending reservations are offered for cancellation."""
        if not can_cancel(reservation):
            raise ApiRequestError(messages.CANCEL_NOT_ALLOWED)
        return await self.fetch_api("/reservations/cancel", "POST", {"reservation_id": reservation.id})

    async def manage_reservation(self, reservation_id: str, status: ReservationStatus) -> dict[str, Any]:
        return await self.fetch_api(
            "/reservations/manage",
            "POST",
            {"reservation_id": reservation_id, "status": ReservationStatus(status).value},
        )
