'''
Time slot proxy endpoints: listing, batch creation, edit and delete.
'''
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status

from ..common import messages
from ..common.logger import log
from ..core.slot_wizard import parse_hhmm, validate_time_range
from ..models import timeslot as timeslot_models
from ..services.proxy_service import ProxyService
from ..services.security import get_auth_token


class TimeSlotsAPI:
    """
    A class to encapsulate the time slot proxy endpoints.
    """
    def __init__(self):
        self.router = APIRouter(
            prefix="/api/timeslots",
            tags=["Time Slots"]
        )
        self._register_routes()

    def _register_routes(self):
        """Registers all the API routes for this class."""
        self.router.add_api_route(
                "/get",
                self.get_timeslots,
                methods=["GET"])

        self.router.add_api_route(
                "/new",
                self.create_timeslots,
                methods=["POST"])

        self.router.add_api_route(
                "/edit",
                self.edit_timeslot,
                methods=["POST"])

        self.router.add_api_route(
                "/delete",
                self.delete_timeslot,
                methods=["POST"])

    async def get_timeslots(
        self,
        token: Annotated[str, Depends(get_auth_token)],
        proxy: Annotated[ProxyService, Depends(ProxyService)]
    ):
        """
        Slots grouped by Gregorian date key, as the backend returns them.
        """
        return await proxy.forward("/timeslots/get", "GET", messages.SLOTS_FETCH_FAILED, token=token)

    async def create_timeslots(
        self,
        data: timeslot_models.SlotsCreateRequest,
        token: Annotated[str, Depends(get_auth_token)],
        proxy: Annotated[ProxyService, Depends(ProxyService)]
    ):
        """
        Submits the wizard's batch (`slotsData`) in one backend call.
        """
        if not data.slotsData:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=messages.SLOTS_DATA_MISSING)
        return await proxy.forward(
            "/timeslots/new", "POST", messages.SLOTS_CREATE_FAILED,
            body=data.slotsData, token=token,
        )

    async def edit_timeslot(
        self,
        data: timeslot_models.SlotEditRequest,
        token: Annotated[str, Depends(get_auth_token)],
        proxy: Annotated[ProxyService, Depends(ProxyService)]
    ):
        """
        Changes the time bounds of one slot. The new range must keep end after
        start and last at least 30 minutes.
        """
        if not data.slot_id or not data.start_time or not data.end_time:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=messages.SLOT_DATA_MISSING)

        try:
            range_error = validate_time_range(parse_hhmm(data.start_time), parse_hhmm(data.end_time))
        except ValueError:
            range_error = messages.SLOT_DATA_MISSING
        if range_error:
            log.warning(f"Rejected edit of slot {data.slot_id}: {data.start_time}-{data.end_time}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=range_error)

        return await proxy.forward(
            "/timeslots/edit", "POST", messages.SLOT_EDIT_FAILED,
            body={"slot_id": data.slot_id, "start_time": data.start_time, "end_time": data.end_time},
            token=token,
        )

    async def delete_timeslot(
        self,
        data: timeslot_models.SlotDeleteRequest,
        token: Annotated[str, Depends(get_auth_token)],
        proxy: Annotated[ProxyService, Depends(ProxyService)]
    ):
        if not data.slot_id:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=messages.SLOT_DATA_MISSING)
        return await proxy.forward(
            "/timeslots/delete", "POST", messages.SLOT_DELETE_FAILED,
            body={"slot_id": data.slot_id}, token=token,
        )

# Instantiate the class and export its router
timeslots_api = TimeSlotsAPI()
router = timeslots_api.router
