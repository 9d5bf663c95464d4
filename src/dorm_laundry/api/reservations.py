'''
Reservation proxy endpoints: recent listing, booking, cancelling and
status management.
'''
from typing import Annotated, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from ..common import messages
from ..common.logger import log
from ..core.reservations import build_listing_query
from ..models import reservation as reservation_models
from ..models.enums import ReservationStatus
from ..services.proxy_service import ProxyService
from ..services.security import get_auth_token


class ReservationsAPI:
    """
    A class to encapsulate the reservation proxy endpoints.
    """
    def __init__(self):
        self.router = APIRouter(
            prefix="/api/reservations",
            tags=["Reservations"]
        )
        self._register_routes()

    def _register_routes(self):
        """Registers all the API routes for this class."""
        self.router.add_api_route(
                "/recent",
                self.recent_reservations,
                methods=["GET"])

        self.router.add_api_route(
                "/add",
                self.add_reservation,
                methods=["POST"])

        self.router.add_api_route(
                "/cancel",
                self.cancel_reservation,
                methods=["POST"])

        self.router.add_api_route(
                "/manage",
                self.manage_reservation,
                methods=["POST"])

    async def recent_reservations(
        self,
        token: Annotated[str, Depends(get_auth_token)],
        proxy: Annotated[ProxyService, Depends(ProxyService)],
        page: Annotated[int, Query(ge=1)] = 1,
        status_filter: Annotated[Optional[str], Query(alias="status")] = None,
        reservation_id: Annotated[Optional[str], Query(alias="id")] = None,
    ):
        """
        One page of reservations visible to the caller. The backend scopes the
        list by role (own reservations, one dormitory, or everything).
        """
        params = build_listing_query(page, status_filter or "all", reservation_id)
        return await proxy.forward(
            "/reservations/recent", "GET", messages.RECENT_FETCH_FAILED,
            token=token, params=params,
        )

    async def add_reservation(
        self,
        data: reservation_models.ReservationAddRequest,
        token: Annotated[str, Depends(get_auth_token)],
        proxy: Annotated[ProxyService, Depends(ProxyService)]
    ):
        if not data.slot_id:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=messages.SLOT_ID_MISSING)
        return await proxy.forward(
            "/reservations/add", "POST", messages.RESERVE_FAILED,
            body={"slot_id": data.slot_id}, token=token,
        )

    async def cancel_reservation(
        self,
        data: reservation_models.ReservationCancelRequest,
        token: Annotated[str, Depends(get_auth_token)],
        proxy: Annotated[ProxyService, Depends(ProxyService)]
    ):
        """
        The backend decides whether the reservation is still cancellable;
        its rejection message is passed back unchanged.
        """
        if not data.reservation_id:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=messages.RESERVATION_ID_MISSING)
        return await proxy.forward(
            "/reservations/cancel", "POST", messages.CANCEL_FAILED,
            body={"reservation_id": data.reservation_id}, token=token,
        )

    async def manage_reservation(
        self,
        data: reservation_models.ReservationManageRequest,
        token: Annotated[str, Depends(get_auth_token)],
        proxy: Annotated[ProxyService, Depends(ProxyService)]
    ):
        if not data.reservation_id:
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=messages.RESERVATION_ID_MISSING)
        if data.status not in ReservationStatus.get_all_names():
            log.warning(f"Rejected status change to {data.status!r} for reservation {data.reservation_id}")
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=messages.INVALID_STATUS)
        return await proxy.forward(
            "/reservations/manage", "POST", messages.MANAGE_FAILED,
            body={"reservation_id": data.reservation_id, "status": data.status}, token=token,
        )

# Instantiate the class and export its router
reservations_api = ReservationsAPI()
router = reservations_api.router
