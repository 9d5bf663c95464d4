'''
Reservation API Models
'''
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .enums import ReservationStatus, PaymentStatus
from .timeslot import TimeSlot


class Reservation(BaseModel):
    """
    A user's claim on exactly one time slot.
    Reservations are never deleted; cancelling is a status change.
    """
    id: str
    user_id: str
    time_slot: Optional[TimeSlot] = None
    status: ReservationStatus
    created_at: datetime
    updated_at: datetime
    payment_status: PaymentStatus = PaymentStatus.PENDING

    model_config = ConfigDict(extra="allow")


class ReservationPage(BaseModel):
    """The `recent` block of a listing response: one page plus the page count."""
    items: list[Reservation] = Field(default_factory=list, alias="list")
    pages: int = 1

    model_config = ConfigDict(populate_by_name=True)


# --- Proxy request bodies ---

class ReservationAddRequest(BaseModel):
    slot_id: Optional[str] = None


class ReservationCancelRequest(BaseModel):
    reservation_id: Optional[str] = None


class ReservationManageRequest(BaseModel):
    reservation_id: Optional[str] = None
    status: Optional[str] = None
