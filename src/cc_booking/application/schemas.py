"""Pydantic schemas for cc_booking API responses."""

from pydantic import BaseModel

from src.cc_booking.domain.models import Booking, BookingOutcome
from src.cc_common.rupees import rupees_to_display


class BookingOut(BaseModel):
    id: str
    ground_name: str
    date: str
    time: str
    total_price: float
    total_price_display: str

    @classmethod
    def from_domain(cls, b: Booking) -> "BookingOut":
        return cls(
            id=b.id,
            ground_name=b.ground_name,
            date=b.date,
            time=b.time,
            total_price=b.total_price,
            total_price_display=rupees_to_display(b.total_price),
        )


class BookingResult(BaseModel):
    booked: bool
    booking: BookingOut | None

    @classmethod
    def from_outcome(cls, outcome: BookingOutcome) -> "BookingResult":
        return cls(
            booked=outcome.booked,
            booking=BookingOut.from_domain(outcome.booking) if outcome.booking else None,
        )


class BookingListResponse(BaseModel):
    items: list[BookingOut]
    total: int
