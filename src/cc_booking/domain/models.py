"""Booking domain model — pure dataclass."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Booking:
    id: str
    ground_name: str  # snapshot taken at booking time, not a reference to the Ground
    date: str         # ISO date
    time: str
    total_price: float


@dataclass(frozen=True)
class BookingOutcome:
    """Result of a booking attempt. ``booking`` is None when the ground was taken."""

    booking: Booking | None
    notice: str

    @property
    def booked(self) -> bool:
        return self.booking is not None
