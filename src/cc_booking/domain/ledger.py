"""Booking Ledger.

A booking has no slot: once booked at any hour, a ground stays unavailable
for the rest of the run. Booking writes to the Ground it is handed, which
is the same object the catalog holds.
"""

from collections.abc import Callable
from datetime import date

from config.settings import settings
from src.cc_booking.domain.models import Booking, BookingOutcome
from src.cc_common.datetime_utils import local_today
from src.cc_common.enums import GroundAvailability
from src.cc_common.id_generator import TimeBasedIdGenerator
from src.cc_common.rupees import hourly_rate_display
from src.cc_ground.domain.models import Ground

ALREADY_BOOKED_NOTICE = "This ground is already booked. Please try another one."


class BookingLedger:
    def __init__(
        self,
        id_generator: TimeBasedIdGenerator | None = None,
        today: Callable[[], date] = local_today,
        default_time: str | None = None,
    ) -> None:
        self._bookings: list[Booking] = []
        self._ids = id_generator or TimeBasedIdGenerator()
        self._today = today
        self._default_time = default_time or settings.DEFAULT_BOOKING_TIME

    @property
    def bookings(self) -> list[Booking]:
        return list(self._bookings)

    def __len__(self) -> int:
        return len(self._bookings)

    def book(self, ground: Ground) -> BookingOutcome:
        """Record a booking and mark the ground Booked; a booked ground is left untouched."""
        if not ground.is_available:
            return BookingOutcome(booking=None, notice=ALREADY_BOOKED_NOTICE)

        booking = Booking(
            id=self._ids.next_id(),
            ground_name=ground.name,
            date=self._today().isoformat(),
            time=self._default_time,
            total_price=ground.price_per_hour,
        )
        self._bookings.append(booking)
        ground.availability = GroundAvailability.BOOKED.value
        return BookingOutcome(
            booking=booking,
            notice=f"Successfully booked {ground.name} for {hourly_rate_display(ground.price_per_hour)}!",
        )
