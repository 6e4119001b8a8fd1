"""BookingApplicationService — resolves the ground, then hands it to the ledger."""

from src.cc_app.state import AppState
from src.cc_booking.application.schemas import BookingListResponse, BookingOut, BookingResult
from src.cc_ground.application.service import GroundApplicationService


class BookingApplicationService:
    def __init__(self, grounds: GroundApplicationService | None = None) -> None:
        self._grounds = grounds or GroundApplicationService()

    def book(self, state: AppState, ground_id: str) -> tuple[BookingResult, str]:
        """Returns (result, notice). An already-booked ground is a notice, not an error."""
        ground = self._grounds.require_ground(state, ground_id)
        outcome = state.ledger.book(ground)
        return BookingResult.from_outcome(outcome), outcome.notice

    def list_bookings(self, state: AppState) -> BookingListResponse:
        items = [BookingOut.from_domain(b) for b in state.ledger.bookings]
        return BookingListResponse(items=items, total=len(items))
