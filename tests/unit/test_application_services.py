"""Unit tests for the ground, booking and team application services."""

import pytest

from src.cc_booking.application.service import BookingApplicationService
from src.cc_common.errors import GroundNotFoundError
from src.cc_gateway.user.models import Player
from src.cc_ground.application.service import GroundApplicationService
from src.cc_team.application.schemas import CreateTeamRequest
from src.cc_team.application.service import (
    FULL_NOTICE,
    JOINED_NOTICE,
    NOT_FOUND_NOTICE,
    TeamApplicationService,
)


def _login(state, name: str = "Imran Khan", phone: str = "9111111111") -> None:
    state.session.establish(
        Player(id="p1", name=name, email="imran@example.com", phone=phone, password_hash="h")
    )


class TestGroundService:
    def test_uses_session_view(self, app_state) -> None:
        app_state.session.search_query = "box"

        result = GroundApplicationService().list_grounds(app_state)

        assert [g.name for g in result.items] == ["Box Zone", "Night Box"]
        assert result.total == 2
        assert result.search_query == "box"

    def test_arguments_update_session(self, app_state) -> None:
        result = GroundApplicationService().list_grounds(app_state, "", "full-ground")

        assert app_state.session.type_filter == "full-ground"
        assert [g.type for g in result.items] == ["full-ground", "full-ground"]

    def test_get_ground_missing(self, app_state) -> None:
        with pytest.raises(GroundNotFoundError):
            GroundApplicationService().get_ground(app_state, "404")

    def test_get_ground_display_price(self, app_state) -> None:
        assert GroundApplicationService().get_ground(app_state, "1").price_display == "₹1500/hour"


class TestBookingService:
    def test_book_then_list(self, app_state) -> None:
        svc = BookingApplicationService()

        result, notice = svc.book(app_state, "2")

        assert result.booked is True
        assert result.booking.ground_name == "Box Zone"
        assert notice == "Successfully booked Box Zone for ₹800/hour!"
        assert app_state.grounds[1].availability == "Booked"
        listing = svc.list_bookings(app_state)
        assert listing.total == 1
        assert listing.items[0].total_price_display == "₹800"

    def test_book_twice(self, app_state) -> None:
        svc = BookingApplicationService()
        svc.book(app_state, "2")

        result, notice = svc.book(app_state, "2")

        assert result.booked is False
        assert result.booking is None
        assert "already booked" in notice
        assert svc.list_bookings(app_state).total == 1

    def test_unknown_ground(self, app_state) -> None:
        with pytest.raises(GroundNotFoundError):
            BookingApplicationService().book(app_state, "99")


class TestTeamService:
    def test_create_as_logged_in_player(self, app_state) -> None:
        _login(app_state)
        body = CreateTeamRequest(team_name="Old City XI", location="Charminar", date="2024-04-01", time="6:00 AM")

        created = TeamApplicationService().create_request(app_state, body)

        assert created.captain_name == "Imran Khan"
        assert created.contact == "9111111111"
        assert created.current_players == ["Imran Khan"]
        assert created.can_join is True

    def test_join_uses_session_name(self, app_state) -> None:
        _login(app_state, name="Sana")

        team, notice = TeamApplicationService().join_request(app_state, "2")

        assert notice == JOINED_NOTICE
        assert team.current_players[-1] == "Sana"
        assert team.players_needed == 1

    def test_join_without_session(self, app_state) -> None:
        team, _ = TeamApplicationService().join_request(app_state, "2")
        assert team.current_players[-1] == "New Player"

    def test_join_until_full(self, app_state) -> None:
        svc = TeamApplicationService()
        svc.join_request(app_state, "2")
        team, notice = svc.join_request(app_state, "2")
        assert team.status == "full"
        assert team.can_join is False

        team, notice = svc.join_request(app_state, "2")
        assert notice == FULL_NOTICE
        assert team.players_needed == 0

    def test_join_missing(self, app_state) -> None:
        team, notice = TeamApplicationService().join_request(app_state, "nope")
        assert team is None
        assert notice == NOT_FOUND_NOTICE
