"""Team Request Board: seeded postings, create, join.

Status machine:
    open --join, last slot--> full
    open --join, slots left--> open
Nothing leaves ``full``. ``completed`` exists in TeamRequestStatus but no
operation produces it.

Join does not check whether the name is already listed, so the same player
can take two slots.
"""

from dataclasses import dataclass

from src.cc_common.enums import SkillLevel, TeamRequestStatus
from src.cc_common.id_generator import TimeBasedIdGenerator
from src.cc_team.domain.models import TeamRequest

ANONYMOUS_CAPTAIN = "Anonymous"
ANONYMOUS_MEMBER = "You"
ANONYMOUS_CONTACT = "Contact via app"


@dataclass
class TeamRequestForm:
    """Fields the captain fills in; the form layer validates them."""

    team_name: str
    location: str
    date: str
    time: str
    players_needed: int = 2
    skill_level: str = SkillLevel.ANY.value
    description: str = ""


def seed_requests() -> list[TeamRequest]:
    return [
        TeamRequest(
            id="1",
            captain_name="Rahul Sharma",
            team_name="Hyderabad Strikers",
            location="Aziz Nagar",
            date="2024-01-20",
            time="10:00 AM",
            players_needed=3,
            skill_level=SkillLevel.INTERMEDIATE.value,
            description="Looking for 3 players for weekend match. Need 2 batsmen and 1 bowler.",
            contact="9876543210",
            status=TeamRequestStatus.OPEN.value,
            current_players=["Rahul Sharma", "Vikram Singh"],
        ),
        TeamRequest(
            id="2",
            captain_name="Priya Patel",
            team_name="Cyberabad Warriors",
            location="Shamshabad",
            date="2024-01-21",
            time="2:00 PM",
            players_needed=2,
            skill_level=SkillLevel.BEGINNER.value,
            description="Friendly match, all skill levels welcome. Need 2 more players.",
            contact="9876543211",
            status=TeamRequestStatus.OPEN.value,
            current_players=["Priya Patel", "Arjun Reddy", "Neha Gupta"],
        ),
    ]


class TeamRequestBoard:
    def __init__(
        self,
        requests: list[TeamRequest] | None = None,
        id_generator: TimeBasedIdGenerator | None = None,
    ) -> None:
        self._requests: list[TeamRequest] = list(requests) if requests is not None else seed_requests()
        self._ids = id_generator or TimeBasedIdGenerator()

    @property
    def requests(self) -> list[TeamRequest]:
        return list(self._requests)

    def get(self, request_id: str) -> TeamRequest | None:
        return next((r for r in self._requests if r.id == request_id), None)

    def create(
        self,
        form: TeamRequestForm,
        captain_name: str | None = None,
        captain_phone: str | None = None,
    ) -> TeamRequest:
        """Post a new open request with the captain as its first player."""
        request = TeamRequest(
            id=self._ids.next_id(),
            captain_name=captain_name or ANONYMOUS_CAPTAIN,
            team_name=form.team_name,
            location=form.location,
            date=form.date,
            time=form.time,
            players_needed=form.players_needed,
            skill_level=form.skill_level,
            description=form.description,
            contact=captain_phone or ANONYMOUS_CONTACT,
            status=TeamRequestStatus.OPEN.value,
            current_players=[captain_name or ANONYMOUS_MEMBER],
        )
        self._requests.append(request)
        return request

    def join(self, request_id: str, player_name: str) -> bool:
        """Take one slot. Returns False (and changes nothing) when the
        request is unknown or has no slots left.
        """
        request = self.get(request_id)
        if request is None or not request.has_open_slot:
            return False

        request.current_players.append(player_name)
        request.players_needed -= 1
        request.status = (
            TeamRequestStatus.FULL.value if request.players_needed == 0
            else TeamRequestStatus.OPEN.value
        )
        return True
