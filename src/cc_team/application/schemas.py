"""Pydantic schemas for cc_team API requests/responses."""

from pydantic import BaseModel, Field

from src.cc_common.enums import SkillLevel, TeamRequestStatus
from src.cc_team.domain.board import TeamRequestForm
from src.cc_team.domain.models import TeamRequest


class CreateTeamRequest(BaseModel):
    team_name: str = Field(..., min_length=1, max_length=100)
    location: str = Field(..., min_length=1, max_length=100)
    date: str = Field(..., min_length=1)
    time: str = Field(..., min_length=1)
    players_needed: int = Field(2, ge=1, le=10)
    skill_level: SkillLevel = SkillLevel.ANY
    description: str = ""

    def to_form(self) -> TeamRequestForm:
        return TeamRequestForm(
            team_name=self.team_name,
            location=self.location,
            date=self.date,
            time=self.time,
            players_needed=self.players_needed,
            skill_level=self.skill_level.value,
            description=self.description,
        )


class TeamRequestOut(BaseModel):
    id: str
    captain_name: str
    team_name: str
    location: str
    date: str
    time: str
    players_needed: int
    skill_level: str
    description: str
    contact: str
    status: str
    current_players: list[str]
    can_join: bool

    @classmethod
    def from_domain(cls, r: TeamRequest) -> "TeamRequestOut":
        return cls(
            id=r.id,
            captain_name=r.captain_name,
            team_name=r.team_name,
            location=r.location,
            date=r.date,
            time=r.time,
            players_needed=r.players_needed,
            skill_level=r.skill_level,
            description=r.description,
            contact=r.contact,
            status=r.status,
            current_players=list(r.current_players),
            can_join=r.status == TeamRequestStatus.OPEN.value and r.has_open_slot,
        )
