"""Pydantic request/response schemas for cc_gateway.

Required-field and confirmation checks live in AccountStore, not here, so
that an empty field yields the account-level ValidationError (code 1000)
rather than a framework 422.
"""

from pydantic import BaseModel

from src.cc_gateway.user.models import Player


class RegisterRequest(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    password: str = ""
    confirm_password: str = ""
    batting_style: str = ""
    bowling_style: str = ""
    experience: str = ""


class LoginRequest(BaseModel):
    email: str = ""
    password: str = ""


class PlayerInfo(BaseModel):
    """Public player fields; the credential never leaves the store."""

    player_id: str
    name: str
    email: str
    phone: str
    batting_style: str
    bowling_style: str
    experience: str

    @classmethod
    def from_domain(cls, p: Player) -> "PlayerInfo":
        return cls(
            player_id=p.id,
            name=p.name,
            email=p.email,
            phone=p.phone,
            batting_style=p.batting_style,
            bowling_style=p.bowling_style,
            experience=p.experience,
        )
