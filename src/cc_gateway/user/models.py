"""Player (account) domain model — pure dataclass, serialized as-is to storage."""

from dataclasses import dataclass


@dataclass
class Player:
    id: str
    name: str
    email: str           # unique across the store, compared case-sensitively
    phone: str
    password_hash: str   # bcrypt, never the plain password
    batting_style: str = ""
    bowling_style: str = ""
    experience: str = ""
