"""Account Store: register, login, logout, load persisted accounts.

The in-memory list is the source of truth while the app runs; the
repository mirrors it. Every successful registration rewrites the whole
persisted list.
"""

from src.cc_app.session import Session
from src.cc_common.errors import (
    DuplicateEmailError,
    InvalidCredentialsError,
    ValidationError,
)
from src.cc_common.id_generator import TimeBasedIdGenerator
from src.cc_gateway.auth.password import hash_password, verify_password
from src.cc_gateway.user.models import Player
from src.cc_gateway.user.repository import AccountRepositoryProtocol
from src.cc_gateway.user.schemas import RegisterRequest

REGISTRATION_NOTICE = "Registration successful! Welcome to Cricket-Connect Hyderabad!"
LOGIN_NOTICE = "Login successful"
LOGOUT_NOTICE = "Logged out"


class AccountStore:
    def __init__(
        self,
        repo: AccountRepositoryProtocol,
        id_generator: TimeBasedIdGenerator | None = None,
    ) -> None:
        self._repo = repo
        self._ids = id_generator or TimeBasedIdGenerator()
        self._players: list[Player] = []

    @property
    def players(self) -> list[Player]:
        return list(self._players)

    async def load_persisted(self) -> int:
        """Populate the store from durable storage. Returns how many were loaded."""
        self._players = await self._repo.load_all()
        return len(self._players)

    def find_by_email(self, email: str) -> Player | None:
        return next((p for p in self._players if p.email == email), None)

    async def register(self, candidate: RegisterRequest, session: Session) -> Player:
        """Create an account, persist the full list, and log the new player in."""
        if not (candidate.name and candidate.email and candidate.phone and candidate.password):
            raise ValidationError("Please fill all required fields")
        if candidate.password != candidate.confirm_password:
            raise ValidationError("Passwords do not match")
        if self.find_by_email(candidate.email) is not None:
            raise DuplicateEmailError()

        player = Player(
            id=self._ids.next_id(),
            name=candidate.name,
            email=candidate.email,
            phone=candidate.phone,
            password_hash=hash_password(candidate.password),
            batting_style=candidate.batting_style,
            bowling_style=candidate.bowling_style,
            experience=candidate.experience,
        )
        updated = [*self._players, player]
        # Persist before swapping so a storage failure leaves memory unchanged
        await self._repo.save_all(updated)
        self._players = updated

        session.establish(player)
        return player

    def login(self, email: str, password: str, session: Session) -> Player:
        """Linear scan for the first account matching both email and password.

        Unknown email and wrong password raise the same error.
        """
        if not email or not password:
            raise ValidationError("Please fill all fields")

        player = next(
            (
                p for p in self._players
                if p.email == email and verify_password(password, p.password_hash)
            ),
            None,
        )
        if player is None:
            raise InvalidCredentialsError()

        session.establish(player)
        return player

    def logout(self, session: Session) -> None:
        session.clear()
