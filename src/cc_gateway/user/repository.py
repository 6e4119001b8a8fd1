"""Durable account storage: one Redis key holding the JSON array of all players.

The slot is replaced wholesale with a single SET on every save, so a reader
never sees a half-written list.
"""

from typing import Protocol

from pydantic import TypeAdapter

from config.settings import settings
from src.cc_gateway.user.models import Player

_PLAYERS = TypeAdapter(list[Player])


class KeyValueStore(Protocol):
    """The two Redis calls the repository needs (redis.asyncio.Redis satisfies it)."""

    async def get(self, name: str) -> str | bytes | None: ...

    async def set(self, name: str, value: str) -> object: ...


class AccountRepositoryProtocol(Protocol):
    async def load_all(self) -> list[Player]: ...

    async def save_all(self, players: list[Player]) -> None: ...


class RedisAccountRepository:
    def __init__(self, store: KeyValueStore, key: str | None = None) -> None:
        self._store = store
        self._key = key or settings.ACCOUNTS_STORAGE_KEY

    async def load_all(self) -> list[Player]:
        """Return persisted players; an absent slot is an empty list."""
        raw = await self._store.get(self._key)
        if raw is None:
            return []
        return _PLAYERS.validate_json(raw)

    async def save_all(self, players: list[Player]) -> None:
        await self._store.set(self._key, _PLAYERS.dump_json(players).decode("utf-8"))
