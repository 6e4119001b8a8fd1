"""Application state: everything one running Cricket Connect instance owns.

A single AppState is built at startup and stored on ``app.state.cricket``.
Handlers receive it through ``get_app_state`` and pass it to the services;
no domain state lives in module globals.
"""

import logging
import random
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from config.settings import settings
from src.cc_app.session import Session
from src.cc_booking.domain.ledger import BookingLedger
from src.cc_common.id_generator import TimeBasedIdGenerator
from src.cc_gateway.user.repository import KeyValueStore, RedisAccountRepository
from src.cc_gateway.user.service import AccountStore
from src.cc_ground.domain.loader import load_grounds, read_fixture
from src.cc_ground.domain.models import Ground
from src.cc_team.domain.board import TeamRequestBoard

logger = logging.getLogger("cc.startup")


@dataclass
class AppState:
    grounds: list[Ground]
    accounts: AccountStore
    board: TeamRequestBoard
    ledger: BookingLedger
    session: Session = field(default_factory=Session)


async def build_app_state(
    store: KeyValueStore,
    records: Iterable[Mapping[str, Any]] | None = None,
    fixture_path: Path | None = None,
    seed: int | None = None,
    ids: TimeBasedIdGenerator | None = None,
) -> AppState:
    """Run the startup sequence: load grounds, load persisted accounts, seed the board.

    ``records`` bypasses the fixture file. ``seed`` falls back to
    AVAILABILITY_SEED; both None means unseeded availability.
    """
    if records is None:
        records = read_fixture(fixture_path or settings.GROUNDS_FIXTURE_PATH)
    if seed is None:
        seed = settings.AVAILABILITY_SEED
    ids = ids or TimeBasedIdGenerator()

    grounds = load_grounds(records, random.Random(seed))
    accounts = AccountStore(RedisAccountRepository(store), id_generator=ids)
    loaded = await accounts.load_persisted()

    logger.info("Loaded %d grounds and %d persisted accounts", len(grounds), loaded)
    return AppState(
        grounds=grounds,
        accounts=accounts,
        board=TeamRequestBoard(id_generator=ids),
        ledger=BookingLedger(id_generator=ids),
    )
