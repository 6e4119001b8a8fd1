from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_DEFAULT_FIXTURE = Path(__file__).resolve().parent.parent / "src" / "cc_ground" / "data" / "grounds.json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
    )

    # Redis holds the registered-accounts slot
    REDIS_URL: str = "redis://localhost:6379/0"
    ACCOUNTS_STORAGE_KEY: str = "cricketUsers"

    # Ground fixture
    GROUNDS_FIXTURE_PATH: Path = _DEFAULT_FIXTURE
    AVAILABILITY_SEED: int | None = None  # None = fresh randomness on every start

    # Bookings
    DEFAULT_BOOKING_TIME: str = "10:00 AM"

    # Password hashing
    BCRYPT_ROUNDS: int = 12

    # App
    APP_NAME: str = "Cricket Connect Hyderabad"
    DEBUG: bool = False


settings = Settings()
