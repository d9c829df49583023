from pathlib import Path

from pydantic import PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Reservation Service'
    VERSION: str = '0.1.0'
    DEBUG: bool = False  # Set to True for local debugging (args/return logging + log files)

    # Reservation policy
    RESERVATION_MAX_DURATION_MINUTES: PositiveInt = 240
    RESERVATION_MAX_ADVANCE_DAYS: PositiveInt = 30
    RESERVATION_TIME_SLOT_STEP_MINUTES: PositiveInt = 15
    RESERVATION_MAX_DAILY_PER_USER: PositiveInt = 3


settings = Settings()  # type: ignore
