"""
Shift interpreter settings, read from the environment or backend/.env.
holiday_jurisdiction picks the public holiday calendar loaded from the
database; log_level sets the root logger in main.py.
"""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_BACKEND_DIR = Path(__file__).resolve().parent.parent
_ENV_FILE = _BACKEND_DIR / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE) if _ENV_FILE.exists() else ".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: str = "INFO"
    environment: str = "development"
    data_dir: str = "data"
    holiday_jurisdiction: str = "NSW"


settings = Settings()
