"""Application configuration using Pydantic Settings."""

from pathlib import Path
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Database (key-value cache of the last loaded games)
    DATABASE_URL: str = "sqlite+aiosqlite:///./data/loteria.db"

    # App
    APP_NAME: str = "Loteria"
    APP_ENV: str = "development"
    DEBUG: bool = True

    # Logging
    LOG_DIR: Path = Path("./logs")

    # Upload
    MAX_UPLOAD_BYTES: int = 1024 * 1024


settings = Settings()
