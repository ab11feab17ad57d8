# app/config.py
"""
Environment-driven settings for the API, the seed loader and the client.

Values come from environment variables or a local .env file, e.g.
    DB_URL=sqlite:///db.sqlite API_PORT=8080 uvicorn app:app
"""

import logging
from functools import lru_cache
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SEED_FILE = Path(__file__).resolve().parent / "data" / "users.json"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    # API
    APP_TITLE: str = Field(default="User Directory API")
    APP_VERSION: str = Field(default="0.1.0")
    API_HOST: str = Field(default="0.0.0.0")
    API_PORT: int = Field(default=8080)

    # Store
    DB_URL: str = Field(default="sqlite:///db.sqlite")
    DB_ECHO: bool = Field(default=False)
    SEED_FILE: Path = Field(default=DEFAULT_SEED_FILE)

    # Client
    API_BASE_URL: str = Field(default="http://localhost:8080")

    LOG_LEVEL: str = Field(default="INFO")


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT)
