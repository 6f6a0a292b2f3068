"""Runtime configuration from environment variables."""

from __future__ import annotations

import logging

from dotenv import load_dotenv
from pydantic_settings import BaseSettings

load_dotenv()

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class Settings(BaseSettings):
    identicon_env: str = "development"
    identicon_log_level: str = "info"

    # hashlib algorithm used by Identicon.from_value
    identicon_hash_algorithm: str = "sha1"

    # Icon side in pixels when no size is given
    identicon_default_size: int = 100

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def configure_logging(level: str | None = None) -> None:
    """Install a root handler at ``level`` (defaults to IDENTICON_LOG_LEVEL)."""
    name = (level or settings.identicon_log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.INFO),
        format=LOG_FORMAT,
    )
