"""Process configuration from environment variables."""

from __future__ import annotations

import logging

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    aurasvg_env: str = "development"
    aurasvg_log_level: str = "info"
    aurasvg_log_format: str = "%(asctime)s %(name)s %(levelname)s %(message)s"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()


def configure_logging(config: Settings | None = None) -> None:
    """Install a root handler. Called by entry scripts, never on import."""
    config = config or settings
    logging.basicConfig(
        level=getattr(logging, config.aurasvg_log_level.upper(), logging.INFO),
        format=config.aurasvg_log_format,
    )
