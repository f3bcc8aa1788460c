"""Configuration management using Pydantic Settings."""

import logging
from functools import lru_cache
from pathlib import Path

import yaml
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .ids import DEFAULT_ID_LENGTH

logger = logging.getLogger(__name__)

_YAML_FIELDS = ("id_length", "environment", "log_level", "logfire_token")


class Settings(BaseSettings):
    """Main configuration class."""

    # Document IDs
    id_length: int = Field(default=DEFAULT_ID_LENGTH, ge=1)

    # Runtime
    environment: str = "development"
    log_level: str = "INFO"

    # Observability
    logfire_token: str = ""

    # Optional YAML overlay
    config_file: Path | None = None

    model_config = SettingsConfigDict(
        env_prefix="DOCSTORE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("log_level", mode="after")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level and reject names logging doesn't know."""
        level = v.upper()
        if level not in logging.getLevelNamesMapping():
            raise ValueError(f"Unknown log level: {v}")
        return level

    def load_yaml_config(self) -> None:
        """Load and merge YAML configuration from config_file."""
        if self.config_file is None:
            return

        config_path = self.config_file
        if not config_path.exists():
            logger.warning(f"Config file not found: {config_path}. Using defaults.")
            return

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                yaml_config = yaml.safe_load(f)

            if not yaml_config:
                logger.warning(f"Empty config file: {config_path}")
                return

            overrides = {k: v for k, v in yaml_config.items() if k in _YAML_FIELDS}
            merged = self.model_validate({**self.model_dump(), **overrides})
            for name in overrides:
                setattr(self, name, getattr(merged, name))

            logger.info(f"Loaded configuration from {config_path}")

        except yaml.YAMLError as e:
            logger.error(f"Failed to parse YAML config: {e}")
            raise


@lru_cache()
def get_settings() -> Settings:
    """Get singleton Settings instance."""
    settings = Settings()
    settings.load_yaml_config()
    return settings
