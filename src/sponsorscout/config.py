"""Configuration management for the application."""

import json
import os
from pathlib import Path

from pydantic import Field, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ConfigurationError(Exception):
    """Raised when a configuration file or value is invalid."""


class ScrapingConfig(BaseSettings):
    """ATS polling configuration."""

    timeout_seconds: float = 20.0
    user_agent: str = "Mozilla/5.0 (compatible; SponsorScout/1.0)"
    rate_limit_delay_seconds: float = 0.2
    recency_days: int = 10

    @classmethod
    def from_file(cls, filepath: str = "config/scraping.json") -> "ScrapingConfig":
        """
        Load scraping configuration from JSON file.

        Args:
            filepath: Path to the configuration file

        Returns:
            ScrapingConfig instance
        """
        return cls(**_read_json(filepath))


class TieringConfig(BaseSettings):
    """
    Lower ``lcaCount`` bounds for each tier bucket.

    A company lands in the first tier whose bound it meets, checked from ``top``
    down; anything below ``lowest_min`` is ``below50``.
    """

    top_min: int = 1000
    middle_min: int = 501
    lower_min: int = 101
    lowest_min: int = 51

    @model_validator(mode="after")
    def check_contiguous(self) -> "TieringConfig":
        """Bounds must be strictly descending and positive."""
        bounds = [self.top_min, self.middle_min, self.lower_min, self.lowest_min]
        if any(b <= 0 for b in bounds) or bounds != sorted(set(bounds), reverse=True):
            raise ValueError(
                f"Tier bounds must be positive and strictly descending, got {bounds}"
            )
        return self

    @classmethod
    def from_file(cls, filepath: str = "config/tiering.json") -> "TieringConfig":
        """
        Load tier thresholds from JSON file.

        Args:
            filepath: Path to the configuration file

        Returns:
            TieringConfig instance

        Raises:
            ConfigurationError: If the thresholds are not contiguous
        """
        try:
            return cls(**_read_json(filepath))
        except ValidationError as e:
            raise ConfigurationError(f"Invalid tier thresholds in {filepath}: {e}") from e


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Local JSON fallback store lives here when Redis is not configured
    data_root: str = Field(default="data")

    # Upstash Redis REST credentials
    kv_rest_api_url: str | None = Field(default=None)
    kv_rest_api_token: str | None = Field(default=None)

    # Keyword filter lists, comma separated
    target_roles: str | None = Field(default=None)
    excluded_keywords: str | None = Field(default=None)

    # Backend Server
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=8000)

    log_level: str = Field(default="INFO")

    @model_validator(mode="after")
    def derive_paths(self) -> "Settings":
        """Expand data_root to an absolute path."""
        self.data_root = str(Path(self.data_root).expanduser().resolve())
        return self

    @property
    def redis_configured(self) -> bool:
        """True when both Redis REST credentials are present."""
        return bool(self.kv_rest_api_url and self.kv_rest_api_token)


def _read_json(filepath: str) -> dict:
    try:
        with open(filepath, "r") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Cannot read configuration file {filepath}: {e}") from e


def _load_or_default(config_cls, filepath: str):
    if os.path.exists(filepath):
        return config_cls.from_file(filepath)
    return config_cls()


# Global settings instance
settings = Settings()

# Load configurations
scraping_config: ScrapingConfig = _load_or_default(ScrapingConfig, "config/scraping.json")
tiering_config: TieringConfig = _load_or_default(TieringConfig, "config/tiering.json")
