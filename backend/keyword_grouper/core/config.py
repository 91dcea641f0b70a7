"""
Centralized configuration for the Keyword Grouper backend.
Uses Pydantic Settings to load from environment variables and .env file.
"""

from pathlib import Path
from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables / .env file."""

    # ── Grouping ──
    default_threshold: int = 85        # percent, as shown on the slider
    threshold_min: int = 50
    threshold_max: int = 95
    grouping_mode: str = "anchor"      # anchor | transitive
    length_prefilter: bool = True

    # ── Export ──
    csv_max_members: int = 4
    csv_filename: str = "mots-cles-groupes.csv"

    # ── Limits ──
    max_input_chars: int = 2_000_000
    cluster_workers: int = 4

    # ── CORS ──
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    # ── Rate Limiting ──
    rate_limit_per_minute: int = 30
    rate_limit_enabled: bool = True

    # ── Application ──
    app_version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parent.parent.parent / ".env"),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse comma-separated CORS origins into a list."""
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    """Cached singleton for application settings."""
    return Settings()
