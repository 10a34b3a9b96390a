"""Scheduler settings loaded from environment variables (prefix INTAKE_SCHEDULER_) or .env."""

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DATA_DIR = Path(__file__).parent / "data"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Tunable constants for slot searches and the demo CLI."""

    assessment_slot_minutes: int = Field(90, gt=0, description="Length of an assessment session slot")
    therapy_slot_minutes: int = Field(60, gt=0, description="Length of a therapy intake slot")
    max_session_gap_days: int = Field(
        7, ge=1, description="Maximum calendar days between the two assessment sessions"
    )

    log_level: LogLevel = Field("INFO", description="Root log level for the CLI")
    roster_path: Path = Field(DATA_DIR / "sample_roster.json", description="Default roster file")
    max_pairs_shown: int = Field(10, ge=0, description="Assessment pairs printed per clinician")

    model_config = SettingsConfigDict(
        env_prefix="INTAKE_SCHEDULER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v):
        if isinstance(v, str):
            return v.strip().upper()
        return v


_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """Return the cached settings, loading them on first use."""
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance
