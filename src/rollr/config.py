"""Settings loader for rollr."""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL", "NONE"}


class Settings(BaseSettings):
    # --- Randomness ---
    rng_seed: int | None = Field(
        default=None, description="Seed for reproducible rolls; unset draws a fresh seed."
    )

    # --- Logging ---
    # Per-handler levels: INFO|DEBUG|WARNING|ERROR|CRITICAL|NONE
    logging_level: str = "WARNING"
    logging_console: str = "WARNING"
    logging_file: str = "NONE"
    logging_file_path: str = "logs/rollr.jsonl"
    logging_max_bytes: int = 1_000_000
    logging_backup_count: int = 3

    model_config = SettingsConfigDict(
        env_prefix="ROLLR_",
        case_sensitive=False,
        env_file=".env",
        extra="ignore",
    )

    @field_validator("logging_level", "logging_console", "logging_file")
    @classmethod
    def _norm_level(cls, v: str) -> str:
        v = v.upper()
        if v not in _LEVELS:
            raise ValueError(f"unknown log level: {v}")
        return v

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        # Precedence (highest to lowest):
        # 1) init_settings (explicit overrides in code/tests)
        # 2) dotenv (.env in cwd)
        # 3) env_settings (OS env)
        return (
            init_settings,
            dotenv_settings,
            env_settings,
        )


def load_settings() -> Settings:
    return Settings()
