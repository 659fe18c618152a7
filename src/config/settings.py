import logging
from typing import List, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """Application settings loaded from environment variables or .env file."""

    # Server Configuration
    host: str = Field("0.0.0.0", description="Interface the API server binds to.")
    port: int = Field(5000, description="Port the API server listens on.")
    cors_allow_origins: List[str] = Field(
        ["*"], description="Origins allowed to read the API cross-origin."
    )

    # Upstream Sources
    teams_page_url: str = Field(
        "https://www.robotevents.com/robot-competitions/vex-robotics-competition/RE-VRC-18-6082.html",
        description="RobotEvents page whose team table lists the teams to report on.",
    )
    vexdb_api_url: str = Field(
        "https://api.vexdb.io/v1", description="Base URL of the VexDB statistics API."
    )
    season: str = Field("current", description="Season filter passed to VexDB.")
    request_timeout: Optional[float] = Field(
        30.0,
        gt=0,
        description="Timeout in seconds for each outbound request (None disables it).",
    )

    # Logging Configuration
    log_level: str = Field(
        "INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)."
    )

    # Pydantic Settings Configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )


def load_settings() -> AppSettings:
    """Loads and validates application settings."""
    try:
        settings = AppSettings()
        log_level_upper = settings.log_level.upper()
        # Validate log_level even if loaded from .env
        if log_level_upper not in ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]:
            logging.warning(
                f"Invalid LOG_LEVEL '{settings.log_level}' found in .env or default. Using INFO."
            )
            settings.log_level = "INFO"
        else:
            settings.log_level = log_level_upper
        return settings
    except Exception as e:
        logging.exception(f"Error loading application settings: {e}")
        raise SystemExit("Failed to load application settings. Exiting.")


settings: AppSettings = load_settings()
