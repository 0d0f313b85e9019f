"""
Notes Service - Application Configuration
=========================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py (server + logging) and the storage layer.
When:  Loaded once at module import time.

Environment variables:
    PORT        Listening port (default 3000)
    HOST        Bind address (default 0.0.0.0)
    DATA_FILE   Path of the JSON document holding all notes; relative paths
                are taken from the deployment directory (PROJECT_ROOT)
    LOG_LEVEL   DEBUG, INFO, WARNING, ERROR or CRITICAL
"""

from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


# What: Directory the service is deployed in (the checkout holding the
# notes_service package). Relative DATA_FILE values resolve against it,
# never against the working directory.
PROJECT_ROOT = Path(__file__).resolve().parent.parent

DEFAULT_DATA_FILE = "notes.json"


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for running straight from a checkout.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3000, ge=1, le=65535)

    # ── Storage ───────────────────────────────────────────────────────────
    # What: The single file holding the serialized note collection.
    # An absent or empty file means "no notes yet".
    data_file: str = Field(default=DEFAULT_DATA_FILE)

    # ── Logging ───────────────────────────────────────────────────────────
    log_level: str = Field(default="INFO")

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Ensures log level is a valid Python logging level name."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper = v.upper()
        if upper not in valid_levels:
            raise ValueError(f"Invalid log_level '{v}'. Must be one of: {valid_levels}")
        return upper

    @property
    def data_path(self) -> Path:
        """Backing file as an absolute Path, anchored at PROJECT_ROOT."""
        path = Path(self.data_file).expanduser()
        if not path.is_absolute():
            path = PROJECT_ROOT / path
        return path.resolve()

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",
    }


# Singleton instance, imported throughout the application
settings = Settings()
