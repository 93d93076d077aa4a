"""Application configuration using pydantic-settings."""

from pathlib import Path
from typing import Final

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SEED_PATH: Final = Path(__file__).parent / "data" / "properties.json"


class Settings(BaseSettings):
    """Data layer settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LIGHTBNB_",
        extra="ignore",
    )

    # Database
    database_path: str = Field(
        default="data/lightbnb.db",
        description='Path to the SQLite database file, or ":memory:"',
    )

    # Property search
    default_result_limit: int = Field(
        default=10,
        description="Row cap applied to listings when the caller passes no limit",
    )

    # In-memory property registry
    property_seed_path: Path = Field(
        default=DEFAULT_SEED_PATH,
        description="JSON file the in-memory property registry is seeded from",
    )

    # Logging
    log_json: bool = Field(default=False, description="Emit JSON logs instead of console output")
    log_level: str = Field(default="INFO", description="Minimum log level name")
