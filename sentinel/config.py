"""
Application Configuration — Pydantic Settings

Centralized configuration management using environment variables.
Loads from .env file automatically with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Priority: Environment variables > .env file > defaults
    """

    # === API Configuration ===
    PROJECT_NAME: str = "Sentinel"

    # === CORS Configuration ===
    CORS_ORIGINS: list[str] = [
        "http://localhost:5173",
        "http://localhost:3000",
        "http://127.0.0.1:5173",
        "http://127.0.0.1:3000",
    ]

    # === Simulation Engine ===
    AUTOSTART: bool = True             # Start the clock in the app lifespan
    POINTS_COUNT: int = Field(default=40, ge=2)
    SEED_VALUE: float = Field(default=40.0, ge=0.0, le=100.0)
    LOG_CAPACITY: int = Field(default=6, ge=1)

    # Schedule periods (milliseconds)
    WALK_PERIOD_MS: int = Field(default=100, gt=0)
    LATENCY_PERIOD_MS: int = Field(default=2000, gt=0)
    LOG_PERIOD_MS: int = Field(default=3000, gt=0)

    # === Environment ===
    ENVIRONMENT: str = "local"  # local, development, staging, production
    LOG_LEVEL: str = "INFO"

    # === Settings Configuration ===
    model_config = SettingsConfigDict(
        env_file=(".env",),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )


# Singleton instance
settings = Settings()
