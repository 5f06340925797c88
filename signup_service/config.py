"""
Sign-Up Service — Application Configuration
=============================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       validates types/ranges, and provides a singleton `settings` object.
Who:   Imported by main.py and the factories; adapters receive plain values.
When:  Loaded once at module import time.
"""

from typing import List, Optional

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    All settings have defaults suitable for local development against a
    MongoDB on localhost. Attributes are grouped by concern.
    """

    # ── MongoDB ───────────────────────────────────────────────────────────
    # Format: mongodb://[user:password@]host:port/dbname
    # The database named in the URL is used unless mongo_database is set.
    mongo_url: str = Field(
        default="mongodb://localhost:27017/signup-service",
        description="MongoDB connection URL",
    )
    mongo_database: Optional[str] = Field(default=None)

    # Client-side operation timeout applied to every driver call
    mongo_timeout_ms: int = Field(default=5000, ge=100, le=120_000)

    # Start-up readiness check (ping) retry policy
    mongo_connect_attempts: int = Field(default=3, ge=1, le=10)
    mongo_retry_min_wait: int = Field(default=1, ge=1, le=30)
    mongo_retry_max_wait: int = Field(default=10, ge=1, le=120)

    # ── Password Hashing ──────────────────────────────────────────────────
    # bcrypt work factor: each increment doubles the hashing cost
    bcrypt_salt_rounds: int = Field(default=12, ge=4, le=31)
    hash_timeout_seconds: float = Field(default=10.0, gt=0, le=120)

    # ── CORS ──────────────────────────────────────────────────────────────
    # Comma-separated origins; "*" allows any origin
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]

    # ── Server ────────────────────────────────────────────────────────────
    backend_host: str = Field(default="0.0.0.0")
    backend_port: int = Field(default=5050, ge=1024, le=65535)

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

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # MONGO_URL and mongo_url both work
    }


# Singleton instance — imported throughout the application
settings = Settings()
