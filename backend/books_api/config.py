"""
Books API: Application Configuration
=======================================

What:  Centralized configuration management using Pydantic Settings.
How:   Pydantic Settings reads from environment variables (or .env file),
       coerces and validates types, and exposes a singleton `settings` object.
Who:   Imported by every module that needs configuration values.
When:  Loaded once at module import time; credentials are checked at startup.

Environment:
    PORT                   Listen port (default 3001)
    HOST                   Listen address (default 0.0.0.0)
    FIREBASE_CREDENTIALS   Path to the service-account JSON key file
    FIREBASE_DATABASE_URL  Optional databaseURL option for the Firebase app
    BOOKS_COLLECTION       Firestore collection holding the records
    CORS_ORIGINS           Comma-separated allowed origins ("*" for any)
    LOG_LEVEL              DEBUG, INFO, WARNING, ERROR or CRITICAL
"""

from pathlib import Path
from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Every setting has a development default. Production deployments point
    FIREBASE_CREDENTIALS at a real service-account key.
    """

    # ── Server ────────────────────────────────────────────────────────────
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=3001, ge=1, le=65535)

    # ── Firebase / Firestore ──────────────────────────────────────────────
    # What: Service-account key downloaded from the Firebase console
    # Format: JSON file with project_id, private_key, client_email, ...
    firebase_credentials: str = Field(
        default="./serviceAccountKey.json",
        description="Path to the Firebase service-account JSON key",
    )

    # Only needed when the project also uses the Realtime Database.
    firebase_database_url: str = Field(default="")

    books_collection: str = Field(default="Books", min_length=1)

    # ── CORS ──────────────────────────────────────────────────────────────
    cors_origins: str = Field(default="*")

    @property
    def cors_origins_list(self) -> List[str]:
        """Splits comma-separated CORS origins into the list CORSMiddleware expects."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]

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

    # ── Pydantic Settings Config ──────────────────────────────────────────
    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,  # PORT and port both work
        "extra": "ignore",
    }

    def validate_credentials(self) -> None:
        """
        What:  Checks that the Firebase service-account key is present.
        When:  Called during app startup (lifespan), before the store is built.
        Raises ValueError with guidance when the file is missing.
        """
        path = Path(self.firebase_credentials)
        if not path.is_file():
            raise ValueError(
                f"FIREBASE_CREDENTIALS file '{path}' does not exist. "
                "Generate a key under Project settings > Service accounts "
                "in the Firebase console."
            )


settings = Settings()
