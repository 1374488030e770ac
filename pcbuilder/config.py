"""
Configuration module for the PC Builder backend.

Loads environment variables and validates required settings.
"""
import os
from dotenv import load_dotenv

from pcbuilder.utils.constants import DEFAULT_AI_GATEWAY_URL, DEFAULT_AI_MODEL

# Load .env file
load_dotenv()


def _get_float(name: str, default: float) -> float:
    raw = os.getenv(name, "")
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {raw!r}") from None


class Settings:
    """Application settings loaded from environment variables."""

    # AI Gateway (OpenAI-compatible chat completions)
    AI_GATEWAY_API_KEY: str = os.getenv("AI_GATEWAY_API_KEY", "")
    AI_GATEWAY_URL: str = os.getenv("AI_GATEWAY_URL", DEFAULT_AI_GATEWAY_URL)
    AI_MODEL: str = os.getenv("AI_MODEL", DEFAULT_AI_MODEL)

    # Per-attempt HTTP timeout for upstream calls
    AI_GATEWAY_TIMEOUT_SECONDS: float = _get_float("AI_GATEWAY_TIMEOUT_SECONDS", 60.0)

    # Application Settings
    ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    @classmethod
    def validate(cls) -> None:
        """
        Validate that all required settings are configured.

        Raises:
            ValueError: If any required setting is missing.
        """
        required_settings = {
            "AI_GATEWAY_API_KEY": cls.AI_GATEWAY_API_KEY,
        }

        missing = [key for key, value in required_settings.items() if not value]

        if missing:
            raise ValueError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )

    @classmethod
    def is_production(cls) -> bool:
        """Check if running in production environment."""
        return cls.ENVIRONMENT.lower() == "production"

    @classmethod
    def is_staging(cls) -> bool:
        """Check if running in staging environment."""
        return cls.ENVIRONMENT.lower() == "staging"

    @classmethod
    def is_development(cls) -> bool:
        """Check if running in development environment."""
        return cls.ENVIRONMENT.lower() == "development"


# Create a singleton instance
settings = Settings()

# Validate settings on module import (will fail fast if misconfigured)
# Skip validation during tests or when importing for introspection
if os.getenv("VALIDATE_CONFIG", "true").lower() == "true":
    try:
        settings.validate()
    except ValueError as e:
        # In development, warn but don't crash
        if settings.is_development():
            print(f"Warning: {e}")
            print("   Recommendation endpoints will answer 500 until AI_GATEWAY_API_KEY is set.")
        else:
            # In production or staging, fail immediately
            raise
