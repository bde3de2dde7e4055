"""
Configuration module for the catalog backend.

Loads environment variables and validates required settings.
"""
import os
from typing import List
from dotenv import load_dotenv

from catalog_backend.exceptions import ConfigurationError

# Load .env file
load_dotenv()


class AppSettings:
    """
    Application settings loaded from environment variables.

    Values are read when the instance is created, so a fresh instance always
    reflects the current environment.
    """

    def __init__(self) -> None:
        # Supabase Configuration
        self.SUPABASE_URL: str = os.getenv("SUPABASE_URL", "").strip()
        # Publishable key (replacement for the legacy anon key); safe for clients
        self.SUPABASE_PUBLISHABLE_KEY: str = os.getenv("SUPABASE_PUBLISHABLE_KEY", "").strip()

        # Application Settings
        self.ENVIRONMENT: str = os.getenv("ENVIRONMENT", "development")
        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # CORS Settings (only consulted in production)
        self.CORS_ALLOWED_ORIGINS: List[str] = [
            origin.strip()
            for origin in os.getenv("CORS_ALLOWED_ORIGINS", "").split(",")
            if origin.strip()
        ]

    def validate(self) -> None:
        """
        Validate that all required settings are configured.

        Raises:
            ConfigurationError: If any required setting is missing.
        """
        required_settings = {
            "SUPABASE_URL": self.SUPABASE_URL,
            "SUPABASE_PUBLISHABLE_KEY": self.SUPABASE_PUBLISHABLE_KEY,
        }

        missing = [key for key, value in required_settings.items() if not value]

        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}. "
                "Please check your .env file."
            )

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.ENVIRONMENT.lower() == "production"

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.ENVIRONMENT.lower() == "development"


def get_settings() -> AppSettings:
    """Load settings from the current environment."""
    return AppSettings()
