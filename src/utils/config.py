"""Configuration management for Recipe Finder.

Loads environment variables from system environment and .env file.
Priority order: system environment > .env file > hardcoded defaults
"""

import os
from typing import Optional

from dotenv import load_dotenv


# Load .env file (if exists, silently continues if missing)
load_dotenv()


class Config:
    """Application configuration loaded from environment variables."""

    def __init__(self) -> None:
        """Initialize configuration from environment variables."""
        # Spoonacular API Key: sent as the apiKey query parameter on every search.
        # Missing key is not a startup error, the API rejects the request instead.
        self.SPOONACULAR_API_KEY: str = os.getenv("SPOONACULAR_API_KEY", "")
        # Spoonacular API root, override to point at a proxy or a local stub
        self.SPOONACULAR_BASE_URL: str = os.getenv("SPOONACULAR_BASE_URL", "https://api.spoonacular.com").rstrip("/")
        # Total request timeout in seconds. Default: 0 (no timeout, request runs to completion)
        self.REQUEST_TIMEOUT: float = float(os.getenv("REQUEST_TIMEOUT", "0"))
        # Log Type: "text" or "json" (also read directly by the logger)
        self.LOG_TYPE: str = os.getenv("LOG_TYPE", "text").lower()

    @property
    def request_timeout(self) -> Optional[float]:
        """Timeout in seconds, or None when disabled."""
        return self.REQUEST_TIMEOUT or None

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If a configured value is malformed.
        """
        if not self.SPOONACULAR_BASE_URL.startswith(("http://", "https://")):
            raise ValueError(
                f"SPOONACULAR_BASE_URL must start with http:// or https://, got: {self.SPOONACULAR_BASE_URL}"
            )
        if self.REQUEST_TIMEOUT < 0:
            raise ValueError(
                f"REQUEST_TIMEOUT must be 0 (disabled) or a positive number of seconds, got: {self.REQUEST_TIMEOUT}"
            )
        if self.LOG_TYPE not in ("text", "json"):
            raise ValueError(f"LOG_TYPE must be 'text' or 'json', got: {self.LOG_TYPE}")


# Create module-level config instance and validate immediately
config = Config()
config.validate()
