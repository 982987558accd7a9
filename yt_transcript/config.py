"""Configuration management"""

import os
from typing import Optional
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_4) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/85.0.4183.83 Safari/537.36,gzip(gfe)"
)


class Config:
    """Application configuration"""

    def __init__(self):
        # Platform endpoints
        self.base_url = os.getenv("YOUTUBE_BASE_URL", "https://www.youtube.com").rstrip("/")

        # Request Configuration
        # The platform serves different markup to clients it does not recognise
        self.user_agent = os.getenv("USER_AGENT", DEFAULT_USER_AGENT)
        self.timeout_seconds = float(os.getenv("TIMEOUT_SECONDS", "30"))

        # InnerTube client context
        self.innertube_client_name = os.getenv("INNERTUBE_CLIENT_NAME", "WEB")
        self.innertube_client_version = os.getenv(
            "INNERTUBE_CLIENT_VERSION", "2.20250312.04.00"
        )

        # Transcript Configuration
        self.preferred_language = self._parse_optional(os.getenv("PREFERRED_LANGUAGE"))

        # Logging
        self.log_level = os.getenv("LOG_LEVEL", "WARNING").upper()

    def _parse_optional(self, value: Optional[str]) -> Optional[str]:
        """Treat unset and blank values alike"""
        if value is None or not value.strip():
            return None
        return value.strip()

    def validate(self) -> None:
        """Validate configuration"""
        if not self.base_url.startswith(("http://", "https://")):
            raise ValueError("YOUTUBE_BASE_URL must be an http(s) URL")

        if not self.user_agent:
            raise ValueError("USER_AGENT must not be empty")

        if self.timeout_seconds <= 0:
            raise ValueError("TIMEOUT_SECONDS must be greater than 0")


# Global configuration instance
config = Config()
