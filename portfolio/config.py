"""
Configuration utilities.
"""
import os
from pathlib import Path
from typing import Any, Optional
from dotenv import load_dotenv

BASE = Path(__file__).resolve().parent.parent

DEFAULT_API_DELAY = 0.5


class Config:
    """Configuration manager backed by environment variables and an optional .env file."""

    def __init__(self, env_file: Optional[str] = None):
        """Initialize configuration."""
        if env_file:
            load_dotenv(env_file)
        else:
            load_dotenv(BASE / ".env")

        self.api_delay = float(self.get("PORTFOLIO_API_DELAY", DEFAULT_API_DELAY))
        self.log_level = str(self.get("PORTFOLIO_LOG_LEVEL", "INFO")).upper()
        self.log_file = self.get("PORTFOLIO_LOG_FILE")

    def get(self, key: str, default: Any = None) -> Any:
        """Get configuration value."""
        return os.environ.get(key, default)
