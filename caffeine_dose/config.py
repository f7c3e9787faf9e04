"""Configuration management for Caffeine Dose"""

import os
from pathlib import Path
from dotenv import load_dotenv


class Config:
    """Application configuration loaded from .env and environment variables"""

    def __init__(self):
        # Load .env file from project root
        env_path = Path(__file__).parent.parent / '.env'
        load_dotenv(env_path)

        # Time rendering: unset or "0" = 12-hour (AM/PM), anything else = 24-hour
        self.time_format = os.getenv('alfred_time_format', '').strip() or '0'
        self.use_24h = self.time_format != '0'

        # Process query
        self.process_name = os.getenv('CAFFEINE_PROCESS_NAME', 'caffeinate')
        self.process_query_timeout = self._parse_seconds(os.getenv('CAFFEINE_QUERY_TIMEOUT', ''), 2.0)

        # Presentation
        self.icon_path = os.getenv('CAFFEINE_ICON_PATH', 'icon.png')
        self.debug = self._parse_bool(os.getenv('CAFFEINE_DEBUG', 'false'))

        # Re-check the session once less than this many seconds remain
        self.poll_threshold_seconds = 3600

    def _parse_seconds(self, value: str, default: float) -> float:
        """Parse a positive number of seconds, falling back to default"""
        try:
            seconds = float(value)
        except ValueError:
            return default
        return seconds if seconds > 0 else default

    def _parse_bool(self, value: str) -> bool:
        """Parse boolean string"""
        return value.lower() in ('true', '1', 'yes', 'on')


# Global config instance
config = Config()
