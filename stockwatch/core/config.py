import os
from typing import List, Optional

from stockwatch.errors import ConfigError

# Product pages checked on every run
TARGET_URLS = (
    "https://a.co/d/dLgkilE",
    "https://a.co/d/d6vEEXI",
    "https://a.co/d/7tC83zP",
    "https://a.co/d/5lRIZfk",
    "https://a.co/d/2o5KBYB",
    "https://a.co/d/1U0OQkb",
    "https://a.co/d/0NvP60s",
)


def _env_str(name: str) -> Optional[str]:
    value = os.getenv(name)
    if value is None:
        return None
    value = value.strip()
    return value or None


def _env_number(name: str, default: str, cast):
    raw = os.getenv(name, default)
    try:
        return cast(raw)
    except ValueError as e:
        raise ConfigError(f"{name} must be a number, got {raw!r}") from e


class Settings:
    """
    Runtime settings read from the environment.

    Built once at startup and handed to the fetcher, notifier and monitor.
    """

    def __init__(self, require_credentials: bool = True):
        # Discord
        self.DISCORD_BOT_TOKEN: Optional[str] = _env_str("DISCORD_BOT_TOKEN")
        self.DISCORD_CHANNEL_ID: Optional[str] = _env_str("DISCORD_CHANNEL_ID")

        # Fetching
        self.REQUEST_TIMEOUT: int = _env_number("REQUEST_TIMEOUT", "30", int)
        self.NOTIFY_TIMEOUT: int = _env_number("NOTIFY_TIMEOUT", "10", int)

        # Pacing between targets
        self.CHECK_INTERVAL_SECONDS: float = _env_number("CHECK_INTERVAL_SECONDS", "10", float)
        self.CHECK_JITTER_SECONDS: float = _env_number("CHECK_JITTER_SECONDS", "0", float)

        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

        self.target_urls: List[str] = list(TARGET_URLS)

        if require_credentials:
            self.validate()

    def validate(self):
        """Fail fast when the Discord credentials are missing."""
        missing = [
            name
            for name in ("DISCORD_BOT_TOKEN", "DISCORD_CHANNEL_ID")
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigError(f"{' and '.join(missing)} must be set")


def load_settings(require_credentials: bool = True) -> Settings:
    return Settings(require_credentials=require_credentials)
