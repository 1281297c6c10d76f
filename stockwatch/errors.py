from typing import Optional


class StockWatchError(Exception):
    """Base class for errors raised by the stock watcher."""


class ConfigError(StockWatchError):
    """Required configuration is missing or invalid."""


class TransportError(StockWatchError):
    """The page could not be fetched (DNS, connect, timeout, read)."""

    def __init__(self, message: str, url: Optional[str] = None):
        super().__init__(message)
        self.url = url


class ParseError(StockWatchError):
    """Page content could not be parsed as markup."""


class NotifyError(StockWatchError):
    """The chat notification could not be delivered."""
