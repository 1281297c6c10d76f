import logging
import sys

from stockwatch.core.config import load_settings
from stockwatch.errors import ConfigError
from stockwatch.fetch.requests_fetcher import RequestsFetcher
from stockwatch.notify.discord import DiscordNotifier
from stockwatch.services.monitor import run_checks

logger = logging.getLogger("stockwatch")

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "INFO"):
    logging.basicConfig(level=getattr(logging, level, logging.INFO), format=LOG_FORMAT)


def main() -> int:
    """Check every target once and post a Discord message for each available item."""
    try:
        settings = load_settings()
    except ConfigError as e:
        configure_logging()
        logger.critical("%s", e)
        return 1

    configure_logging(settings.LOG_LEVEL)
    logger.info("Starting stock check for %d targets", len(settings.target_urls))

    fetcher = RequestsFetcher(timeout_sec=settings.REQUEST_TIMEOUT)
    notifier = DiscordNotifier(
        token=settings.DISCORD_BOT_TOKEN,
        channel_id=settings.DISCORD_CHANNEL_ID,
        timeout_sec=settings.NOTIFY_TIMEOUT,
    )
    run_checks(settings, fetcher, notifier)
    return 0


if __name__ == "__main__":
    sys.exit(main())
