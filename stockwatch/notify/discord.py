import logging
import httpx

from stockwatch.errors import NotifyError
from stockwatch.fetch.utils import short_url

logger = logging.getLogger(__name__)

DISCORD_API_BASE = "https://discord.com/api/v10"

def availability_message(url: str) -> str:
    return f"🎉 This item is now available! Check it out: {short_url(url)}"

class DiscordNotifier:
    """Posts plain text messages to one Discord channel through the bot REST API."""

    def __init__(self, token: str, channel_id: str, timeout_sec: int = 10):
        self.token = token
        self.channel_id = channel_id
        self.timeout_sec = timeout_sec

    def send(self, text: str) -> None:
        try:
            url = f"{DISCORD_API_BASE}/channels/{self.channel_id}/messages"
            headers = {
                "Authorization": f"Bot {self.token}",
                "Content-Type": "application/json",
            }
            response = httpx.post(url, headers=headers, json={"content": text}, timeout=self.timeout_sec)
            response.raise_for_status()
        except httpx.TimeoutException as e:
            raise NotifyError(f"Timeout while sending message to channel {self.channel_id!r}") from e
        except httpx.HTTPStatusError as e:
            raise NotifyError(f"Discord returned HTTP {e.response.status_code} for channel {self.channel_id!r}") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            raise NotifyError(f"Failed to send message to channel {self.channel_id!r}: {e}") from e
        except ValueError as e:
            # Header values must be ASCII; a bad token surfaces as UnicodeEncodeError
            raise NotifyError(f"Invalid Discord credentials for channel {self.channel_id!r}: {e}") from e

        logger.info("Sent message to channel %s", self.channel_id)

    def notify_available(self, url: str) -> None:
        self.send(availability_message(url))
