import logging
from typing import Optional
import requests

from stockwatch.errors import TransportError
from .base import BaseFetcher, FetchResult

logger = logging.getLogger(__name__)

# Sent verbatim; product pages degrade or block non-browser clients.
REQUEST_HEADERS = {
    "User-Agent": (
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
        "AppleWebKit/537.36 (KHTML, like Gecko) "
        "Chrome/91.0.4472.124 Safari/537.36"
    ),
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Connection": "keep-alive",
}

class RequestsFetcher(BaseFetcher):
    def __init__(self, timeout_sec: int = 30):
        self.timeout_sec = timeout_sec

    def fetch(self, url: str) -> FetchResult:
        try:
            resp = requests.get(url, headers=dict(REQUEST_HEADERS), timeout=self.timeout_sec)
            status = int(resp.status_code)
            html: Optional[str] = resp.text if status == 200 else None
        except requests.RequestException as e:
            raise TransportError(f"Failed to fetch {url}: {e}", url=url) from e

        final_url = str(resp.url)
        if final_url != url:
            logger.debug("GET %s -> %s (redirected to %s)", url, status, final_url)
        else:
            logger.debug("GET %s -> %s", url, status)

        return FetchResult(url=url, status_code=status, html=html)
