import logging
import random
import time
from dataclasses import dataclass
from typing import Callable, List, Optional

from stockwatch.core.config import Settings
from stockwatch.errors import NotifyError, ParseError, TransportError
from stockwatch.fetch.availability import classify
from stockwatch.fetch.base import BaseFetcher
from stockwatch.fetch.utils import short_url
from stockwatch.schemas import AvailabilityVerdict, CheckResult

logger = logging.getLogger(__name__)


@dataclass
class SchedulePolicy:
    """Pause taken after every target, successful or not."""
    interval_sec: float = 10.0
    jitter_sec: float = 0.0

    def delay(self) -> float:
        if self.jitter_sec > 0:
            return self.interval_sec + random.uniform(0, self.jitter_sec)
        return self.interval_sec

    @classmethod
    def from_settings(cls, settings: Settings) -> "SchedulePolicy":
        return cls(
            interval_sec=settings.CHECK_INTERVAL_SECONDS,
            jitter_sec=settings.CHECK_JITTER_SECONDS,
        )


def check_availability(url: str, fetcher: BaseFetcher) -> AvailabilityVerdict:
    """
    Fetch one product page and classify it.

    A non-200 response is a negative verdict, not an error; the classifier
    is not run for it. TransportError and ParseError propagate.
    """
    result = fetcher.fetch(url)
    if not result.ok:
        return AvailabilityVerdict(available=False, status=f"HTTP Status: {result.status_code}")
    return classify(result.html)


def check_target(url: str, fetcher: BaseFetcher, notifier=None) -> CheckResult:
    """Check one target and notify when it is available; never raises for per-target failures."""
    logger.info("Checking URL: %s", url)
    result = CheckResult(url=url, short_url=short_url(url))

    try:
        verdict = check_availability(url, fetcher)
    except (TransportError, ParseError) as e:
        logger.error("Error checking %s: %s", url, e)
        result.error = str(e)
        return result

    logger.info("Result for %s: Available=%s, Status=%s", url, verdict.available, verdict.status)
    result.available = verdict.available
    result.status = verdict.status

    if verdict.available and notifier is not None:
        try:
            notifier.notify_available(url)
            result.notified = True
        except NotifyError as e:
            logger.error("Error sending availability message: %s", e)

    return result


def run_checks(
    settings: Settings,
    fetcher: BaseFetcher,
    notifier=None,
    sleep: Callable[[float], None] = time.sleep,
    policy: Optional[SchedulePolicy] = None,
) -> List[CheckResult]:
    """
    Check every configured target once, one at a time.

    Sleeps after each target to stay under the site's rate limits.
    """
    policy = policy or SchedulePolicy.from_settings(settings)
    results = []

    for url in settings.target_urls:
        results.append(check_target(url, fetcher, notifier))
        sleep(policy.delay())

    available = sum(1 for r in results if r.available)
    failed = sum(1 for r in results if r.error)
    logger.info("Checked %d targets: %d available, %d failed", len(results), available, failed)
    return results
