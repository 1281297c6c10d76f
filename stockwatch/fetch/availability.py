"""
Stock availability heuristics for product pages.

A page is judged from a handful of independent signals: a purchase button,
a visible price and the wording of the availability section. Explicit
wording wins over page structure, and anything inconclusive is reported as
unavailable.
"""

import logging
from typing import Optional, Sequence, Union

from bs4 import BeautifulSoup

from stockwatch.errors import ParseError
from stockwatch.schemas import AvailabilityVerdict, Signals

logger = logging.getLogger(__name__)

BUY_BUTTON_SELECTORS = (
    "#add-to-cart-button",
    "#buy-now-button",
)

PRICE_SELECTORS = (
    "#price_inside_buybox",
    "#priceblock_ourprice",
    ".a-price .a-offscreen",
    ".a-price.a-offscreen",
    "#corePrice_feature_div .a-price .a-offscreen",
)

AVAILABILITY_SELECTORS = (
    "#availability",
    "#outOfStock",
    "#availability_feature_div",
)

UNAVAILABLE_PHRASES = (
    "currently unavailable",
    "this item is not available",
    "we don't know when or if this item will be back in stock",
    "sign up to be notified when this item becomes available",
    "temporarily out of stock",
)

IN_STOCK_PHRASES = (
    "in stock",
    "ships from",
    "fulfilled by amazon",
)

STATUS_UNAVAILABLE = "Currently unavailable"
STATUS_AVAILABLE = "Available"
STATUS_UNCLEAR = "Status unclear - possibly unavailable"


def parse_document(html: Union[str, bytes]) -> BeautifulSoup:
    """Build a queryable tree, rejecting input that holds no markup at all."""
    if not isinstance(html, (str, bytes)) or not html.strip():
        raise ParseError("Empty or non-text page content")
    try:
        return BeautifulSoup(html, "html.parser")
    except Exception as e:
        raise ParseError(f"Could not parse page content: {e}") from e


def extract_signals(soup: BeautifulSoup) -> Signals:
    buy_button = soup.select_one(", ".join(BUY_BUTTON_SELECTORS)) is not None

    # Comma-joined selectors match in document order, so the first hit wins
    price_el = soup.select_one(", ".join(PRICE_SELECTORS))
    price = price_el.get_text().strip() if price_el else ""

    sections = soup.select(", ".join(AVAILABILITY_SELECTORS))
    availability_text = "".join(el.get_text() for el in sections).lower()

    signals = Signals(buy_button=buy_button, price=price, availability_text=availability_text)
    logger.debug("Buy button present: %s", signals.buy_button)
    logger.debug("Has price: %s, Price: %s", signals.has_price, signals.price)
    logger.debug("Availability section text: %s", signals.availability_text.strip())
    return signals


def find_phrase(text: str, phrases: Sequence[str]) -> Optional[str]:
    """Return the first phrase contained in text, in list order."""
    for phrase in phrases:
        if phrase in text:
            return phrase
    return None


def _available(signals: Signals) -> AvailabilityVerdict:
    if signals.has_price:
        return AvailabilityVerdict(available=True, status=f"{STATUS_AVAILABLE} - Price: {signals.price}")
    return AvailabilityVerdict(available=True, status=STATUS_AVAILABLE)


def decide(signals: Signals) -> AvailabilityVerdict:
    phrase = find_phrase(signals.availability_text, UNAVAILABLE_PHRASES)
    if phrase:
        logger.info("Found unavailability indicator: %s", phrase)
        return AvailabilityVerdict(available=False, status=STATUS_UNAVAILABLE)

    phrase = find_phrase(signals.availability_text, IN_STOCK_PHRASES)
    if phrase:
        logger.info("Found in-stock indicator: %s", phrase)
        return _available(signals)

    if signals.buy_button and signals.has_price:
        return _available(signals)

    # A buy button without a price is still treated as unavailable
    logger.info("Could not definitively determine availability - defaulting to unavailable")
    return AvailabilityVerdict(available=False, status=STATUS_UNCLEAR)


def classify(html: Union[str, bytes]) -> AvailabilityVerdict:
    """
    Classify a product page.

    Raises ParseError for empty or non-text input; otherwise always returns
    a verdict.
    """
    soup = parse_document(html)
    return decide(extract_signals(soup))
