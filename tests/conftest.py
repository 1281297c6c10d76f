import pytest

from stockwatch.fetch.base import BaseFetcher, FetchResult

ENV_VARS = (
    "DISCORD_BOT_TOKEN",
    "DISCORD_CHANNEL_ID",
    "REQUEST_TIMEOUT",
    "NOTIFY_TIMEOUT",
    "CHECK_INTERVAL_SECONDS",
    "CHECK_JITTER_SECONDS",
    "LOG_LEVEL",
)

@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep host environment variables out of the tests"""
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield

@pytest.fixture
def credentials(monkeypatch):
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "test-token")
    monkeypatch.setenv("DISCORD_CHANNEL_ID", "123456")

IN_STOCK_HTML = """
<html>
<body>
    <div id="corePrice_feature_div">
        <span class="a-price"><span class="a-offscreen">$24.99</span></span>
    </div>
    <div id="availability">
        <span class="a-size-medium a-color-success">In Stock.</span>
    </div>
    <input id="add-to-cart-button" type="submit" value="Add to Cart">
</body>
</html>
"""

OUT_OF_STOCK_HTML = """
<html>
<body>
    <div id="availability">
        <span class="a-color-price">Currently unavailable.</span>
        <span>We don't know when or if this item will be back in stock.</span>
    </div>
</body>
</html>
"""

class FakeFetcher(BaseFetcher):
    """Serves canned pages; an Exception value is raised instead of returned."""

    def __init__(self, pages):
        self.pages = pages
        self.calls = []

    def fetch(self, url: str) -> FetchResult:
        self.calls.append(url)
        page = self.pages[url]
        if isinstance(page, Exception):
            raise page
        status, html = page
        return FetchResult(
            url=url,
            status_code=status,
            html=html if status == 200 else None,
        )

class FakeNotifier:
    def __init__(self, error=None):
        self.error = error
        self.sent = []

    def notify_available(self, url: str):
        if self.error:
            raise self.error
        self.sent.append(url)

@pytest.fixture
def in_stock_html():
    return IN_STOCK_HTML

@pytest.fixture
def out_of_stock_html():
    return OUT_OF_STOCK_HTML

@pytest.fixture
def make_fetcher():
    return FakeFetcher

@pytest.fixture
def make_notifier():
    return FakeNotifier
