import pytest
from pathlib import Path
from typing import Iterator

from fakes import FakePage, FakePlaywright
from webui.browser import Browser
from webui.config import Settings


def pytest_addoption(parser):
    """Add custom command line options for browser selection and mode."""
    parser.addoption(
        "--browser",
        action="store",
        default="chromium",
        choices=["chromium", "firefox", "webkit"],
        help="Browser to run tests with: chromium, firefox, webkit (default: chromium)",
    )
    parser.addoption(
        "--headless",
        action="store_true",
        default=False,
        help="Run tests in headless mode (no browser window) default its run in headed mode.",
    )


@pytest.fixture(scope="session")
def browser_name(request):
    """Get browser name from command line argument."""
    return request.config.getoption("--browser")


@pytest.fixture(scope="session")
def headless_mode(request):
    """Determine if tests should run in headless mode."""
    if request.config.getoption("--headless"):
        return True
    return False


@pytest.fixture(scope="session")
def testing_page_url() -> str:
    """Provides the local file path to the testing page."""
    html_file = Path(__file__).parent / "html" / "testing_page.html"
    return html_file.resolve().as_uri()


@pytest.fixture
def settings() -> Settings:
    """Short waits so the tests polling for something that never shows up stay quick."""
    return Settings(element_timeout=0.3, page_load_timeout=0.3, poll_interval=0.01)


@pytest.fixture
def page() -> FakePage:
    return FakePage()


@pytest.fixture
def browser(page: FakePage, settings: Settings) -> Browser:
    """A browser attached to an in-memory page."""
    return Browser(page, settings=settings)


@pytest.fixture
def fake_playwright(monkeypatch) -> FakePlaywright:
    """Replaces the Playwright driver started by ``Browser.launch``."""
    playwright = FakePlaywright()
    monkeypatch.setattr("webui.browser.sync_playwright", playwright)
    return playwright


@pytest.fixture(scope="session")
def live_browser(browser_name: str, headless_mode: bool) -> Iterator[Browser]:
    """A real browser session, the tests using it are skipped when no browser can be launched."""
    live = Browser(settings=Settings(browser_type=browser_name, headless=headless_mode))
    try:
        live.launch()
    except Exception as e:
        pytest.skip(f"Cannot launch {browser_name}: {e}")
    print(f"\nLaunching {browser_name} browser ({'headless' if headless_mode else 'headed'} mode)")
    yield live
    print(f"\nClosing {browser_name} browser")
    live.dispose()


@pytest.fixture
def live(live_browser: Browser, testing_page_url: str) -> Browser:
    """The real browser with a freshly loaded testing page."""
    live_browser.navigate_to(testing_page_url)
    return live_browser
