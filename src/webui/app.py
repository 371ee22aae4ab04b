from typing import Optional
from typing import Union

from .browser import Browser
from .browser import BrowserType


class BaseApp:
    """A web application under test: the browser it runs in and the address it starts at.

    .. code-block:: python

        class JobSearchApp(BaseApp):
            def __init__(self, browser):
                super().__init__(browser, "https://jobs.example.com/")

        with JobSearchApp(Browser()).launch() as app:
            SearchPage(app).wait_until_available()

    Args:
        browser: The browser to open the application in
        url: Start address of the application
        browser_type: Browser engine, the browser's configured one when not specified
    """

    def __init__(
        self,
        browser: Browser,
        url: str,
        browser_type: Union[str, BrowserType, None] = None,
    ) -> None:
        self.browser = browser
        self.url = url
        self.browser_type = browser_type

    @property
    def name(self) -> str:
        return type(self).__name__

    @property
    def logger(self):
        return self.browser.logger

    def launch(self) -> "BaseApp":
        """Launches the browser and opens the start address."""
        self.browser.launch(self.browser_type, url=self.url)
        return self

    def dispose(self) -> None:
        self.browser.dispose()

    def __enter__(self) -> "BaseApp":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.dispose()

    def __repr__(self):
        return f"{self.name}({self.url!r})"
