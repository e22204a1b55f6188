from __future__ import annotations

import logging
from types import TracebackType
from typing import TYPE_CHECKING

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from .config import RunConfig
from .errors import BrowserUnavailableError, PageLoadError
from .runtime_checks import _is_missing_browser_error

if TYPE_CHECKING:
    from playwright.sync_api import Browser, BrowserContext, Page, Playwright


class BrowserManager:
    """Owns one headless Chromium session for the lifetime of a ``with`` block."""

    def __init__(self, config: RunConfig | None = None) -> None:
        self.config = config or RunConfig()
        self.logger = logging.getLogger("pagelocators.browser")

        self._playwright: Playwright | None = None
        self._browser: Browser | None = None
        self._context: BrowserContext | None = None
        self._page: Page | None = None

    def __enter__(self) -> BrowserManager:
        try:
            self._start()
        except BaseException:
            self.close()
            raise
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    def _start(self) -> None:
        try:
            self._playwright = sync_playwright().start()
        except Exception as exc:
            raise BrowserUnavailableError(f"Failed to start Playwright: {exc}") from exc
        try:
            self._browser = self._playwright.chromium.launch(headless=self.config.headless)
        except PlaywrightError as exc:
            if _is_missing_browser_error(exc):
                raise BrowserUnavailableError(
                    "Chromium is not installed for Playwright. Run `playwright install chromium`."
                ) from exc
            raise BrowserUnavailableError(f"Failed to launch chromium: {exc}") from exc
        try:
            self._context = self._browser.new_context()
            self._page = self._context.new_page()
        except PlaywrightError as exc:
            raise BrowserUnavailableError(f"Failed to open a browser page: {exc}") from exc
        self._page.set_default_navigation_timeout(self.config.navigation_timeout_ms)
        self.logger.info("Browser launched (headless=%s).", self.config.headless)

    def page_source(self, url: str) -> str:
        if self._page is None:
            raise BrowserUnavailableError("Browser session is not started.")
        self.logger.info("Navigating to %s", url)
        try:
            self._page.goto(url, wait_until=self.config.wait_until)
        except PlaywrightError as exc:
            raise PageLoadError(f"Failed to load {url}: {exc}") from exc
        try:
            return self._page.content()
        except PlaywrightError as exc:
            raise PageLoadError(f"Failed to read page content from {url}: {exc}") from exc

    def close(self) -> None:
        for label, resource in (("context", self._context), ("browser", self._browser)):
            if resource is None:
                continue
            try:
                resource.close()
            except PlaywrightError as exc:
                self.logger.warning("Failed to close %s: %s", label, exc)
        self._page = None
        self._context = None
        self._browser = None
        if self._playwright is not None:
            self._playwright.stop()
            self._playwright = None
            self.logger.info("Browser session closed.")


def fetch_rendered_html(url: str, config: RunConfig | None = None) -> str:
    with BrowserManager(config) as browser:
        return browser.page_source(url)
