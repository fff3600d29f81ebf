# scrape_jobguide_skills.py
"""
Headless Chromium rendering for job-guide pages.

The job guide builds its skill tables client side, so a plain HTTP fetch is not
enough. PlaywrightNavigator opens one browser per page and hands back a
RenderedJobPage; the caller must close() it (also on error paths) so the browser
and the Playwright driver go away.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from bs4 import BeautifulSoup
from playwright.sync_api import Error as PWError
from playwright.sync_api import TimeoutError as PWTimeoutError
from playwright.sync_api import sync_playwright

from scrape_errors import NavigationError, NavigationTimeoutError

log = logging.getLogger(__name__)

# ----------------------------
# Browser settings
# ----------------------------
USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0.0.0 Safari/537.36"
)

LAUNCH_ARGS = [
    "--no-sandbox",
    "--disable-setuid-sandbox",
    "--disable-dev-shm-usage",
]

VIEWPORT = {"width": 1400, "height": 900}


@dataclass(frozen=True)
class ScrapeSettings:
    timeout_ms: int = 30000
    settle_ms: int = 3000
    headless: bool = True
    user_agent: str = USER_AGENT


DEFAULT_SETTINGS = ScrapeSettings()


class RenderedJobPage:
    def __init__(self, url: str, playwright, browser, page):
        self.url = url
        self._playwright = playwright
        self._browser = browser
        self._page = page
        self._closed = False

    def settle(self, ms: int) -> None:
        if ms <= 0:
            return
        try:
            self._page.wait_for_timeout(ms)
        except PWError as e:
            raise NavigationError(self.url, f"Page failed while settling: {e}") from e

    def content(self) -> str:
        try:
            return self._page.content()
        except PWError as e:
            raise NavigationError(self.url, f"Could not read rendered page: {e}") from e

    def soup(self) -> BeautifulSoup:
        return BeautifulSoup(self.content(), "html.parser")

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        _shutdown(self._playwright, self._browser)


def _shutdown(playwright, browser) -> None:
    try:
        if browser is not None:
            browser.close()
    except PWError as e:
        log.debug("browser.close failed: %s", e)
    finally:
        playwright.stop()


class PlaywrightNavigator:
    def __init__(self, settings: ScrapeSettings = DEFAULT_SETTINGS):
        self.settings = settings

    def navigate(self, url: str, timeout_ms: Optional[int] = None) -> RenderedJobPage:
        timeout_ms = self.settings.timeout_ms if timeout_ms is None else timeout_ms

        playwright = sync_playwright().start()
        browser = None
        try:
            browser = playwright.chromium.launch(headless=self.settings.headless, args=LAUNCH_ARGS)
            page = browser.new_page(user_agent=self.settings.user_agent, viewport=VIEWPORT)

            log.debug("goto %s (timeout=%sms)", url, timeout_ms)
            page.goto(url, wait_until="networkidle", timeout=timeout_ms)
        except PWTimeoutError as e:
            _shutdown(playwright, browser)
            raise NavigationTimeoutError(url, f"Timed out after {timeout_ms}ms waiting for network idle") from e
        except PWError as e:
            _shutdown(playwright, browser)
            raise NavigationError(url, f"Navigation failed: {e}") from e

        return RenderedJobPage(url, playwright, browser, page)
