# session.py
import asyncio, sys
from typing import Optional

from playwright.async_api import Browser, Page, Playwright, async_playwright

from notebooklm_mcp.config import Settings

LAUNCH_ARGS = ["--no-sandbox", "--disable-setuid-sandbox"]


class BrowserSession:
    """
    Owns the single Playwright browser and page used by every tool call.

    The browser is launched lazily on the first `get_page()` and then reused
    until `close()` is called by the process entry point. Callers that drive
    the page must hold `lock` so overlapping tool calls run one at a time.
    """

    def __init__(self, headless: bool = False):
        self.headless = headless
        self.lock = asyncio.Lock()
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None
        self._page: Optional[Page] = None

    @property
    def started(self) -> bool:
        return self._page is not None

    async def get_page(self) -> Page:
        # each stage is memoized on its own so a failed launch never starts a second driver
        if self._playwright is None:
            self._playwright = await async_playwright().start()
        if self._browser is None:
            self._browser = await self._playwright.chromium.launch(
                headless=self.headless, args=LAUNCH_ARGS
            )
            print(f"[session] Browser launched (headless={self.headless})", file=sys.stderr)
        if self._page is None:
            self._page = await self._browser.new_page()
        return self._page

    async def close(self):
        started = self.started
        try:
            if self._browser is not None:
                await self._browser.close()
            if self._playwright is not None:
                await self._playwright.stop()
        finally:
            self._playwright = self._browser = self._page = None
        if started:
            print("[session] Browser closed", file=sys.stderr)


class AppContext:
    """Settings plus the browser session, handed to every action handler."""

    def __init__(self, settings: Settings, session: Optional[BrowserSession] = None):
        self.settings = settings
        self.session = session or BrowserSession(headless=settings.headless)

    async def close(self):
        await self.session.close()
