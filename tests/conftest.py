from __future__ import annotations

import asyncio
from contextlib import asynccontextmanager

import pytest

from notebooklm_mcp.config import Settings
from notebooklm_mcp.session import AppContext

APP_URL = "https://notebooklm.google.com/"
LOGIN_URL = "https://accounts.google.com/v3/signin/identifier?continue=https://notebooklm.google.com/"


class FakeTimeout(Exception):
    pass


class FakeElement:
    def __init__(self, page: "FakePage", text: str | None) -> None:
        self.page = page
        self.text = text

    async def text_content(self) -> str | None:
        return self.text

    async def click(self) -> None:
        self.page.calls.append(("click_button", self.text))


class FakeKeyboard:
    def __init__(self, page: "FakePage") -> None:
        self.page = page

    async def type(self, text: str) -> None:
        self.page._check("keyboard.type")
        self.page.calls.append(("keyboard.type", text))

    async def press(self, key: str) -> None:
        self.page.calls.append(("keyboard.press", key))


class FakePage:
    """Records every Playwright call; `fail_on` names a call or selector that times out."""

    def __init__(
        self,
        *,
        landing_url: str = APP_URL,
        buttons: tuple[str | None, ...] = (),
        titles: list[str] | None = None,
        fail_on: str | None = None,
    ) -> None:
        self.url = "about:blank"
        self.landing_url = landing_url
        self.buttons = [FakeElement(self, t) for t in buttons]
        self.titles = titles or []
        self.fail_on = fail_on
        self.calls: list[tuple] = []
        self.keyboard = FakeKeyboard(self)

    def _check(self, what: str) -> None:
        if self.fail_on == what:
            raise FakeTimeout(f"Timeout exceeded waiting for {what}")

    async def goto(self, url: str, wait_until: str | None = None) -> None:
        self.calls.append(("goto", url, wait_until))
        self.url = self.landing_url

    async def wait_for_selector(self, selector: str, timeout: int | None = None) -> None:
        self.calls.append(("wait_for_selector", selector, timeout))
        self._check(selector)

    async def type(self, selector: str, text: str) -> None:
        self.calls.append(("type", selector, text))

    async def click(self, selector: str) -> None:
        self.calls.append(("click", selector))

    @asynccontextmanager
    async def expect_navigation(self, wait_until: str | None = None):
        self.calls.append(("expect_navigation", wait_until))
        yield
        self.url = APP_URL
        self.landing_url = APP_URL

    async def query_selector_all(self, selector: str) -> list[FakeElement]:
        self.calls.append(("query_selector_all", selector))
        return list(self.buttons)

    async def eval_on_selector_all(self, selector: str, expression: str) -> list[str]:
        self.calls.append(("eval_on_selector_all", selector))
        self._check("eval_on_selector_all")
        return list(self.titles)


class FakeSession:
    def __init__(self, page: FakePage) -> None:
        self.page = page
        self.lock = asyncio.Lock()
        self.get_page_calls = 0
        self.closed = False

    async def get_page(self) -> FakePage:
        self.get_page_calls += 1
        return self.page

    async def close(self) -> None:
        self.closed = True


@pytest.fixture
def settings() -> Settings:
    return Settings(email="reader@example.com", password="s3cret-pass")


@pytest.fixture
def make_ctx(settings):  # noqa: ANN001
    def _make(page: FakePage) -> AppContext:
        return AppContext(settings, session=FakeSession(page))

    return _make
