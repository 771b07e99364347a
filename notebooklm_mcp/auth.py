# auth.py
import sys

from playwright.async_api import Page

from notebooklm_mcp.config import Settings

EMAIL_INPUT = 'input[type="email"]'
PASSWORD_INPUT = 'input[type="password"]'
EMAIL_NEXT = "#identifierNext"
PASSWORD_NEXT = "#passwordNext"


def is_logged_in(url: str, settings: Settings) -> bool:
    # the login page carries the app URL in its `continue` parameter
    return settings.app_host in url and settings.login_host not in url


async def ensure_logged_in(page: Page, settings: Settings):
    """
    Open NotebookLM and sign in with the configured Google account if needed.

    Called before every action. When the app loads without a redirect to the
    Google login domain this returns after the initial navigation. Otherwise
    it fills the email step, then the password step, and waits for the
    post-login navigation to go idle. A field that does not show up within
    `settings.login_timeout_ms` raises Playwright's TimeoutError; nothing is
    retried and wrong credentials look the same as a changed login page.
    """
    await page.goto(settings.base_url, wait_until="networkidle")
    if is_logged_in(page.url, settings):
        return

    print(f"[auth] Signing in at {page.url}", file=sys.stderr)
    await page.wait_for_selector(EMAIL_INPUT, timeout=settings.login_timeout_ms)
    await page.type(EMAIL_INPUT, settings.email)
    await page.click(EMAIL_NEXT)

    await page.wait_for_selector(PASSWORD_INPUT, timeout=settings.login_timeout_ms)
    await page.type(PASSWORD_INPUT, settings.password)
    async with page.expect_navigation(wait_until="networkidle"):
        await page.click(PASSWORD_NEXT)
    print("[auth] Login submitted", file=sys.stderr)
