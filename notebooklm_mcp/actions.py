# actions.py
import sys
from typing import Iterable, Literal, Optional

from pydantic import BaseModel

from notebooklm_mcp.auth import ensure_logged_in
from notebooklm_mcp.session import AppContext

NEW_NOTEBOOK_AFFORDANCE = '[aria-label="New notebook"], button[jsname]'
NEW_NOTEBOOK_LABEL = "New notebook"
TITLE_INPUT = "input[placeholder], input[aria-label]"
NOTEBOOK_TITLES = '[data-testid="notebook-title"], .notebook-title, h3'

EMPTY_LIST_MESSAGE = "No notebooks found, or the notebook list could not be loaded."
OPENED_MESSAGE = "Opened NotebookLM in the browser."

Stage = Literal["setup", "ui"]


class ActionResult(BaseModel):
    """Uniform outcome of an action handler.

    `stage` tells where a failure happened: `setup` is browser launch and
    login, `ui` is the handler's own page interaction. The dispatcher decides
    per tool whether a failure is reported as text or raised.
    """

    ok: bool
    text: str = ""
    error: Optional[str] = None
    stage: Stage = "ui"

    @classmethod
    def success(cls, text: str) -> "ActionResult":
        return cls(ok=True, text=text)

    @classmethod
    def failure(cls, stage: Stage, exc: Exception, text: str = "") -> "ActionResult":
        print(f"[actions] {stage} failed: {exc}", file=sys.stderr)
        return cls(ok=False, text=text or str(exc), error=str(exc), stage=stage)


def format_notebook_list(titles: Iterable[Optional[str]]) -> str:
    names = [t.strip() for t in titles if t and t.strip()]
    if not names:
        return EMPTY_LIST_MESSAGE
    body = "\n".join(f"{i}. {name}" for i, name in enumerate(names, start=1))
    return f"Notebooks:\n{body}"


async def _signed_in_page(ctx: AppContext, reload: bool = False):
    page = await ctx.session.get_page()
    await ensure_logged_in(page, ctx.settings)
    if reload:
        await page.goto(ctx.settings.base_url, wait_until="networkidle")
    return page


async def create_notebook(ctx: AppContext, title: str) -> ActionResult:
    try:
        page = await _signed_in_page(ctx, reload=True)
    except Exception as e:
        return ActionResult.failure("setup", e)

    settings = ctx.settings
    try:
        await page.wait_for_selector(
            NEW_NOTEBOOK_AFFORDANCE, timeout=settings.new_notebook_timeout_ms
        )
        for button in await page.query_selector_all("button"):
            text = await button.text_content()
            if text and NEW_NOTEBOOK_LABEL in text:
                await button.click()
                break

        await page.wait_for_selector(TITLE_INPUT, timeout=settings.title_input_timeout_ms)
        await page.keyboard.type(title)
        await page.keyboard.press("Enter")
    except Exception as e:
        return ActionResult.failure(
            "ui", e,
            f"Error while creating notebook: {e}. Please check the NotebookLM page directly.",
        )
    return ActionResult.success(f'Notebook "{title}" created.')


async def list_notebooks(ctx: AppContext) -> ActionResult:
    # an empty page and stale selectors produce the same message
    try:
        page = await _signed_in_page(ctx, reload=True)
    except Exception as e:
        return ActionResult.failure("setup", e)

    try:
        titles = await page.eval_on_selector_all(
            NOTEBOOK_TITLES,
            "els => els.map(el => (el.textContent || '').trim()).filter(Boolean)",
        )
    except Exception as e:
        return ActionResult.failure("ui", e, f"Error loading notebook list: {e}")
    return ActionResult.success(format_notebook_list(titles))


async def open_notebooklm(ctx: AppContext) -> ActionResult:
    try:
        await _signed_in_page(ctx)
    except Exception as e:
        return ActionResult.failure("setup", e)
    return ActionResult.success(OPENED_MESSAGE)
