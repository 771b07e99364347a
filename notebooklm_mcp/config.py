# config.py
import os
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

DEFAULT_URL = "https://notebooklm.google.com"
LOGIN_HOST = "accounts.google.com"
TRUTHY = {"1", "true", "yes", "on"}


class Settings(BaseModel):
    """Process configuration, read once at startup and never mutated."""

    model_config = ConfigDict(frozen=True)

    email: str = ""
    password: str = ""
    base_url: str = DEFAULT_URL
    login_host: str = LOGIN_HOST
    headless: bool = False

    # timeouts in milliseconds
    login_timeout_ms: int = 10000
    new_notebook_timeout_ms: int = 8000
    title_input_timeout_ms: int = 5000

    @property
    def app_host(self) -> str:
        return urlparse(self.base_url).netloc


def load_settings(env_file: Optional[str] = None) -> Settings:
    # credentials are not validated; missing values become ""
    load_dotenv(env_file)
    return Settings(
        email=os.getenv("GOOGLE_EMAIL", ""),
        password=os.getenv("GOOGLE_PASSWORD", ""),
        base_url=os.getenv("NOTEBOOKLM_URL", DEFAULT_URL),
        headless=os.getenv("NOTEBOOKLM_HEADLESS", "false").strip().lower() in TRUTHY,
    )
