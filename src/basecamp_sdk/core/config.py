from __future__ import annotations

import os

from dotenv import load_dotenv

from .client import BasecampClient
from .models import AccountConfig


def load_env_config(*, use_dotenv: bool = True) -> AccountConfig:
    """Load Basecamp account data from environment (optional .env)."""
    if use_dotenv:
        load_dotenv()
    return AccountConfig(
        account_id=os.getenv("BASECAMP_ACCOUNT_ID", "").strip(),
        app_name=os.getenv("BASECAMP_APP_NAME", "").strip(),
        token=os.getenv("BASECAMP_TOKEN", "").strip() or None,
        login=os.getenv("BASECAMP_LOGIN", "").strip() or None,
        password=os.getenv("BASECAMP_PASSWORD", "").strip() or None,
    )


def load_base_url() -> str:
    """Optional API host override; empty when unset."""
    return os.getenv("BASECAMP_BASE_URL", "").strip()


def create_client_from_env(**kwargs) -> BasecampClient:
    """Create a BasecampClient from environment variables."""
    config = load_env_config()
    if not config.account_id or not config.app_name:
        raise ValueError(
            "Missing BASECAMP_ACCOUNT_ID or BASECAMP_APP_NAME in environment."
        )
    base_url = load_base_url()
    if base_url:
        kwargs.setdefault("base_url", base_url)
    return BasecampClient(config, **kwargs)


__all__ = ["load_env_config", "load_base_url", "create_client_from_env"]
