"""Pytest configuration and fixtures."""

import pytest

from restplay import config as config_module
from restplay.config import Settings


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch):
    """Give every test settings built from a clean environment."""
    monkeypatch.delenv("RESTPLAY_CLIENT_ID_KEY", raising=False)
    monkeypatch.delenv("RESTPLAY_MAX_FORM_BYTES", raising=False)
    monkeypatch.setattr(config_module, "settings", Settings(_env_file=None))
    return config_module.settings


@pytest.fixture
def form_headers() -> dict[str, str]:
    return {"Content-Type": "application/x-www-form-urlencoded"}
