"""Shared test configuration and pytest markers."""

import pytest

from api.router import limiter
from config import settings


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "scenario: end-to-end resume/job description walkthroughs"
    )


@pytest.fixture(autouse=True)
def offline_settings(monkeypatch):
    """Never reach Gemini and never hit the rate limiter in tests."""
    monkeypatch.setattr(settings, "gemini_api_key", "")
    monkeypatch.setattr(settings, "external_analysis_enabled", True)
    monkeypatch.setattr(limiter, "enabled", False)
