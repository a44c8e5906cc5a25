"""Shared pytest fixtures."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

APP_PATH = Path(__file__).resolve().parent.parent / "app.py"


@pytest.fixture
def app():
    """The full app with the simulated delays switched off."""
    at = AppTest.from_file(str(APP_PATH), default_timeout=10)
    at.secrets["SEARCH_LATENCY_SECONDS"] = 0
    at.secrets["SUMMARY_LATENCY_SECONDS"] = 0
    at.secrets["LOG_LEVEL"] = "WARNING"
    return at.run()
