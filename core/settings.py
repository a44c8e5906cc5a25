"""
Runtime settings.

Lookup order per key: environment variable, then ``st.secrets``
(``.streamlit/secrets.toml``), then the default below.
"""

import logging
import os
from dataclasses import dataclass

import streamlit as st

from core.errors import ConfigurationError
from core.mock_api import DEFAULT_SEARCH_LATENCY, DEFAULT_SUMMARY_LATENCY

logger = logging.getLogger(__name__)

DEFAULTS = {
    "SEARCH_LATENCY_SECONDS": DEFAULT_SEARCH_LATENCY,
    "SUMMARY_LATENCY_SECONDS": DEFAULT_SUMMARY_LATENCY,
    "LOG_LEVEL": "INFO",
}


@dataclass(frozen=True)
class Settings:
    search_latency: float
    summary_latency: float
    log_level: str


def _secret(key):
    if not st.secrets.load_if_toml_exists():
        return None
    return st.secrets.get(key)


def _lookup(key):
    if key in os.environ:
        return os.environ[key]
    value = _secret(key)
    if value is None:
        return DEFAULTS[key]
    return value


def _latency(key) -> float:
    raw = _lookup(key)
    try:
        value = float(raw)
    except (TypeError, ValueError) as e:
        raise ConfigurationError(f"{key} must be a number of seconds", value=raw) from e
    if value < 0:
        raise ConfigurationError(f"{key} cannot be negative", value=raw)
    return value


def get_settings() -> Settings:
    level = str(_lookup("LOG_LEVEL")).upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError("LOG_LEVEL is not a logging level name", value=level)
    return Settings(
        search_latency=_latency("SEARCH_LATENCY_SECONDS"),
        summary_latency=_latency("SUMMARY_LATENCY_SECONDS"),
        log_level=level,
    )
