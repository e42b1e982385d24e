"""
Global pytest configuration for connectorlib tests.

Autouse fixtures keep the suite independent of the caller's environment:
CONNECTOR_* settings and log format variables are removed so defaults apply.
"""

import pytest

from connectorlib.config import ConfigManager


@pytest.fixture(autouse=True)
def _clear_connector_env(monkeypatch):
    """Remove CONNECTOR_* overrides and log settings from the environment."""
    for env_var in ConfigManager.ENV_VARS.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.delenv("LOG_FORMAT", raising=False)
    monkeypatch.delenv("LOG_LEVEL", raising=False)
