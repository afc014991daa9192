"""
Config test fixtures: clean environment via monkeypatch.
"""

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """Remove all env vars that config modules might read, for isolation."""
    from config.defaults import EnvironmentVariables

    env_vars_to_clear = [
        EnvironmentVariables.TEXT_OFFSET_SCALE,
        EnvironmentVariables.DEFAULT_TEXT_SIZE,
        EnvironmentVariables.LOG_UNSUPPORTED_LAYERS,
    ]
    for var in env_vars_to_clear:
        monkeypatch.delenv(var, raising=False)
    return monkeypatch
