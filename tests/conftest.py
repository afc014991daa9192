"""
Root conftest.py - sys.path, env vars, shared fixtures.

Sets up the test environment so all production code can be imported
from a checkout without installing the package.
"""

import os
import sys

import pytest

# Add project root to sys.path so 'vector_tile_styles', 'config', etc. are importable
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)


@pytest.fixture(autouse=True)
def isolated_style_config(monkeypatch):
    """
    Clear VT_STYLE_* overrides and the config singleton around every test.

    StyleConfig is read from the environment once and cached, so a test that
    sets a variable must not leak it into the next one.
    """
    from config import reset_config

    for var in list(os.environ):
        if var.startswith("VT_STYLE_"):
            monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()


@pytest.fixture
def style_config():
    """StyleConfig with built-in defaults."""
    from config import StyleConfig
    return StyleConfig()
