"""Pytest configuration and fixtures for gomodmerge-common tests."""
import logging
import os

import pytest


@pytest.fixture
def clean_env(monkeypatch):
    """Remove GOMODMERGE_* variables so settings fall back to defaults."""
    for name in list(os.environ):
        if name.startswith("GOMODMERGE_"):
            monkeypatch.delenv(name)
    yield


@pytest.fixture
def reset_logging():
    """Restore the gomodmerge root logger after a test reconfigures it."""
    root = logging.getLogger("gomodmerge")
    handlers = list(root.handlers)
    level = root.level
    propagate = root.propagate
    yield root
    root.handlers = handlers
    root.setLevel(level)
    root.propagate = propagate
