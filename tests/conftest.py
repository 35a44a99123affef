"""Shared test fixtures for repobundle tests."""

from __future__ import annotations

import logging

import pytest


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch):
    """Run every test outside of an Actions runner, with a pristine package logger."""
    for name in ("GITHUB_ACTIONS", "GITHUB_OUTPUT"):
        monkeypatch.delenv(name, raising=False)
    for name in ("INCLUDE", "EXCLUDE", "STYLE", "DESCRIPTION", "ESCAPE", "ROOT", "ENCODING", "MAX_WORKERS"):
        monkeypatch.delenv(f"INPUT_{name}", raising=False)

    logger = logging.getLogger("repobundle")
    handlers, level = list(logger.handlers), logger.level
    yield
    for h in list(logger.handlers):
        if h not in handlers:
            logger.removeHandler(h)
    logger.setLevel(level)
