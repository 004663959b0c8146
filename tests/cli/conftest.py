"""Fixtures for CLI tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def reset_package_logger(monkeypatch):
    """Drop handlers the CLI attaches so each test starts from a clean logger."""
    monkeypatch.delenv("PAGECRAFT_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PAGECRAFT_VERBOSE", raising=False)
    monkeypatch.delenv("PAGECRAFT_DEBUG", raising=False)
    yield
    logger = logging.getLogger("pagecraft")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.propagate = True
    logger.setLevel(logging.NOTSET)
