"""Pytest configuration and shared fixtures for transport-pipeline tests."""

import logging

import pytest


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Auto-cleanup: Clear test-related environment variables before each test.

    This prevents a developer's shell or .env from leaking into settings tests.
    """
    import os

    test_prefixes = ("TEST_", "TRANSPORT_PIPELINE_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def access_logger(caplog):
    """Logger for access-log assertions, captured at INFO."""
    logger = logging.getLogger("tests.access_log")
    caplog.set_level(logging.INFO, logger="tests.access_log")
    return logger


@pytest.fixture
def access_records(caplog):
    """Return the captured access-log records (summary lines only)."""

    def records():
        return [r for r in caplog.records if r.name == "tests.access_log" and not r.getMessage().startswith("start ")]

    return records
