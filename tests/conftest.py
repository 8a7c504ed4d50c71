"""Shared fixtures for SkyObserver tests."""

import logging
from datetime import datetime, timezone

import pytest

from skyobserver.logging_config import ROOT_LOGGER_NAME

CORLU = (41.1450, 27.4081)


@pytest.fixture(autouse=True)
def reset_package_logger():
    """Undo setup_logging() so caplog keeps seeing package records."""
    yield
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(logger.handlers):
        handler.close()
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def clean_env(monkeypatch):
    """Remove SKYOBSERVER_* variables from the process environment."""
    for key in (
        "SKYOBSERVER_CITY",
        "SKYOBSERVER_LANG",
        "SKYOBSERVER_REFRESH_SECONDS",
        "SKYOBSERVER_LOG_LEVEL",
        "SKYOBSERVER_LOG_FILE",
        "SKYOBSERVER_USER_AGENT",
    ):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def sample_times():
    """Spread of instants across seasons, years and times of day."""
    return [
        datetime(2000, 1, 1, 12, 0),
        datetime(2012, 6, 21, 3, 30),
        datetime(2020, 12, 21, 18, 45),
        datetime(2024, 1, 25, 17, 54),
        datetime(2024, 3, 20, 10, 17),
        datetime(2024, 8, 12, 22, 0),
        datetime(2024, 10, 2, 0, 0, tzinfo=timezone.utc),
        datetime(2031, 7, 4, 9, 15),
    ]


@pytest.fixture
def sample_observers():
    """(latitude, longitude) pairs including poles and the date line."""
    return [
        CORLU,
        (0.0, 0.0),
        (-33.87, 151.21),
        (64.13, -21.94),
        (90.0, 0.0),
        (-90.0, 180.0),
    ]
