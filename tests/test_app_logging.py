"""Tests for logging configuration."""

import logging

from horizon_admin.app_logging import configure_logging


def test_configure_logging_installs_single_handler() -> None:
    logger = logging.getLogger("horizon_admin")
    logger.handlers.clear()

    configure_logging()
    configure_logging()

    assert len(logger.handlers) == 1
    assert logger.level == logging.INFO


def test_configure_logging_applies_level_and_quiets_httpx() -> None:
    configure_logging("debug")

    assert logging.getLogger("horizon_admin").level == logging.DEBUG
    assert logging.getLogger("httpx").level == logging.WARNING

    configure_logging("INFO")
