"""Tests for package logger setup."""

from __future__ import annotations

import logging

from abagen.core.logging_config import PACKAGE_LOGGER, configure_logging


def test_sets_level_from_string():
    logger = configure_logging("debug")
    assert logger.name == PACKAGE_LOGGER
    assert logger.level == logging.DEBUG


def test_repeated_calls_keep_single_handler():
    configure_logging(logging.INFO)
    logger = configure_logging(logging.WARNING)
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING
