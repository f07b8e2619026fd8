"""Unit tests for the logging configuration helpers."""

import logging

from blogful.infrastructure.logging.log_config import _parse_level, setup_logging


def test_parse_level_falls_back_to_info():
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level("not-a-level") == logging.INFO


def test_setup_logging_applies_category_levels():
    setup_logging()

    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
    assert logging.getLogger().level == logging.INFO
