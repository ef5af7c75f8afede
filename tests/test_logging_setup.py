# -*- coding: utf-8 -*-
"""Tests for walljoin.logging_setup."""
import logging

import pytest

from walljoin import logging_setup


def test_get_logger_namespaces_names():
    assert logging_setup.get_logger().name == "walljoin"
    assert logging_setup.get_logger("candidates").name == "walljoin.candidates"
    assert logging_setup.get_logger("walljoin.joiner").name == "walljoin.joiner"


def test_default_log_path_uses_temp(tmp_path):
    assert logging_setup.default_log_path("x.log") == str(tmp_path / "x.log")


def test_configure_once_per_process(tmp_path):
    path = str(tmp_path / "walljoin.log")
    logger = logging_setup.configure_logging("DEBUG", path)
    handlers = list(logger.handlers)

    again = logging_setup.configure_logging("WARNING", str(tmp_path / "other.log"))

    assert again is logger
    assert again.handlers == handlers
    assert logger.level == logging.WARNING
    assert logging_setup.is_configured()


def test_messages_reach_the_file(tmp_path):
    path = tmp_path / "walljoin.log"
    logging_setup.configure_logging("INFO", str(path))

    logging_setup.get_logger("joiner").info("wall %s is intersected by %s walls", 1, 2)
    logging_setup.get_logger("joiner").debug("hidden")
    logging_setup.reset_logging()

    text = path.read_text(encoding="utf-8")
    assert "INFO walljoin.joiner: wall 1 is intersected by 2 walls" in text
    assert "hidden" not in text


def test_reset_is_idempotent():
    logging_setup.reset_logging()
    logging_setup.reset_logging()
    assert not logging_setup.is_configured()


def test_unknown_level_rejected(tmp_path):
    with pytest.raises(ValueError):
        logging_setup.configure_logging("CHATTY", str(tmp_path / "x.log"))


def test_configure_from_settings(tmp_path, default_settings):
    logger = logging_setup.configure_from_settings(dict(default_settings, log_level="debug"))
    assert logger.level == logging.DEBUG
    assert (tmp_path / "walljoin-test.log").exists()
