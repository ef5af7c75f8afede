# -*- coding: utf-8 -*-
"""Process-wide logging for the wall join tools.

pyRevit keeps the IronPython/CPython engine alive between button clicks,
so handlers must be attached once per process, not once per command.
`configure_logging` is safe to call from every command run.
"""
import logging
import os
import tempfile


ROOT_LOGGER_NAME = "walljoin"
DEFAULT_LOG_FILE_NAME = "walljoin.log"
LOG_FORMAT = "[%(asctime)s] %(levelname)s %(name)s: %(message)s"

_handler = None


def get_logger(name=None):
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    if name.startswith(ROOT_LOGGER_NAME):
        return logging.getLogger(name)
    return logging.getLogger("{0}.{1}".format(ROOT_LOGGER_NAME, name))


def default_log_path(file_name=None):
    temp_dir = os.environ.get("TEMP") or tempfile.gettempdir()
    return os.path.join(temp_dir, file_name or DEFAULT_LOG_FILE_NAME)


def _parse_level(level):
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level or "INFO").upper())
    if not isinstance(value, int):
        raise ValueError("Unknown log level: {0}".format(level))
    return value


def configure_logging(level="INFO", log_file=None):
    """Attach the file handler on first call; later calls only set the level.

    Returns the package root logger.
    """
    global _handler

    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(_parse_level(level))

    if _handler is None:
        path = log_file or default_log_path()
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        _handler = handler
        logger.debug("logging configured path=%s", path)

    return logger


def is_configured():
    return _handler is not None


def reset_logging():
    """Detach the handler installed by `configure_logging`."""
    global _handler

    if _handler is None:
        return
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.removeHandler(_handler)
    try:
        _handler.close()
    finally:
        _handler = None


def configure_from_settings(settings):
    """Configure logging from the `log_level`/`log_file_name` settings."""
    settings = settings or {}
    log_path = default_log_path(settings.get("log_file_name"))
    return configure_logging(settings.get("log_level", "INFO"), log_path)
