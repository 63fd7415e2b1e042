"""Thin logging helpers shared by the engine."""

import logging

LOGGER_NAME = "noname_engine"

_logger = logging.getLogger(LOGGER_NAME)


def log_info(message):
    """Log ``message`` at INFO level on the engine logger."""
    _logger.info(message)


def log_error(message):
    """Log ``message`` at ERROR level on the engine logger."""
    _logger.error(message)


def log_warn(message):
    """Log ``message`` at WARNING level on the engine logger."""
    _logger.warning(message)