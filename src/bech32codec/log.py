import logging
import os

from .config import DEFAULT_LOG_LEVEL, LOG_DATEFMT, LOG_FORMAT, LOG_LEVEL_ENV

ROOT_LOGGER_NAME = "bech32codec"


def setup_logging() -> logging.Logger:
    """Setup logging configuration for the package logger."""
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    if not logger.handlers:
        handler = logging.StreamHandler()

        level = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()
        logger.setLevel(getattr(logging, level, logging.WARNING))

        # Structured formatting
        formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def log(logger: logging.Logger, level: str, message: str, **kwargs):
    """Structured logging with optional context."""
    setup_logging()
    if not logger.isEnabledFor(getattr(logging, level.upper(), logging.INFO)):
        return
    log_method = getattr(logger, level.lower(), logger.info)

    if kwargs:
        # Add context to message
        context = " ".join([f"{k}={v}" for k, v in kwargs.items()])
        message = f"{message} | {context}"

    log_method(message)
