"""Logging setup for the CLI process.

Pipeline stages never configure logging themselves; they take a
``logging.Logger`` and fall back to their module logger. The CLI calls
``configure_logging`` once and passes the result down.
"""

import logging

from .config import Settings

LOGGER_NAME = "brand_tokens"
LOG_FORMAT = "%(asctime)s [%(levelname)s]: %(message)s"


def configure_logging(settings: Settings) -> logging.Logger:
    """Attach console + file handlers to the application logger.

    File sinks: one with every record, one with errors only. Calling this
    again replaces the handlers from the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    level = logging.getLevelName(settings.log_level)
    if not isinstance(level, int):
        level = logging.INFO
    logger.setLevel(level)
    logger.propagate = False

    formatter = logging.Formatter(LOG_FORMAT)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if settings.log_to_file:
        settings.log_dir.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(settings.log_path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

        error_handler = logging.FileHandler(settings.error_log_path, encoding="utf-8")
        error_handler.setLevel(logging.ERROR)
        error_handler.setFormatter(formatter)
        logger.addHandler(error_handler)

    return logger
