"""Process-level utilities: environment settings and logging setup."""

from .config import Settings, load_settings
from .log_utils import LOGGER_NAME, configure_logging

__all__ = ["LOGGER_NAME", "Settings", "configure_logging", "load_settings"]
