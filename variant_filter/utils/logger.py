import logging
import os
from typing import Dict, Optional

from variant_filter.utils.exceptions import ConfigurationError

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

LOG_LEVELS: Dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def resolve_level(log_level: str) -> int:
    """
    Map a level name from the environment to a logging level.

    Raises:
        ConfigurationError: If the name is not a known level, so a typo in
            LOG_LEVEL fails before any records are read instead of silently
            logging at INFO.
    """
    try:
        return LOG_LEVELS[log_level.strip().upper()]
    except KeyError:
        raise ConfigurationError(
            f"Unknown log level '{log_level}', expected one of {sorted(LOG_LEVELS)}"
        ) from None


class Logger:
    """
    Process-wide console logger for variant-filter.

    There is a single underlying logger named after APP_NAME. Runners and
    filters log through named children of it (see get_child), which share its
    handler and level, so a run's output reads as one stream while still
    showing which strategy produced each line.
    """

    _instance = None

    def __init__(self, log_level: str = "INFO", logger_name: Optional[str] = None):
        """
        Args:
            log_level (str): Starting level name, e.g. "INFO" or "DEBUG".
            logger_name (str, optional): Defaults to APP_NAME or "variant-filter".
        """
        self.logger_name = logger_name or os.getenv("APP_NAME", "variant-filter")
        self.logger = logging.getLogger(self.logger_name)

        self.logger.handlers.clear()

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        self.logger.addHandler(console_handler)

        self.set_level(log_level)

        self.logger.propagate = False

    def set_level(self, log_level: str) -> None:
        """Change the level of the shared logger, and with it every child."""
        self.logger.setLevel(resolve_level(log_level))
        self.logger.debug(f"Logging level set to {log_level}")

    @classmethod
    def get_logger(cls, log_level: str = "INFO") -> logging.Logger:
        """Return the shared logger, creating it at log_level on first use."""
        if cls._instance is None:
            cls._instance = Logger(log_level=log_level)
        return cls._instance.logger

    @classmethod
    def get_child(cls, name: str) -> logging.Logger:
        """
        Return a logger named "<app name>.<name>".

        Children have no handler of their own and propagate to the shared
        console handler.
        """
        return cls.get_logger().getChild(name)

    @classmethod
    def update_level(cls, log_level: str) -> None:
        """Apply the configured LOG_LEVEL."""
        if cls._instance is None:
            cls.get_logger(log_level=log_level)
        else:
            cls._instance.set_level(log_level)


logger = Logger.get_logger()
