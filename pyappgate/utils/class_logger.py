"""Mixin Logger for per Class logging."""

import logging
from typing import Optional


class LoggerMixin:
    """A mixin class that provides a class-specific logger."""

    _loggers: dict[str, logging.Logger] = {}

    @classmethod
    def get_logger(cls) -> logging.Logger:
        """
        Get a logger for the class.

        Returns:
            logging.Logger: A logger instance specific to the class.

        """
        key = f"{cls.__module__}.{cls.__name__}"
        if key not in cls._loggers:
            cls._loggers[key] = logging.getLogger(key)
        return cls._loggers[key]

    @property
    def logger(self) -> logging.Logger:
        """Property to access the class logger."""
        return self.get_logger()


def configure_logging(level: int = logging.INFO, log_format: Optional[str] = None, log_file: Optional[str] = None) -> None:
    """
    Configure the logging system.

    Args:
        level: The logging level to use.
        log_format: The format string to use for log messages.
        log_file: The file to write log messages to.

    """
    if log_format is None:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d:%(funcName)s - %(message)s"

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter(log_format))
    handlers: list[logging.Handler] = [console_handler]
    if log_file:
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(log_format))
        handlers.append(file_handler)

    logging.basicConfig(level=level, format=log_format, handlers=handlers, force=True)


def level_from_name(name: str) -> int:
    """Translate a textual log level such as ``"info"`` into its numeric value."""
    return logging.getLevelNamesMapping().get(str(name).upper(), logging.INFO)
