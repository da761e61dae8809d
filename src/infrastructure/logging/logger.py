"""Logging helpers for the statement service.

Loggers write to ``logs/<subdir>/<YYYYMMDD>_<prefix>.log`` under the project
root and optionally mirror records to the console.
"""

from datetime import datetime
import logging
from pathlib import Path
from typing import Callable

from src.utils.utils import get_project_root


DEFAULT_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"


class LoggerBuilder:
    """Fluent builder for file (and console) backed loggers."""

    def __init__(self) -> None:
        self._name = "app"
        self._subdir = "app"
        self._prefix = "app_logs"
        self._console = False
        self._level = logging.INFO
        self._formatter_factory: Callable[[], logging.Formatter] = (
            self._default_formatter
        )
        self._file_handler_factory: Callable[
            [Path, logging.Formatter], logging.Handler
        ] = self._default_file_handler
        self._console_handler_factory: Callable[
            [logging.Formatter], logging.Handler
        ] = self._default_console_handler

    def name(self, name: str) -> "LoggerBuilder":
        self._name = name
        return self

    def subdir(self, subdir: str) -> "LoggerBuilder":
        self._subdir = subdir
        return self

    def prefix(self, prefix: str) -> "LoggerBuilder":
        self._prefix = prefix
        return self

    def console(self, enabled: bool) -> "LoggerBuilder":
        self._console = enabled
        return self

    def level(self, level: int) -> "LoggerBuilder":
        self._level = level
        return self

    def formatter(
        self,
        factory: Callable[[], logging.Formatter],
    ) -> "LoggerBuilder":
        self._formatter_factory = factory
        return self

    def file_handler(
        self,
        factory: Callable[[Path, logging.Formatter], logging.Handler],
    ) -> "LoggerBuilder":
        self._file_handler_factory = factory
        return self

    def console_handler(
        self,
        factory: Callable[[logging.Formatter], logging.Handler],
    ) -> "LoggerBuilder":
        self._console_handler_factory = factory
        return self

    def build(self) -> logging.Logger:
        """Create the configured logger, or return it if already built.

        Returns:
            logging.Logger: Logger with file and optional console handlers.
        """
        logger = logging.getLogger(self._name)
        if logger.handlers:
            return logger

        log_dir = get_project_root() / "logs" / self._subdir
        log_dir.mkdir(parents=True, exist_ok=True)
        log_path = log_dir / f"{self._today_stamp()}_{self._prefix}.log"

        fmt = self._formatter_factory()
        logger.setLevel(self._level)
        logger.addHandler(self._file_handler_factory(log_path, fmt))
        if self._console:
            logger.addHandler(self._console_handler_factory(fmt))
        logger.propagate = False
        return logger

    @staticmethod
    def _today_stamp() -> str:
        return datetime.now().strftime("%Y%m%d")

    @staticmethod
    def _default_formatter() -> logging.Formatter:
        return logging.Formatter(DEFAULT_FORMAT)

    @staticmethod
    def _default_file_handler(
        path: Path,
        fmt: logging.Formatter,
    ) -> logging.Handler:
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler

    @staticmethod
    def _default_console_handler(fmt: logging.Formatter) -> logging.Handler:
        handler = logging.StreamHandler()
        handler.setLevel(logging.INFO)
        handler.setFormatter(fmt)
        return handler


class Logger:
    """Singleton wrapper around a built logging.Logger."""

    _instance = None

    def __new__(cls, name: str = "app"):
        if cls._instance is None:
            instance = super().__new__(cls)
            instance._initialized = False
            cls._instance = instance
        return cls._instance

    def __init__(self, name: str = "app") -> None:
        if self._initialized:
            return
        self.logger = self._configure(LoggerBuilder().name(name)).build()
        self._initialized = True

    def _configure(self, builder: LoggerBuilder) -> LoggerBuilder:
        return builder

    def info(self, msg: str) -> None:
        self.logger.info(msg)

    def warning(self, msg: str) -> None:
        self.logger.warning(msg)

    def error(self, msg: str) -> None:
        self.logger.error(msg)

    def debug(self, msg: str) -> None:
        self.logger.debug(msg)

    def critical(self, msg: str) -> None:
        self.logger.critical(msg)


class AppLogger(Logger):
    """Application logger (file + console)."""

    _instance = None

    def _configure(self, builder: LoggerBuilder) -> LoggerBuilder:
        return builder.subdir("app").prefix("app_logs").console(True)


class UsageLogger(Logger):
    """Usage logger for interface interactions (file only)."""

    _instance = None

    def _configure(self, builder: LoggerBuilder) -> LoggerBuilder:
        return builder.subdir("usage").prefix("usage_logs").console(False)


def get_app_logger() -> AppLogger:
    """Return the shared application logger."""
    return AppLogger("app")


def get_usage_logger() -> UsageLogger:
    """Return the shared usage logger."""
    return UsageLogger("usage")


__all__ = [
    "LoggerBuilder",
    "Logger",
    "AppLogger",
    "UsageLogger",
    "get_app_logger",
    "get_usage_logger",
]
