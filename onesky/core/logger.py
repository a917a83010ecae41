import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Dict, Optional

from .config import Config
from .exceptions import LoggerError

LOGGER_NAME = "onesky"
CONTEXT_FIELDS = ("operation", "project")

class _ContextFilter(logging.Filter):
    """Fill in context fields missing from records emitted by library modules"""

    def filter(self, record: logging.LogRecord) -> bool:
        for name in CONTEXT_FIELDS:
            if not hasattr(record, name):
                setattr(record, name, '-')
        return True

class Logger:
    _loggers: Dict[str, logging.Logger] = {}

    def __init__(self, config: Config):
        """Initialize the onesky logger with configuration"""
        self.config = config

        if LOGGER_NAME in self._loggers:
            self.logger = self._loggers[LOGGER_NAME]
            for handler in self.logger.handlers[:]:
                self.logger.removeHandler(handler)
                handler.close()
        else:
            self.logger = logging.getLogger(LOGGER_NAME)
            self._loggers[LOGGER_NAME] = self.logger

        self.logger.setLevel(self._get_log_level())

        self.formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
            ' - operation:%(operation)s - project:%(project)s'
        )
        self._filter = _ContextFilter()

        log_file = self.config.get("logging.file")
        if log_file:
            self._add_file_handler(Path(log_file))

        if self.config.get("logging.console_output", False):
            console_handler = logging.StreamHandler()
            self._attach(console_handler)

    def _attach(self, handler: logging.Handler) -> None:
        handler.setFormatter(self.formatter)
        handler.addFilter(self._filter)
        self.logger.addHandler(handler)

    def _add_file_handler(self, path: Path) -> None:
        if not path.parent.exists():
            try:
                path.parent.mkdir(parents=True, exist_ok=True)
            except OSError as e:
                raise LoggerError(f"Cannot create log directory: {path.parent}: {e}")

        try:
            handler = RotatingFileHandler(
                str(path),
                maxBytes=self.config.get("logging.max_size", 1024 * 1024),
                backupCount=self.config.get("logging.backup_count", 3)
            )
        except OSError as e:
            raise LoggerError(f"Failed to setup log file: {str(e)}")
        self._attach(handler)

    def _get_log_level(self) -> int:
        """Convert string log level to logging constant"""
        level_name = str(self.config.get("logging.level", "INFO")).upper()
        level = logging.getLevelName(level_name)
        if not isinstance(level, int):
            raise LoggerError(f"Invalid log level: {level_name}")
        return level

    def _prepare_extra(self, extra: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        extra_context = {name: '-' for name in CONTEXT_FIELDS}
        if extra:
            extra_context.update(extra)
        return extra_context

    def debug(self, message: str, **kwargs: Any) -> None:
        """Log debug message"""
        self.logger.debug(message, extra=self._prepare_extra(kwargs.get('extra')))

    def info(self, message: str, **kwargs: Any) -> None:
        """Log info message"""
        self.logger.info(message, extra=self._prepare_extra(kwargs.get('extra')))

    def warning(self, message: str, **kwargs: Any) -> None:
        """Log warning message"""
        self.logger.warning(message, extra=self._prepare_extra(kwargs.get('extra')))

    def error(self, message: str, **kwargs: Any) -> None:
        """Log error message"""
        self.logger.error(message, extra=self._prepare_extra(kwargs.get('extra')))
