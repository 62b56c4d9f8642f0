"""
HueForge Structured Logging
Loguru sink setup plus a thin wrapper that attaches request context as extras.
"""
import sys
from typing import Any, Dict, Optional, TextIO

from loguru import logger

from hueforge.config import config

LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level} | {message} | {extra}"


class StructuredLogger:
    """Structured logger for palette and theme requests."""

    def __init__(self, level: Optional[str] = None, serialize: Optional[bool] = None,
                 sink: TextIO = sys.stdout):
        self.level = level or config.LOG_LEVEL
        self.serialize = config.LOG_JSON if serialize is None else serialize
        self._sink_id = self._configure_logger(sink)

    def _configure_logger(self, sink: TextIO) -> int:
        # Replace loguru's default stderr handler with a single structured sink
        logger.remove()
        return logger.add(sink, format=LOG_FORMAT, level=self.level, serialize=self.serialize)

    def _log(self, level: str, message: str, extra: Optional[Dict[str, Any]]):
        target = logger.bind(**extra) if extra else logger
        # depth=2 reports the caller of info()/warning()/... rather than this wrapper
        target.opt(depth=2).log(level, message)

    def info(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log("INFO", message, extra)

    def warning(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log("WARNING", message, extra)

    def error(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log("ERROR", message, extra)

    def debug(self, message: str, extra: Optional[Dict[str, Any]] = None):
        self._log("DEBUG", message, extra)


# Global logger instance
_logger: Optional[StructuredLogger] = None


def get_logger() -> StructuredLogger:
    """Get or create global logger instance."""
    global _logger
    if _logger is None:
        _logger = StructuredLogger()
    return _logger
