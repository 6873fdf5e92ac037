"""
Logging utilities with thread-safe considerations.
"""
import logging
import threading
from typing import Callable, Optional

from x32_remote.config.settings import LOG_LEVEL, LOG_FORMAT, LOG_FILE


class ThreadSafeLogger:
    """
    Thread-safe logger wrapper shared by sessions and services.
    """

    def __init__(self, name: str, level: str = LOG_LEVEL):
        self._logger = logging.getLogger(name)
        self._logger.setLevel(getattr(logging, level.upper(), logging.INFO))
        self._lock = threading.RLock()
        self._sink: Optional[Callable[[str], None]] = None

        # Avoid duplicate handlers
        if not self._logger.handlers:
            formatter = logging.Formatter(LOG_FORMAT)

            console_handler = logging.StreamHandler()
            console_handler.setFormatter(formatter)
            self._logger.addHandler(console_handler)

            if LOG_FILE:
                file_handler = logging.FileHandler(LOG_FILE, mode="a", encoding="utf-8")
                file_handler.setFormatter(formatter)
                self._logger.addHandler(file_handler)

    @property
    def name(self) -> str:
        return self._logger.name

    def info(self, message: str) -> None:
        with self._lock:
            self._logger.info(message)
            self._send_to_sink(message)

    def error(self, message: str) -> None:
        with self._lock:
            self._logger.error(message)
            self._send_to_sink(message)

    def warning(self, message: str) -> None:
        with self._lock:
            self._logger.warning(message)
            self._send_to_sink(message)

    def debug(self, message: str) -> None:
        with self._lock:
            self._logger.debug(message)
            if self._logger.isEnabledFor(logging.DEBUG):
                self._send_to_sink(message)

    def exception(self, message: str) -> None:
        with self._lock:
            self._logger.exception(message)
            self._send_to_sink(message)

    def set_sink(self, callback: Optional[Callable[[str], None]]) -> None:
        """Forward every logged message to ``callback`` as well."""
        with self._lock:
            self._sink = callback

    def _send_to_sink(self, message: str) -> None:
        if self._sink:
            self._sink(message)


def get_logger(name: str, level: str = LOG_LEVEL) -> ThreadSafeLogger:
    """Get a thread-safe logger instance."""
    return ThreadSafeLogger(name, level)
