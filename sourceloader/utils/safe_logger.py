"""Logger wrapper whose calls can never raise.

Components receive their logger through the constructor. Whatever is passed
in (a ``logging.Logger``, an adapter, a test double) is wrapped so a broken
handler or a logger object missing a method cannot change control flow.
"""

import logging
from typing import Any


class SafeLogger:
    """Forward log calls to a wrapped logger, swallowing any failure."""

    def __init__(self, logger: Any = None):
        if isinstance(logger, SafeLogger):
            logger = logger.wrapped
        self.wrapped = logger if logger is not None else logging.getLogger("sourceloader")

    def debug(self, message: str) -> None:
        self._emit("debug", message)

    def info(self, message: str) -> None:
        self._emit("info", message)

    def warning(self, message: str) -> None:
        self._emit("warning", message)

    def error(self, message: str) -> None:
        self._emit("error", message)

    def _emit(self, level: str, message: str) -> None:
        try:
            getattr(self.wrapped, level)(message)
        except Exception:
            # Logging must never interfere with resolution
            pass

    def __repr__(self) -> str:
        return f"SafeLogger({self.wrapped!r})"
