"""In-memory log buffer backing the admin log view."""
import logging
import threading
from collections import deque
from typing import Deque, Optional, Tuple

LOG_BUFFER_MAX_LINES = 1000
_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


class InMemoryLogHandler(logging.Handler):
    """Thread-safe handler keeping the last ``max_lines`` formatted records."""

    def __init__(self, max_lines: int = LOG_BUFFER_MAX_LINES):
        super().__init__()
        self._lines: Deque[Tuple[int, str]] = deque(maxlen=max_lines)
        self._buffer_lock = threading.Lock()
        self.setFormatter(logging.Formatter(_FORMAT))

    def emit(self, record: logging.LogRecord) -> None:
        try:
            msg = self.format(record)
            with self._buffer_lock:
                self._lines.append((record.levelno, msg))
        except Exception:
            self.handleError(record)

    def lines(self, min_level: int = logging.NOTSET, limit: Optional[int] = None) -> list[str]:
        """Copy of buffered lines at or above ``min_level``, newest last."""
        with self._buffer_lock:
            selected = [msg for levelno, msg in self._lines if levelno >= min_level]
        if limit is not None:
            selected = selected[-limit:] if limit > 0 else []
        return selected

    def clear(self) -> None:
        with self._buffer_lock:
            self._lines.clear()


_handler: Optional[InMemoryLogHandler] = None
_install_lock = threading.Lock()


def install_log_buffer_handler(max_lines: int = LOG_BUFFER_MAX_LINES) -> InMemoryLogHandler:
    """Attach the buffer handler to the root logger once and return it."""
    global _handler
    with _install_lock:
        if _handler is None:
            _handler = InMemoryLogHandler(max_lines=max_lines)
            _handler.setLevel(logging.DEBUG)
            logging.getLogger().addHandler(_handler)
        return _handler


def get_log_lines(level: Optional[str] = None, limit: Optional[int] = None) -> list[str]:
    """Buffered lines, optionally filtered by minimum level name (e.g. ``WARNING``).

    Raises:
        ValueError: Unknown level name.
    """
    if _handler is None:
        return []
    min_level = logging.NOTSET
    if level:
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        min_level = resolved
    return _handler.lines(min_level=min_level, limit=limit)
