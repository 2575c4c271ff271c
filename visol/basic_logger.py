"""A synchronous logger writing to a file and, coloured, to the console."""

from __future__ import annotations

import sys
import threading
import time
from enum import IntEnum
from types import FrameType
from typing import Optional, TextIO

RESET_COLOR = "\033[0m"
INFO_COLOR = "\033[32m"
WARNING_COLOR = "\033[33m"
ERROR_COLOR = "\033[31m"
CRITICAL_COLOR = "\033[41m\033[37m"


class LogLevel(IntEnum):
    """Severity of a log message, lowest first."""

    INFO = 0
    WARNING = 1
    ERROR = 2
    CRITICAL = 3


_COLORS = {
    LogLevel.INFO: INFO_COLOR,
    LogLevel.WARNING: WARNING_COLOR,
    LogLevel.ERROR: ERROR_COLOR,
    LogLevel.CRITICAL: CRITICAL_COLOR,
}


def _call_site(frame: Optional[FrameType]) -> tuple[str, str, int]:
    if frame is None:
        return "<unknown>", "<unknown>", 0
    return frame.f_code.co_filename, frame.f_code.co_name, frame.f_lineno


class BasicLogger:
    """Writes each message straight to its log file and optionally the console.

    Where ``file``, ``func`` or ``line`` are not given, the caller's location
    is used.
    """

    def __init__(
        self,
        file_name: str = "app_log.log",
        show_console: bool = True,
        min_level: LogLevel = LogLevel.INFO,
    ) -> None:
        self.console_output = show_console
        self.min_level = min_level
        self._lock = threading.Lock()
        self._file: Optional[TextIO] = None
        self._file_name = file_name
        with self._lock:
            self._open(file_name)

    def _open(self, file_name: str) -> None:
        try:
            self._file = open(file_name, "a", encoding="utf-8")
        except OSError:
            self._file = None
            print(f"Failed to open log file: {file_name}", file=sys.stderr, flush=True)

    def _close_file(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    @property
    def file_name(self) -> str:
        """Path of the log file; assigning reopens the logger on the new path."""
        return self._file_name

    @file_name.setter
    def file_name(self, file_name: str) -> None:
        with self._lock:
            self._close_file()
            self._file_name = file_name
            self._open(file_name)

    def log(
        self,
        level: LogLevel,
        message: str,
        file: Optional[str] = None,
        func: Optional[str] = None,
        line: Optional[int] = None,
    ) -> None:
        """Write ``message`` if ``level`` is at least the minimum level."""
        if file is None or func is None or line is None:
            site = _call_site(sys._getframe(1))
            file, func, line = self._fill(site, file, func, line)
        self._write(LogLevel(level), message, file, func, line)

    @staticmethod
    def _fill(
        site: tuple[str, str, int],
        file: Optional[str],
        func: Optional[str],
        line: Optional[int],
    ) -> tuple[str, str, int]:
        return (
            site[0] if file is None else file,
            site[1] if func is None else func,
            site[2] if line is None else line,
        )

    def _write(self, level: LogLevel, message: str, file: str, func: str, line: int) -> None:
        if level < self.min_level:
            return
        with self._lock:
            timestamp = time.strftime("%Y-%m-%d %H:%M:%S", time.localtime())
            full = f"[{timestamp}] [{file}:{line} [{func}]] [{level.name}] {message}"
            if self._file is not None:
                self._file.write(full + "\n")
                self._file.flush()
            if self.console_output:
                stream = sys.stderr if level >= LogLevel.ERROR else sys.stdout
                stream.write(f"{_COLORS[level]}{full}{RESET_COLOR}\n")
                stream.flush()

    def _level_call(
        self,
        level: LogLevel,
        message: str,
        file: Optional[str],
        func: Optional[str],
        line: Optional[int],
    ) -> None:
        if file is None or func is None or line is None:
            site = _call_site(sys._getframe(2))
            file, func, line = self._fill(site, file, func, line)
        self._write(level, message, file, func, line)

    def info(self, message: str, file=None, func=None, line=None) -> None:
        """Log at INFO level."""
        self._level_call(LogLevel.INFO, message, file, func, line)

    def warning(self, message: str, file=None, func=None, line=None) -> None:
        """Log at WARNING level."""
        self._level_call(LogLevel.WARNING, message, file, func, line)

    def error(self, message: str, file=None, func=None, line=None) -> None:
        """Log at ERROR level."""
        self._level_call(LogLevel.ERROR, message, file, func, line)

    def critical(self, message: str, file=None, func=None, line=None) -> None:
        """Log at CRITICAL level."""
        self._level_call(LogLevel.CRITICAL, message, file, func, line)

    def flush(self) -> None:
        """Flush the log file."""
        with self._lock:
            if self._file is not None:
                self._file.flush()

    def close(self) -> None:
        """Close the log file; later messages go to the console only."""
        with self._lock:
            self._close_file()

    def __enter__(self) -> "BasicLogger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()