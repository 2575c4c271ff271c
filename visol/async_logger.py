"""A logger that formats on the caller's thread and writes files on a worker."""

from __future__ import annotations

import argparse
import os
import queue
import sys
import threading
import time
from types import FrameType
from typing import Callable, Optional, TextIO

from visol.basic_logger import RESET_COLOR, LogLevel, _COLORS

BUFFER_SIZE = 4096
"""Buffered characters that trigger a write to the log file."""
DEFAULT_MAX_FILE_SIZE = 1024 * 1024
"""Log file size, in characters, at which the file is rotated."""

Formatter = Callable[[LogLevel, str, str, str, int], str]

_STOP = object()


def _timestamp() -> str:
    return time.strftime("%Y-%m-%d_%H-%M-%S", time.localtime())


def _site(frame: Optional[FrameType]) -> tuple[str, str, int]:
    if frame is None:
        return "<unknown>", "<unknown>", 0
    return frame.f_code.co_filename, frame.f_code.co_name, frame.f_lineno


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


class AsyncLogger:
    """Queues formatted messages for a background thread that writes them.

    The worker batches writes in a buffer, writes at once for CRITICAL
    messages, and renames the file to ``<name>.<timestamp>.bak`` when it
    would grow past ``max_file_size``. Where ``file``, ``func`` or ``line``
    are not given, the caller's location is used.
    """

    def __init__(
        self,
        file_name: str = "app_log.log",
        show_console: bool = True,
        min_level: LogLevel = LogLevel.INFO,
    ) -> None:
        self.console_output = show_console
        self.min_level = LogLevel(min_level)
        self._file_name = file_name
        self._file: Optional[TextIO] = None
        self._buffer = ""
        self._max_file_size = DEFAULT_MAX_FILE_SIZE
        self._formatter: Formatter = self.default_format
        self._lock = threading.Lock()
        self._queue: "queue.Queue[object]" = queue.Queue()
        self._closed = False
        self._open(file_name, "Failed to open log file")
        self._thread = threading.Thread(target=self._worker, daemon=True)
        self._thread.start()

    # Configuration

    @property
    def file_name(self) -> str:
        """Path of the log file; assigning reopens the logger on the new path."""
        return self._file_name

    @file_name.setter
    def file_name(self, file_name: str) -> None:
        with self._lock:
            self._close_file()
            self._file_name = file_name
            self._open(file_name, "Failed to open log file")

    @property
    def max_file_size(self) -> int:
        """Size at which the log file is rotated."""
        return self._max_file_size

    @max_file_size.setter
    def max_file_size(self, size: int) -> None:
        with self._lock:
            self._max_file_size = int(size)

    @property
    def formatter(self) -> Formatter:
        """Callable turning (level, message, file, func, line) into a line."""
        return self._formatter

    @formatter.setter
    def formatter(self, formatter: Formatter) -> None:
        with self._lock:
            self._formatter = formatter

    # Formatting

    def default_format(
        self, level: LogLevel, message: str, file: str, func: str, line: int
    ) -> str:
        """Return ``[time] [file:line [func]] [LEVEL] message``."""
        return f"[{_timestamp()}] [{file}:{line} [{func}]] [{LogLevel(level).name}] {message}"

    # Logging

    def log(
        self,
        level: LogLevel,
        message: str,
        file: Optional[str] = None,
        func: Optional[str] = None,
        line: Optional[int] = None,
    ) -> None:
        """Queue ``message`` if ``level`` is at least the minimum level."""
        if file is None or func is None or line is None:
            file, func, line = _fill(_site(sys._getframe(1)), file, func, line)
        self._submit(LogLevel(level), message, file, func, line)

    def _submit(self, level: LogLevel, message: str, file: str, func: str, line: int) -> None:
        if level < self.min_level:
            return
        full = self._formatter(level, message, file, func, line)
        if not self._closed:
            self._queue.put(full)
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
            file, func, line = _fill(_site(sys._getframe(2)), file, func, line)
        self._submit(level, message, file, func, line)

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
        """Wait for queued messages, then write the buffer to the file."""
        if not self._closed:
            self._queue.join()
        with self._lock:
            self._write_buffer()

    def close(self) -> None:
        """Stop the worker, write what remains and close the file."""
        if self._closed:
            return
        self._closed = True
        self._queue.put(_STOP)
        self._thread.join()
        with self._lock:
            self._write_buffer()
            self._close_file()

    def __enter__(self) -> "AsyncLogger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # File handling, called with the lock held

    def _open(self, file_name: str, failure: str) -> None:
        try:
            self._file = open(file_name, "a", encoding="utf-8")
        except OSError:
            self._file = None
            print(f"{failure}: {file_name}", file=sys.stderr, flush=True)

    def _close_file(self) -> None:
        if self._file is not None:
            self._file.close()
            self._file = None

    def _write_buffer(self) -> None:
        if self._file is not None and self._buffer:
            self._file.write(self._buffer)
            self._file.flush()
            self._buffer = ""

    def _rotate(self) -> None:
        if self._file is None:
            return
        self._file.close()
        self._file = None
        try:
            os.replace(self._file_name, f"{self._file_name}.{_timestamp()}.bak")
        except OSError:
            pass
        self._open(self._file_name, "Failed to reopen log file after rotation")

    def _consume(self, message: str) -> None:
        with self._lock:
            if self._file is None:
                return
            size = self._file.tell() + len(self._buffer) + len(message)
            if size >= self._max_file_size:
                if self._buffer:
                    self._file.write(self._buffer)
                    self._buffer = ""
                self._rotate()
                if self._file is None:
                    return
            self._buffer += message + "\n"
            if len(self._buffer) >= BUFFER_SIZE or "[CRITICAL]" in message:
                self._write_buffer()

    def _worker(self) -> None:
        while True:
            item = self._queue.get()
            try:
                if item is _STOP:
                    break
                self._consume(item)  # type: ignore[arg-type]
            finally:
                self._queue.task_done()
        with self._lock:
            self._write_buffer()


def log_if_level(logger: AsyncLogger, level: LogLevel, message: str) -> None:
    """Log ``message`` at ``level`` with the caller's location, if enabled."""
    if LogLevel(level) >= logger.min_level:
        file, func, line = _site(sys._getframe(1))
        logger.log(level, message, file, func, line)


_EXAMPLE_NAMES = {
    LogLevel.INFO: "INFO",
    LogLevel.WARNING: "WARNING",
    LogLevel.ERROR: "ERROR",
}


def _example_format(level: LogLevel, message: str, file: str, func: str, line: int) -> str:
    name = _EXAMPLE_NAMES.get(LogLevel(level), "UNKNOWN")
    return f"[{name}] {file}:{func}:{line} - {message}"


def _check_pointer(value: Optional[int], file_name: str) -> None:
    if value is None:
        with AsyncLogger(file_name) as logger:
            logger.warning("Null pointer detected")
            logger.flush()
        raise RuntimeError("Null pointer access attempted")


def main(argv: Optional[list[str]] = None) -> int:
    """Exercise formatting, rotation, filtering and error logging."""
    parser = argparse.ArgumentParser(description="Asynchronous logger demonstration.")
    parser.add_argument("log_file", nargs="?", default="app_log.log")
    args = parser.parse_args(argv)

    with AsyncLogger(args.log_file, True, LogLevel.INFO) as logger:
        logger.formatter = _example_format
        logger.info("Application started with custom formatter")

        logger.max_file_size = 1024
        for i in range(5):
            logger.info(f"Log entry {i}")

        logger.min_level = LogLevel.WARNING
        log_if_level(logger, LogLevel.INFO, "This won't be logged due to compile-time check")
        log_if_level(logger, LogLevel.WARNING, "This will be logged")

        try:
            divisor = 0
            if divisor == 0:
                logger.warning("Potential division by zero detected")
                raise RuntimeError("Division by zero attempted")
        except RuntimeError as exc:
            logger.error(str(exc))

        try:
            _check_pointer(None, args.log_file)
        except RuntimeError as exc:
            logger.critical(str(exc))

        logger.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())