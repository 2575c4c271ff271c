"""Engine and client loggers, plus plain console log helpers."""

from __future__ import annotations

import logging
import sys

TRACE = 5
logging.addLevelName(TRACE, "TRACE")

CORE_LOGGER_NAME = "ViSolEngine"
CLIENT_LOGGER_NAME = "Client"

_PATTERN = "[%(asctime)s] [%(funcName)s:%(lineno)d] [%(name)s] [Thread:%(thread)d] %(message)s"
_DATE_FORMAT = "%H:%M:%S"

_RESET = "\033[0m"
_COLORS = {
    TRACE: "\033[37m",
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m\033[1m",
    logging.ERROR: "\033[31m\033[1m",
    logging.CRITICAL: "\033[1m\033[41m",
}


class _ColorStdoutHandler(logging.Handler):
    """Writes to the current sys.stdout, coloured when it is a terminal."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            line = self.format(record)
            stream = sys.stdout
            isatty = getattr(stream, "isatty", None)
            if isatty is not None and isatty():
                color = _COLORS.get(record.levelno, "")
                line = f"{color}{line}{_RESET}"
            stream.write(line + "\n")
            stream.flush()
        except Exception:
            self.handleError(record)


def _configure(name: str) -> logging.Logger:
    logger = logging.getLogger(name)
    for handler in [h for h in logger.handlers if isinstance(h, _ColorStdoutHandler)]:
        logger.removeHandler(handler)
    handler = _ColorStdoutHandler()
    handler.setFormatter(logging.Formatter(_PATTERN, datefmt=_DATE_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(TRACE)
    logger.propagate = False
    return logger


def init_loggers() -> None:
    """Set up the engine and client loggers to write every level to stdout."""
    _configure(CORE_LOGGER_NAME)
    _configure(CLIENT_LOGGER_NAME)


def core_logger() -> logging.Logger:
    """Return the engine logger."""
    return logging.getLogger(CORE_LOGGER_NAME)


def client_logger() -> logging.Logger:
    """Return the client application logger."""
    return logging.getLogger(CLIENT_LOGGER_NAME)


def log_info(msg: str) -> None:
    """Print an informational line to stdout."""
    print(f"[INFO] {msg}", file=sys.stdout, flush=True)


def log_error(msg: str) -> None:
    """Print an error line to stderr."""
    print(f"[ERROR] {msg}", file=sys.stderr, flush=True)