import builtins
import logging
import os
import time
from typing import Any

_start_time = time.perf_counter()
_LOG_LEVEL_ENV = "NAMECHAIN_LOG_LEVEL"


def _read_log_level() -> int:
    raw = os.getenv(_LOG_LEVEL_ENV, "1").strip()
    try:
        return max(0, int(raw))
    except ValueError:
        normalized = raw.lower()
        if normalized in {"debug", "trace"}:
            return 3
        if normalized in {"quiet", "silent", "off"}:
            return 0
        return 1


_LOG_LEVEL = _read_log_level()


def _elapsed() -> float:
    return time.perf_counter() - _start_time


def timestamp_prefix() -> str:
    return f"+[{_elapsed():7.2f}]"


def log(*objects: Any, sep: str = " ", end: str = "\n", file=None, flush: bool = False, prefix: bool = True) -> None:
    message = sep.join(str(obj) for obj in objects)
    if prefix:
        message = f"{timestamp_prefix()} {message}"
    builtins.print(message, end=end, file=file, flush=flush)


def verbose_enabled(level: int) -> bool:
    return _LOG_LEVEL >= level


def log_verbose(level: int, *objects: Any, **kwargs: Any) -> None:
    """Emit a log line only when NAMECHAIN_LOG_LEVEL is at least ``level``."""
    if verbose_enabled(level):
        log(*objects, **kwargs)


class _PrefixedHandler(logging.Handler):
    """Routes library ``logging`` records through ``log`` so both share one format."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            log(f"[{record.name}] {record.getMessage()}")
        except Exception:
            self.handleError(record)


def attach_library_logging(name: str = "namechain") -> logging.Logger:
    """
    Forward the library logger to stdout once verbosity reaches debug (3).

    Below that level the logger is left untouched, so library debug records
    stay silent by default.
    """
    logger = logging.getLogger(name)
    if not verbose_enabled(3):
        return logger
    if not any(isinstance(handler, _PrefixedHandler) for handler in logger.handlers):
        logger.addHandler(_PrefixedHandler())
    logger.setLevel(logging.DEBUG)
    return logger
