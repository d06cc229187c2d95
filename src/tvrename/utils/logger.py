"""
Provides structured logging with log levels.

Every line carries a UTC timestamp, the level, a dotted event name and
key-value pairs, which keeps the output easy to grep and to parse later.
Lines go through `tqdm.write` so they never tear an active progress bar.
"""
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict

from tqdm import tqdm

_separator = " | "


class LogLevel(Enum):
    """Log level enumeration."""
    TRACE = 0
    DEBUG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


_current_level = LogLevel.INFO
_log_file = None


def set_log_level(level: LogLevel) -> None:
    """Set the current log level."""
    global _current_level
    _current_level = level


def get_log_level() -> LogLevel:
    """Get the current log level."""
    return _current_level


def set_log_file(handle) -> None:
    """Mirror every log line into an already opened text handle (or stop with None)."""
    global _log_file
    _log_file = handle


def _format_kv(data: Dict[str, Any]) -> str:
    """Format key-value pairs for logging."""
    parts = []
    for key, value in data.items():
        if isinstance(value, str):
            # Escape quotes and newlines to keep log entries single-line.
            escaped = value.replace("\r", "\\r").replace("\n", "\\n")
            escaped = escaped.replace('"', '\\"')
            parts.append(f'{key}="{escaped}"')
        elif value is None:
            parts.append(f'{key}=null')
        elif isinstance(value, bool):
            parts.append(f'{key}={str(value).lower()}')
        else:
            parts.append(f'{key}={value}')
    return _separator.join(parts)


def _write_line(text: str) -> None:
    tqdm.write(text)
    if _log_file is not None:
        _log_file.write(text + "\n")
        _log_file.flush()


def _should_log(level: LogLevel) -> bool:
    """Check if a message at the given level should be logged."""
    return level.value >= _current_level.value


def log(event: str, level: LogLevel = LogLevel.INFO, **kwargs) -> None:
    """
    Structured logging function.

    Args:
        event: Event name (e.g., 'match.exact', 'rename.apply')
        level: Log level (TRACE, DEBUG, INFO, WARN, ERROR)
        **kwargs: Key-value pairs to log
    """
    if not _should_log(level):
        return

    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    header = f"{timestamp}{_separator}[{level.name}]{_separator}{event}"
    if kwargs:
        _write_line(f"{header}{_separator}{_format_kv(kwargs)}")
    else:
        _write_line(header)


def safe_print(*args, sep: str = " ") -> None:
    """
    Plain report output that plays nicely with progress bars.
    Use log() for structured logging instead.
    """
    _write_line(sep.join(str(a) for a in args))
