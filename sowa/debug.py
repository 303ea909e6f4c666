"""Log messages printed in colour and kept for the editor console."""

from __future__ import annotations

import sys
import time
from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Any, Deque, Tuple


class LogSeverity(IntEnum):
    DEFAULT = 0
    LOG = 1
    INFO = 2
    WARN = 3
    ERROR = 4


_SEVERITY_NAMES = {
    LogSeverity.DEFAULT: " [DEFAULT]",
    LogSeverity.LOG: " [LOG]",
    LogSeverity.INFO: " [Info]",
    LogSeverity.WARN: " [WARN]",
    LogSeverity.ERROR: " [ERROR]",
}

_COLOURS = {
    LogSeverity.LOG: "\033[0;32m",
    LogSeverity.INFO: "\033[0;36m",
    LogSeverity.WARN: "\033[0;33m",
    LogSeverity.ERROR: "\033[0;31m",
}

_RESET = "\033[0m"
_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass(frozen=True)
class LogMessage:
    message: str
    severity: LogSeverity


_lines: Deque[LogMessage] = deque()


def severity_to_string(severity: LogSeverity) -> str:
    return _SEVERITY_NAMES.get(severity, "")


def push_line(line: str, severity: LogSeverity) -> None:
    """Print ``line`` in the severity's colour and keep it."""
    sys.stdout.write(_COLOURS.get(severity, "") + line + _RESET + "\n")
    _lines.append(LogMessage(line, severity))


def get_lines() -> Tuple[LogMessage, ...]:
    return tuple(_lines)


def clear_lines() -> None:
    _lines.clear()


def _emit(fmt: str, label: str, severity: LogSeverity, args: Tuple[Any, ...]) -> None:
    stamp = time.strftime(_TIME_FORMAT)
    push_line("[{}]{} {}".format(stamp, label, fmt.format(*args)), severity)


def print_line(fmt: str, *args: Any) -> None:
    _emit(fmt, "", LogSeverity.DEFAULT, args)


def log(fmt: str, *args: Any) -> None:
    _emit(fmt, " [LOG]", LogSeverity.LOG, args)


def info(fmt: str, *args: Any) -> None:
    _emit(fmt, " [INFO]", LogSeverity.INFO, args)


def warn(fmt: str, *args: Any) -> None:
    _emit(fmt, " [WARN]", LogSeverity.WARN, args)


def error(fmt: str, *args: Any) -> None:
    _emit(fmt, " [ERROR]", LogSeverity.ERROR, args)