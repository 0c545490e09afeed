"""Clocks for benchmarking: CPU usage, a steady wall clock and RFC 3339 stamps."""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone

__all__ = [
    "TimerError",
    "process_cpu_usage",
    "thread_cpu_usage",
    "chrono_clock_now",
    "local_date_time_string",
    "format_rfc3339",
]

_UNKNOWN_OFFSET = "-00:00"


class TimerError(RuntimeError):
    """Raised when the operating system cannot report a requested time."""


def process_cpu_usage() -> float:
    """Return the CPU time (user + system) used by this process, in seconds."""
    try:
        return time.process_time()
    except OSError as exc:
        raise TimerError("process_time() failed") from exc


def thread_cpu_usage() -> float:
    """Return the CPU time (user + system) used by the calling thread, in seconds."""
    try:
        return time.thread_time()
    except OSError as exc:
        raise TimerError("thread_time() failed") from exc


def chrono_clock_now() -> float:
    """Return a reading of the steady high-resolution clock, in seconds."""
    return time.perf_counter()


def _format_offset(offset: timedelta) -> str | None:
    """Render a whole-minute offset as +HH:MM or -HH:MM; None if not representable."""
    total_seconds = int(offset.total_seconds())
    if total_seconds % 60 or offset.microseconds:
        return None
    sign = "-" if total_seconds < 0 else "+"
    hours, minutes = divmod(abs(total_seconds) // 60, 60)
    if hours > 99:
        return None
    return f"{sign}{hours:02d}:{minutes:02d}"


def _format_stamp(moment: datetime) -> str:
    return (
        f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"
        f"T{moment.hour:02d}:{moment.minute:02d}:{moment.second:02d}"
    )


def format_rfc3339(moment: datetime) -> str:
    """Format *moment* as yyyy-mm-ddTHH:MM:SS+HH:MM, dropping fractions of a second.

    A naive datetime is taken to be UTC. When the offset is unknown or cannot be
    written in whole minutes, the time is given in UTC with the offset -00:00.
    """
    offset = moment.utcoffset()
    if offset is not None:
        rendered = _format_offset(offset)
        if rendered is not None:
            return _format_stamp(moment) + rendered
        moment = moment.astimezone(timezone.utc)
    return _format_stamp(moment) + _UNKNOWN_OFFSET


def local_date_time_string() -> str:
    """Return the current local time in RFC 3339 form."""
    now = datetime.now().astimezone().replace(microsecond=0)
    return format_rfc3339(now)