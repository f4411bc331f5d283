"""Utility helpers for rendering training durations in the UI."""
from __future__ import annotations

from datetime import timedelta
from typing import Any, Optional


def _coerce_timedelta(value: Any) -> Optional[timedelta]:
    """Best-effort conversion to a ``timedelta`` (numbers are seconds)."""

    if value is None:
        return None
    if isinstance(value, timedelta):
        return value
    if isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        return timedelta(seconds=value)
    return None


def format_training_time(value: Any, *, done: str = "Done", default: str = "—") -> str:
    """Return a compact ``2d 3h 05m`` label for a remaining training time.

    Zero or negative durations render as ``done``. Seconds are rounded up to
    the next minute so an unfinished skill never reads as ``0m``.
    """

    td = _coerce_timedelta(value)
    if td is None:
        return default
    total_seconds = td.total_seconds()
    if total_seconds <= 0:
        return done

    minutes = int(-(-total_seconds // 60))
    hours, minutes = divmod(minutes, 60)
    days, hours = divmod(hours, 24)

    parts: list[str] = []
    if days:
        parts.append(f"{days}d")
    if hours:
        parts.append(f"{hours}h")
    if days or hours:
        parts.append(f"{minutes:02d}m")
    else:
        parts.append(f"{minutes}m")
    return " ".join(parts)


__all__ = [
    "format_training_time",
]
