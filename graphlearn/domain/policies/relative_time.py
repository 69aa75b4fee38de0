# graphlearn/domain/policies/relative_time.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Union

HOUR_SEC = 3600
DAY_HOURS = 24
WEEK_HOURS = 7 * DAY_HOURS


def _as_utc(value: Union[datetime, str]) -> datetime:
    if isinstance(value, str):
        value = datetime.fromisoformat(value.strip().replace("Z", "+00:00"))
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def _uk_days(days: int) -> str:
    if days == 1:
        return "день"
    if days < 5:
        return "дні"
    return "днів"


def format_relative(
    timestamp: Union[datetime, str],
    now: Union[datetime, str],
    *,
    locale: str = "en",
    date_format: str = "%d.%m.%Y",
) -> str:
    """
    Human wording for how long ago `timestamp` was, relative to `now`:

      < 1h      -> "just now"
      1..23h    -> "N hours ago"
      24..167h  -> "N days ago"
      >= 168h   -> absolute date (date_format)

    `now` is always passed in so the result is deterministic.
    Naive datetimes are read as UTC; timestamps in the future count as "just now".
    """
    ts = _as_utc(timestamp)
    ref = _as_utc(now)
    hours = int((ref - ts).total_seconds() // HOUR_SEC)

    if hours < 1:
        return "щойно" if locale == "uk" else "just now"
    if hours < DAY_HOURS:
        if locale == "uk":
            return f"{hours} год тому"
        return f"{hours} hour ago" if hours == 1 else f"{hours} hours ago"
    if hours < WEEK_HOURS:
        days = hours // DAY_HOURS
        if locale == "uk":
            return f"{days} {_uk_days(days)} тому"
        return f"{days} day ago" if days == 1 else f"{days} days ago"
    return ts.strftime(date_format)
