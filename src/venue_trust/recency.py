"""Time helpers shared by the records and the scoring components.

"Recent" means strictly within a fixed number of days before ``now``.
A fixed duration is used instead of calendar-month arithmetic so that the
window is the same length regardless of month lengths or leap years.
All comparisons are made on aware UTC datetimes.
"""
from __future__ import annotations

import datetime

# Six months, expressed as a fixed duration.
RECENCY_WINDOW_DAYS: int = 182

# Three months, used for highlighting and recent-safe-experience counts.
SHORT_WINDOW_DAYS: int = 91


def ensure_utc(value: datetime.datetime) -> datetime.datetime:
    """Return *value* as an aware UTC datetime.

    Naive datetimes are interpreted as UTC so that naive and aware inputs
    can be compared safely.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=datetime.timezone.utc)
    return value.astimezone(datetime.timezone.utc)


def ensure_optional_utc(value: datetime.datetime | None) -> datetime.datetime | None:
    """Like :func:`ensure_utc` but passes ``None`` through."""
    return None if value is None else ensure_utc(value)


def window_start(now: datetime.datetime, days: int) -> datetime.datetime:
    """Return the instant *days* days before *now*."""
    return ensure_utc(now) - datetime.timedelta(days=days)


def is_recent(
    moment: datetime.datetime,
    now: datetime.datetime,
    days: int = RECENCY_WINDOW_DAYS,
) -> bool:
    """Return True if *moment* is strictly after ``now - days``.

    A moment exactly on the window boundary is not recent.
    """
    return ensure_utc(moment) > window_start(now, days)


def days_between(earlier: datetime.datetime, now: datetime.datetime) -> int:
    """Whole days elapsed from *earlier* to *now*, truncated toward zero.

    A moment a full day or more after *now* gives a negative count.
    """
    elapsed = ensure_utc(now) - ensure_utc(earlier)
    return int(elapsed / datetime.timedelta(days=1))
