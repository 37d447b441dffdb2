"""Ingestion-time validation helpers shared by the record types.

Scoring functions assume well-formed records. All range checks and
timestamp normalization happen here, when records are constructed.
"""
from __future__ import annotations

import datetime

from venue_trust.recency import ensure_utc

MIN_RATING: int = 1
MAX_RATING: int = 5


class RecordValidationError(ValueError):
    """Raised when an ingested record violates its field contract."""

    def __init__(self, record_type: str, field_name: str, reason: str) -> None:
        self.record_type = record_type
        self.field_name = field_name
        super().__init__(f"Invalid {record_type}.{field_name}: {reason}")


def check_rating(record_type: str, field_name: str, value: int) -> int:
    """Return *value* if it is an integer star rating in [1, 5].

    Raises
    ------
    RecordValidationError
        If the value is not an int (bools are rejected) or is out of range.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise RecordValidationError(
            record_type, field_name, f"expected an integer, got {value!r}"
        )
    if not MIN_RATING <= value <= MAX_RATING:
        raise RecordValidationError(
            record_type,
            field_name,
            f"must be between {MIN_RATING} and {MAX_RATING}, got {value}",
        )
    return value


def check_timestamp(
    record_type: str, field_name: str, value: object
) -> datetime.datetime:
    """Validate that *value* is a datetime and normalize it to UTC."""
    if not isinstance(value, datetime.datetime):
        raise RecordValidationError(
            record_type, field_name, f"expected a datetime, got {value!r}"
        )
    return ensure_utc(value)


def check_optional_timestamp(
    record_type: str, field_name: str, value: object
) -> datetime.datetime | None:
    """Like :func:`check_timestamp` but passes ``None`` through."""
    if value is None:
        return None
    return check_timestamp(record_type, field_name, value)
