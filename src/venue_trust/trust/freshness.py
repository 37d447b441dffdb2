"""Freshness score calculator.

Freshness decays in steps with the number of whole days since the venue's
most recent activity: a verification, a review, or a check-in.
"""
from __future__ import annotations

import datetime
from collections.abc import Iterable, Sequence

from venue_trust.recency import days_between, ensure_optional_utc
from venue_trust.records.review import Review, most_recent_review_at
from venue_trust.trust.policy import DEFAULT_FRESHNESS_TIERS, ScoringPolicy


def last_activity(
    last_verified_at: datetime.datetime | None,
    latest_review_at: datetime.datetime | None,
    last_check_in: datetime.datetime | None,
    created_at: datetime.datetime | None = None,
) -> datetime.datetime | None:
    """Return the latest activity timestamp, falling back to *created_at*."""
    signals = [
        ensure_optional_utc(ts)
        for ts in (last_verified_at, latest_review_at, last_check_in)
    ]
    present = [ts for ts in signals if ts is not None]
    if present:
        return max(present)
    return ensure_optional_utc(created_at)


def score_for_days(
    days: int,
    tiers: Sequence[tuple[int, int]] = DEFAULT_FRESHNESS_TIERS,
) -> int:
    """Map whole days since activity to a tier score.

    Negative day counts (activity dated after ``now``) and counts past the
    last tier score 0.
    """
    if days < 0:
        return 0
    for max_days, score in tiers:
        if days <= max_days:
            return score
    return 0


def freshness_score(
    now: datetime.datetime,
    *,
    last_verified_at: datetime.datetime | None = None,
    reviews: Iterable[Review] = (),
    last_check_in: datetime.datetime | None = None,
    created_at: datetime.datetime | None = None,
    policy: ScoringPolicy | None = None,
) -> int:
    """Compute the freshness component as of *now*.

    Returns 0 when there is no activity signal and no creation date.
    """
    tiers = policy.freshness_tiers if policy is not None else DEFAULT_FRESHNESS_TIERS
    latest_review = most_recent_review_at(reviews)
    activity = last_activity(last_verified_at, latest_review, last_check_in, created_at)
    if activity is None:
        return 0
    return score_for_days(days_between(activity, now), tiers)
