"""Community score calculator.

The community component rewards a high share of reaction-free reviews,
boosts the result when verified reviewers took part, and subtracts a
fixed penalty for every incident reported within the recency window.
"""
from __future__ import annotations

import datetime
import math
from collections.abc import Iterable, Sequence

from venue_trust.records.incident import Incident
from venue_trust.records.review import Review
from venue_trust.trust.policy import ScoringPolicy

_DEFAULT_POLICY = ScoringPolicy()


def safety_ratio(reviews: Sequence[Review]) -> float:
    """Fraction of *reviews* that report no reaction (0.0 when empty)."""
    if not reviews:
        return 0.0
    return sum(1 for r in reviews if r.is_safe) / len(reviews)


def recent_incident_count(
    incidents: Iterable[Incident],
    now: datetime.datetime,
    window_days: int,
) -> int:
    """Number of *incidents* reported strictly within the window before *now*."""
    return sum(1 for i in incidents if i.is_recent(now, window_days))


def community_score(
    reviews: Iterable[Review],
    incidents: Iterable[Incident],
    now: datetime.datetime,
    policy: ScoringPolicy | None = None,
) -> int:
    """Compute the community component (0 – community_max).

    With no reviews the score is 0 regardless of incidents. Otherwise::

        base    = safety_ratio * community_max * verified_weight
        penalty = recent_incidents * incident_penalty
        score   = clamp(floor(base - penalty), 0, community_max)
    """
    policy = policy if policy is not None else _DEFAULT_POLICY
    items = list(reviews)
    if not items:
        return 0

    weight = (
        policy.verified_reviewer_weight
        if any(r.is_verified_reviewer for r in items)
        else 1.0
    )
    base = safety_ratio(items) * policy.community_max * weight
    penalty = (
        recent_incident_count(incidents, now, policy.recency_window_days)
        * policy.incident_penalty
    )
    # Round away binary float noise (e.g. 20.999999999999996) before flooring.
    raw = math.floor(round(base - penalty, 9))
    return max(0, min(policy.community_max, raw))
