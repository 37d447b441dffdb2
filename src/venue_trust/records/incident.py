"""Incident reports, per-incident impact scoring, and incident summaries.

An incident is a reported cross-contamination or safety event at a venue.
Impact scores rank incidents for display; they are not added into the
trust total.
"""
from __future__ import annotations

import datetime
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum

from venue_trust.recency import RECENCY_WINDOW_DAYS, is_recent
from venue_trust.records.validation import RecordValidationError, check_timestamp


class Severity(str, Enum):
    """Reported severity of a reaction."""

    MILD = "mild"
    MODERATE = "moderate"
    SEVERE = "severe"

    @property
    def rank(self) -> int:
        """Ordinal rank used for average severity (mild=1 … severe=3)."""
        return SEVERITY_RANKS[self]


class IncidentStatus(str, Enum):
    """Follow-up state of an incident."""

    OPEN = "open"
    RESPONDED = "responded"
    RESOLVED = "resolved"


SEVERITY_RANKS: dict[Severity, int] = {
    Severity.MILD: 1,
    Severity.MODERATE: 2,
    Severity.SEVERE: 3,
}

# Impact contribution of each severity.
SEVERITY_IMPACT: dict[Severity, int] = {
    Severity.MILD: 1,
    Severity.MODERATE: 3,
    Severity.SEVERE: 5,
}

RECENCY_BONUS: int = 2
MODERATION_BONUS: int = 1
UNRESOLVED_BONUS: int = 1


@dataclass(frozen=True)
class Incident:
    """A single reported incident.

    Parameters
    ----------
    severity:
        Severity of the reported reaction.
    reported_at:
        UTC datetime when the incident was reported.
    is_resolved:
        Whether the incident has been resolved.
    verified_by_moderator:
        Whether a moderator confirmed the report.
    has_restaurant_responded:
        Whether the venue has responded to the report.
    """

    severity: Severity
    reported_at: datetime.datetime
    is_resolved: bool = False
    verified_by_moderator: bool = False
    has_restaurant_responded: bool = False

    def __post_init__(self) -> None:
        try:
            severity = Severity(self.severity)
        except ValueError as exc:
            raise RecordValidationError("Incident", "severity", str(exc)) from exc
        object.__setattr__(self, "severity", severity)
        object.__setattr__(
            self,
            "reported_at",
            check_timestamp("Incident", "reported_at", self.reported_at),
        )

    @property
    def status(self) -> IncidentStatus:
        if self.is_resolved:
            return IncidentStatus.RESOLVED
        if self.has_restaurant_responded:
            return IncidentStatus.RESPONDED
        return IncidentStatus.OPEN

    def is_recent(
        self, now: datetime.datetime, window_days: int = RECENCY_WINDOW_DAYS
    ) -> bool:
        return is_recent(self.reported_at, now, window_days)

    def to_dict(self) -> dict[str, object]:
        """Serialize to a plain dictionary."""
        return {
            "severity": self.severity.value,
            "reported_at": self.reported_at.isoformat(),
            "is_resolved": self.is_resolved,
            "verified_by_moderator": self.verified_by_moderator,
            "has_restaurant_responded": self.has_restaurant_responded,
            "status": self.status.value,
        }


def incident_impact(
    incident: Incident,
    now: datetime.datetime,
    window_days: int = RECENCY_WINDOW_DAYS,
) -> int:
    """Return the display weight of *incident* (higher means more impact).

    impact = severity score + recency bonus + moderation bonus + unresolved bonus
    """
    score = SEVERITY_IMPACT[incident.severity]
    if incident.is_recent(now, window_days):
        score += RECENCY_BONUS
    if incident.verified_by_moderator:
        score += MODERATION_BONUS
    if not incident.is_resolved:
        score += UNRESOLVED_BONUS
    return score


def rank_incidents(
    incidents: Iterable[Incident],
    now: datetime.datetime,
    window_days: int = RECENCY_WINDOW_DAYS,
) -> list[tuple[Incident, int]]:
    """Pair each incident with its impact, highest impact first.

    Ties are broken by report time, most recent first.
    """
    scored = [(i, incident_impact(i, now, window_days)) for i in incidents]
    scored.sort(key=lambda pair: (pair[1], pair[0].reported_at), reverse=True)
    return scored


@dataclass(frozen=True)
class IncidentSummary:
    """Aggregate statistics over a collection of incidents."""

    total: int = 0
    recent_count: int = 0
    unresolved_count: int = 0
    avg_severity: float = 0.0

    @property
    def has_recent_issues(self) -> bool:
        return self.recent_count > 0

    def to_dict(self) -> dict[str, object]:
        """Serialize to a plain dictionary."""
        return {
            "total": self.total,
            "recent_count": self.recent_count,
            "unresolved_count": self.unresolved_count,
            "avg_severity": self.avg_severity,
            "has_recent_issues": self.has_recent_issues,
        }


def summarize_incidents(
    incidents: Iterable[Incident],
    now: datetime.datetime,
    window_days: int = RECENCY_WINDOW_DAYS,
) -> IncidentSummary:
    """Compute totals and average severity for *incidents* as of *now*."""
    items: Sequence[Incident] = list(incidents)
    if not items:
        return IncidentSummary()

    return IncidentSummary(
        total=len(items),
        recent_count=sum(1 for i in items if i.is_recent(now, window_days)),
        unresolved_count=sum(1 for i in items if not i.is_resolved),
        avg_severity=sum(i.severity.rank for i in items) / len(items),
    )
