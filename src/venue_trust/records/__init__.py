"""Input records consumed by the trust engine.

Records are frozen dataclasses validated at construction. Scoring code
never re-checks them.
"""
from __future__ import annotations

from venue_trust.records.incident import (
    Incident,
    IncidentStatus,
    IncidentSummary,
    Severity,
    incident_impact,
    rank_incidents,
    summarize_incidents,
)
from venue_trust.records.review import (
    Review,
    ReviewSummary,
    is_highlighted,
    most_recent_review_at,
    recent_safe_experiences,
    summarize_reviews,
)
from venue_trust.records.validation import RecordValidationError
from venue_trust.records.verification import VerificationMethod, VerificationRecord

__all__ = [
    "Incident",
    "IncidentStatus",
    "IncidentSummary",
    "RecordValidationError",
    "Review",
    "ReviewSummary",
    "Severity",
    "VerificationMethod",
    "VerificationRecord",
    "incident_impact",
    "is_highlighted",
    "most_recent_review_at",
    "rank_incidents",
    "recent_safe_experiences",
    "summarize_incidents",
    "summarize_reviews",
]
