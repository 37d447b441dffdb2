"""venue-trust — safety-credibility scoring for dining venues.

Public API
----------
The stable public surface is everything exported from this module.
Anything inside submodules not re-exported here is considered private
and may change without notice.

Example
-------
>>> import venue_trust
>>> venue_trust.__version__
'0.1.0'

Quick start
-----------
::

    import datetime
    from venue_trust import (
        Incident, Review, Severity, VerificationRecord, compute_trust_score,
    )

    now = datetime.datetime.now(datetime.timezone.utc)
    score = compute_trust_score(
        VerificationRecord(professional_score=30, last_verified_at=now),
        reviews=[Review(5, 4, had_reaction=False, is_verified_reviewer=True, created_at=now)],
        incidents=[],
        now=now,
    )
    print(score.total, score.level.label)
"""
from __future__ import annotations

__version__: str = "0.1.0"

# ------------------------------------------------------------------
# Records
# ------------------------------------------------------------------
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
    recent_safe_experiences,
    summarize_reviews,
)
from venue_trust.records.validation import RecordValidationError
from venue_trust.records.verification import VerificationMethod, VerificationRecord

# ------------------------------------------------------------------
# Trust scoring
# ------------------------------------------------------------------
from venue_trust.trust.community import community_score
from venue_trust.trust.components import TrustComponent, aggregate_total
from venue_trust.trust.freshness import freshness_score
from venue_trust.trust.level import TrustLevel, derive_level
from venue_trust.trust.policy import ScoringPolicy
from venue_trust.trust.scorer import (
    TrustScore,
    TrustScorer,
    compute_trust_score,
    is_celiac_safe,
)

__all__ = [
    # version
    "__version__",
    # records
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
    "rank_incidents",
    "recent_safe_experiences",
    "summarize_incidents",
    "summarize_reviews",
    # trust
    "ScoringPolicy",
    "TrustComponent",
    "TrustLevel",
    "TrustScore",
    "TrustScorer",
    "aggregate_total",
    "community_score",
    "compute_trust_score",
    "derive_level",
    "freshness_score",
    "is_celiac_safe",
]
