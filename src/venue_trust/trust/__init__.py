"""Composite trust scoring for dining venues.

Trust is computed from three bounded components (professional
verification, community validation and data freshness) summed into a
0 – 100 total that maps to one of four trust levels (UNVERIFIED through
VERIFIED).
"""
from __future__ import annotations

from venue_trust.trust.community import community_score
from venue_trust.trust.components import (
    COMPONENT_MAXIMA,
    TrustComponent,
    aggregate_total,
    professional_score,
)
from venue_trust.trust.freshness import freshness_score, last_activity
from venue_trust.trust.level import LEVEL_THRESHOLDS, TrustLevel, derive_level
from venue_trust.trust.policy import ScoringPolicy
from venue_trust.trust.scorer import (
    TrustScore,
    TrustScorer,
    compute_trust_score,
    is_celiac_safe,
)

__all__ = [
    "COMPONENT_MAXIMA",
    "LEVEL_THRESHOLDS",
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
    "last_activity",
    "professional_score",
]
