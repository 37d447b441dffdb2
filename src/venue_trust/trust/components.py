"""TrustComponent enum, component bounds, and total aggregation.

Three independently bounded components contribute to the total score:
- Professional: third-party or owner verification (0 – 40)
- Community:    review safety ratio and incident history (0 – 35)
- Freshness:    recency of verification, review or check-in (0 – 25)
"""
from __future__ import annotations

from enum import Enum

from venue_trust.records.verification import VerificationRecord


class TrustComponent(str, Enum):
    """The three sub-scores of a venue trust score."""

    PROFESSIONAL = "professional"
    COMMUNITY = "community"
    FRESHNESS = "freshness"

    @property
    def title(self) -> str:
        return COMPONENT_TITLES[self]


# Upper bound of each component. The maxima sum to TOTAL_CAP.
COMPONENT_MAXIMA: dict[TrustComponent, int] = {
    TrustComponent.PROFESSIONAL: 40,
    TrustComponent.COMMUNITY: 35,
    TrustComponent.FRESHNESS: 25,
}

COMPONENT_TITLES: dict[TrustComponent, str] = {
    TrustComponent.PROFESSIONAL: "Professional Verification",
    TrustComponent.COMMUNITY: "Community Validation",
    TrustComponent.FRESHNESS: "Data Freshness",
}

TOTAL_CAP: int = 100


def professional_score(verification: VerificationRecord) -> int:
    """Forward the externally supplied professional score unchanged.

    The record is bounded to [0, 40] at ingestion; nothing is re-derived here.
    """
    return verification.professional_score


def aggregate_total(
    professional: int,
    community: int,
    freshness: int,
    cap: int = TOTAL_CAP,
) -> int:
    """Sum the three component scores, capped at *cap*."""
    return min(cap, professional + community + freshness)
