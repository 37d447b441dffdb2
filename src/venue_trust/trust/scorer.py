"""TrustScorer — composite safety-credibility scoring for venues.

Computes the professional, community and freshness components from a
snapshot of verification data, reviews and incidents, sums them into a
capped total, and maps the total to a TrustLevel via the thresholds
defined in trust.level.
"""
from __future__ import annotations

import datetime
import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from venue_trust.recency import ensure_utc
from venue_trust.records.incident import Incident
from venue_trust.records.review import Review
from venue_trust.records.verification import VerificationRecord
from venue_trust.trust.community import community_score
from venue_trust.trust.components import (
    COMPONENT_MAXIMA,
    TOTAL_CAP,
    TrustComponent,
    aggregate_total,
    professional_score,
)
from venue_trust.trust.freshness import freshness_score
from venue_trust.trust.level import TrustLevel, derive_level
from venue_trust.trust.policy import ScoringPolicy

logger = logging.getLogger(__name__)

# Total at or above which a venue is considered safe for strict coeliacs.
CELIAC_SAFE_TOTAL: int = 80


@dataclass(frozen=True)
class TrustScore:
    """Computed trust score for a single venue at a point in time.

    TrustScore is a derived value. ``total`` and ``level`` are always
    recomputable from the three component scores.

    Parameters
    ----------
    professional_score:
        Professional verification component (0 – 40).
    community_score:
        Community validation component (0 – 35).
    freshness_score:
        Data freshness component (0 – 25).
    total:
        Capped sum of the three components.
    level:
        TrustLevel derived from the total.
    """

    professional_score: int
    community_score: int
    freshness_score: int
    total: int
    level: TrustLevel

    @classmethod
    def from_components(
        cls,
        professional: int,
        community: int,
        freshness: int,
        cap: int = TOTAL_CAP,
        thresholds: Mapping[TrustLevel, float] | None = None,
    ) -> TrustScore:
        """Build a TrustScore, deriving the total and level.

        *thresholds* defaults to the standard level thresholds; pass
        ``policy.thresholds()`` to match a custom ScoringPolicy.
        """
        total = aggregate_total(professional, community, freshness, cap)
        return cls(
            professional_score=professional,
            community_score=community,
            freshness_score=freshness,
            total=total,
            level=derive_level(total, thresholds),
        )

    def breakdown(self) -> list[tuple[str, int, int]]:
        """Return ``(title, score, max_score)`` rows for each component."""
        scores = {
            TrustComponent.PROFESSIONAL: self.professional_score,
            TrustComponent.COMMUNITY: self.community_score,
            TrustComponent.FRESHNESS: self.freshness_score,
        }
        return [
            (component.title, scores[component], COMPONENT_MAXIMA[component])
            for component in TrustComponent
        ]

    def to_dict(self) -> dict[str, object]:
        """Serialize to a plain dictionary."""
        return {
            "professional_score": self.professional_score,
            "community_score": self.community_score,
            "freshness_score": self.freshness_score,
            "total": self.total,
            "level": self.level.name,
            "level_label": self.level.label,
        }


def is_celiac_safe(score: TrustScore, certified: bool = False) -> bool:
    """True if the venue holds a safety certification or scores 80 or more."""
    return certified or score.total >= CELIAC_SAFE_TOTAL


class TrustScorer:
    """Stateless venue trust scorer.

    Holds only an immutable ScoringPolicy, so one instance can be shared
    across threads and venues.

    Parameters
    ----------
    policy:
        Scoring policy defining bounds, weights, windows and thresholds.
        Defaults to the standard policy with no customization.
    """

    def __init__(self, policy: ScoringPolicy | None = None) -> None:
        self._policy: ScoringPolicy = policy if policy is not None else ScoringPolicy()
        self._policy.validate_bounds()

    @property
    def policy(self) -> ScoringPolicy:
        return self._policy

    # ------------------------------------------------------------------
    # Scoring
    # ------------------------------------------------------------------

    def score(
        self,
        verification: VerificationRecord,
        reviews: Iterable[Review],
        incidents: Iterable[Incident],
        now: datetime.datetime,
        *,
        venue_created_at: datetime.datetime | None = None,
        last_check_in: datetime.datetime | None = None,
    ) -> TrustScore:
        """Compute a TrustScore for one venue snapshot as of *now*.

        Parameters
        ----------
        verification:
            The venue's professional verification record.
        reviews:
            All reviews of the venue.
        incidents:
            All incident reports for the venue.
        now:
            The evaluation instant. Never read from the system clock here.
        venue_created_at:
            Creation time of the venue, used for freshness when there is
            no other activity.
        last_check_in:
            Most recent diner check-in, if any.

        Returns
        -------
        TrustScore
            Fully computed trust score with total and level.
        """
        policy = self._policy
        now = ensure_utc(now)
        review_list = list(reviews)
        incident_list = list(incidents)

        professional = min(policy.professional_max, professional_score(verification))
        community = community_score(review_list, incident_list, now, policy)
        freshness = freshness_score(
            now,
            last_verified_at=verification.last_verified_at,
            reviews=review_list,
            last_check_in=last_check_in,
            created_at=venue_created_at,
            policy=policy,
        )

        trust_score = TrustScore.from_components(
            professional,
            community,
            freshness,
            cap=policy.total_cap,
            thresholds=policy.thresholds(),
        )
        logger.debug(
            "trust score: professional=%d community=%d freshness=%d total=%d level=%s",
            professional,
            community,
            freshness,
            trust_score.total,
            trust_score.level.name,
        )
        return trust_score


_DEFAULT_SCORER = TrustScorer()


def compute_trust_score(
    verification: VerificationRecord,
    reviews: Iterable[Review],
    incidents: Iterable[Incident],
    now: datetime.datetime,
    *,
    venue_created_at: datetime.datetime | None = None,
    last_check_in: datetime.datetime | None = None,
    policy: ScoringPolicy | None = None,
) -> TrustScore:
    """Compute a venue TrustScore with the default or a given policy."""
    scorer = _DEFAULT_SCORER if policy is None else TrustScorer(policy)
    return scorer.score(
        verification,
        reviews,
        incidents,
        now,
        venue_created_at=venue_created_at,
        last_check_in=last_check_in,
    )
