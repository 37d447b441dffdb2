"""Unit tests for venue_trust.trust.scorer — TrustScorer and TrustScore."""
from __future__ import annotations

import datetime

import pytest

from venue_trust.records.incident import Incident, Severity
from venue_trust.records.review import Review
from venue_trust.records.verification import VerificationMethod, VerificationRecord
from venue_trust.trust.level import TrustLevel
from venue_trust.trust.policy import ScoringPolicy
from venue_trust.trust.scorer import (
    TrustScore,
    TrustScorer,
    compute_trust_score,
    is_celiac_safe,
)

NOW = datetime.datetime(2024, 6, 1, 12, 0, tzinfo=datetime.timezone.utc)


def _ago(days: float) -> datetime.datetime:
    return NOW - datetime.timedelta(days=days)


def _review(*, reaction: bool = False, verified: bool = False, days_ago: float = 40) -> Review:
    return Review(
        safety_rating=4,
        food_rating=5,
        had_reaction=reaction,
        is_verified_reviewer=verified,
        created_at=_ago(days_ago),
    )


@pytest.fixture()
def scorer() -> TrustScorer:
    return TrustScorer()


class TestScenarios:
    def test_fresh_venue_with_no_data(self, scorer: TrustScorer) -> None:
        result = scorer.score(VerificationRecord(), [], [], NOW)
        assert result.total == 0
        assert result.level is TrustLevel.UNVERIFIED

    def test_newly_created_venue_scores_freshness_only(self, scorer: TrustScorer) -> None:
        result = scorer.score(VerificationRecord(), [], [], NOW, venue_created_at=NOW)
        assert result.professional_score == 0
        assert result.community_score == 0
        assert result.freshness_score == 25
        assert result.total == 25
        assert result.level is TrustLevel.UNVERIFIED

    def test_well_verified_venue(self, scorer: TrustScorer) -> None:
        verification = VerificationRecord(
            professional_score=35,
            verification_method=VerificationMethod.DIETITIAN_VERIFIED,
            last_verified_at=_ago(10),
        )
        reviews = [_review(verified=True)] + [_review() for _ in range(4)]
        result = scorer.score(verification, reviews, [], NOW)
        assert result.community_score == 35
        assert result.freshness_score == 20
        assert result.total == 90
        assert result.level is TrustLevel.VERIFIED

    def test_mixed_venue_with_recent_incident(self, scorer: TrustScorer) -> None:
        verification = VerificationRecord(professional_score=15, last_verified_at=_ago(200))
        reviews = [_review(days_ago=250) for _ in range(3)] + [
            _review(reaction=True, days_ago=250)
        ]
        incidents = [Incident(severity=Severity.MODERATE, reported_at=_ago(61))]
        result = scorer.score(verification, reviews, incidents, NOW)
        assert result.community_score == 21
        assert result.freshness_score == 5
        assert result.total == 41
        assert result.level is TrustLevel.USE_CAUTION

    def test_future_dated_verification_gets_no_freshness(self, scorer: TrustScorer) -> None:
        verification = VerificationRecord(professional_score=20, last_verified_at=_ago(-5))
        result = scorer.score(verification, [], [], NOW)
        assert result.freshness_score == 0
        assert result.total == 20

    def test_check_in_refreshes_venue(self, scorer: TrustScorer) -> None:
        verification = VerificationRecord(last_verified_at=_ago(300))
        result = scorer.score(verification, [], [], NOW, last_check_in=_ago(2))
        assert result.freshness_score == 25


class TestScorerProperties:
    def test_idempotent(self, scorer: TrustScorer) -> None:
        verification = VerificationRecord(professional_score=20, last_verified_at=_ago(45))
        reviews = [_review(), _review(reaction=True)]
        incidents = [Incident(severity=Severity.MILD, reported_at=_ago(20))]
        first = scorer.score(verification, reviews, incidents, NOW)
        second = scorer.score(verification, reviews, incidents, NOW)
        assert first == second

    def test_accepts_generators(self, scorer: TrustScorer) -> None:
        verification = VerificationRecord(professional_score=35, last_verified_at=_ago(10))
        reviews = (_review(verified=i == 0) for i in range(5))
        result = scorer.score(verification, reviews, iter([]), NOW)
        assert result.total == 90

    def test_total_never_exceeds_cap(self, scorer: TrustScorer) -> None:
        verification = VerificationRecord(professional_score=40, last_verified_at=NOW)
        result = scorer.score(verification, [_review(verified=True)], [], NOW)
        assert result.total == 100

    def test_naive_now_is_treated_as_utc(self, scorer: TrustScorer) -> None:
        verification = VerificationRecord(professional_score=35, last_verified_at=_ago(10))
        naive = scorer.score(verification, [], [], NOW.replace(tzinfo=None))
        aware = scorer.score(verification, [], [], NOW)
        assert naive == aware

    def test_policy_property(self) -> None:
        policy = ScoringPolicy(incident_penalty=8.0)
        assert TrustScorer(policy).policy is policy

    def test_invalid_policy_rejected(self) -> None:
        with pytest.raises(ValueError):
            TrustScorer(ScoringPolicy(freshness_tiers=[(30, 20), (7, 25)]))

    def test_custom_thresholds_change_level(self) -> None:
        policy = ScoringPolicy(level_thresholds={"verified": 95.0})
        verification = VerificationRecord(professional_score=35, last_verified_at=_ago(10))
        reviews = [_review(verified=True)]
        result = TrustScorer(policy).score(verification, reviews, [], NOW)
        assert result.total == 90
        assert result.level is TrustLevel.COMMUNITY_SAFE


class TestComputeTrustScore:
    def test_matches_default_scorer(self) -> None:
        verification = VerificationRecord(professional_score=30, last_verified_at=_ago(5))
        reviews = [_review(), _review()]
        assert compute_trust_score(verification, reviews, [], NOW) == TrustScorer().score(
            verification, reviews, [], NOW
        )

    def test_with_policy(self) -> None:
        policy = ScoringPolicy(incident_penalty=35.0)
        incidents = [Incident(severity=Severity.SEVERE, reported_at=_ago(3))]
        result = compute_trust_score(
            VerificationRecord(), [_review()], incidents, NOW, policy=policy
        )
        assert result.community_score == 0


class TestTrustScore:
    def test_from_components_caps_total(self) -> None:
        score = TrustScore.from_components(40, 35, 25)
        assert score.total == 100
        assert score.level is TrustLevel.VERIFIED

    def test_from_components_derives_level(self) -> None:
        assert TrustScore.from_components(20, 20, 20).level is TrustLevel.COMMUNITY_SAFE
        assert TrustScore.from_components(10, 10, 9).level is TrustLevel.UNVERIFIED

    def test_from_components_uses_given_thresholds(self) -> None:
        policy = ScoringPolicy(level_thresholds={"verified": 95.0})
        score = TrustScore.from_components(35, 35, 20, thresholds=policy.thresholds())
        assert score.total == 90
        assert score.level is TrustLevel.COMMUNITY_SAFE

    def test_from_components_agrees_with_scorer_policy(self) -> None:
        policy = ScoringPolicy(level_thresholds={"verified": 95.0})
        verification = VerificationRecord(professional_score=35, last_verified_at=_ago(10))
        scored = TrustScorer(policy).score(verification, [_review(verified=True)], [], NOW)
        rebuilt = TrustScore.from_components(
            scored.professional_score,
            scored.community_score,
            scored.freshness_score,
            thresholds=policy.thresholds(),
        )
        assert rebuilt == scored

    def test_breakdown(self) -> None:
        rows = TrustScore.from_components(35, 21, 5).breakdown()
        assert rows == [
            ("Professional Verification", 35, 40),
            ("Community Validation", 21, 35),
            ("Data Freshness", 5, 25),
        ]

    def test_to_dict(self) -> None:
        data = TrustScore.from_components(35, 35, 20).to_dict()
        assert data == {
            "professional_score": 35,
            "community_score": 35,
            "freshness_score": 20,
            "total": 90,
            "level": "VERIFIED",
            "level_label": "Verified Safe",
        }

    def test_is_frozen(self) -> None:
        score = TrustScore.from_components(1, 1, 1)
        with pytest.raises(AttributeError):
            score.total = 50  # type: ignore[misc]


class TestIsCeliacSafe:
    def test_high_total_is_safe(self) -> None:
        assert is_celiac_safe(TrustScore.from_components(40, 30, 10))

    def test_just_below_threshold_is_not_safe(self) -> None:
        assert not is_celiac_safe(TrustScore.from_components(40, 29, 10))

    def test_certification_overrides_score(self) -> None:
        assert is_celiac_safe(TrustScore.from_components(0, 0, 0), certified=True)
