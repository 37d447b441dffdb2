"""Unit tests for venue_trust.trust.policy — ScoringPolicy configuration model."""
from __future__ import annotations

import pytest
from pydantic import ValidationError

from venue_trust.trust.level import TrustLevel
from venue_trust.trust.policy import DEFAULT_FRESHNESS_TIERS, ScoringPolicy


class TestScoringPolicyDefaults:
    def test_component_maxima(self) -> None:
        policy = ScoringPolicy()
        assert policy.professional_max == 40
        assert policy.community_max == 35
        assert policy.freshness_max == 25
        assert policy.total_cap == 100

    def test_verified_reviewer_weight(self) -> None:
        assert ScoringPolicy().verified_reviewer_weight == pytest.approx(1.2)

    def test_incident_penalty(self) -> None:
        assert ScoringPolicy().incident_penalty == pytest.approx(5.0)

    def test_recency_window_days(self) -> None:
        assert ScoringPolicy().recency_window_days == 182

    def test_freshness_tiers(self) -> None:
        assert ScoringPolicy().freshness_tiers == DEFAULT_FRESHNESS_TIERS

    def test_default_thresholds(self) -> None:
        thresholds = ScoringPolicy().thresholds()
        assert thresholds[TrustLevel.VERIFIED] == 80.0
        assert thresholds[TrustLevel.USE_CAUTION] == 30.0


class TestScoringPolicyFields:
    def test_negative_penalty_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ScoringPolicy(incident_penalty=-1.0)

    def test_zero_window_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ScoringPolicy(recency_window_days=0)

    def test_policy_is_frozen(self) -> None:
        policy = ScoringPolicy()
        with pytest.raises(ValidationError):
            policy.incident_penalty = 10.0  # type: ignore[misc]

    def test_loads_from_json(self) -> None:
        policy = ScoringPolicy.model_validate_json(
            '{"incident_penalty": 7.5, "freshness_tiers": [[14, 25], [60, 10]]}'
        )
        assert policy.incident_penalty == pytest.approx(7.5)
        assert policy.freshness_tiers == [(14, 25), (60, 10)]

    def test_threshold_override_by_name(self) -> None:
        policy = ScoringPolicy(level_thresholds={"verified": 90.0})
        assert policy.thresholds()[TrustLevel.VERIFIED] == 90.0
        assert policy.thresholds()[TrustLevel.COMMUNITY_SAFE] == 60.0


class TestValidateBounds:
    def test_default_policy_is_valid(self) -> None:
        ScoringPolicy().validate_bounds()  # should not raise

    def test_non_ascending_tier_days_raises(self) -> None:
        policy = ScoringPolicy(freshness_tiers=[(30, 20), (7, 25)])
        with pytest.raises(ValueError, match="ascending"):
            policy.validate_bounds()

    def test_tier_score_above_max_raises(self) -> None:
        policy = ScoringPolicy(freshness_tiers=[(7, 30)])
        with pytest.raises(ValueError, match="outside"):
            policy.validate_bounds()

    def test_increasing_tier_scores_raise(self) -> None:
        policy = ScoringPolicy(freshness_tiers=[(7, 10), (30, 20)])
        with pytest.raises(ValueError, match="must not increase"):
            policy.validate_bounds()

    def test_unknown_level_name_raises(self) -> None:
        policy = ScoringPolicy(level_thresholds={"gold": 50.0})
        with pytest.raises(ValueError, match="Unknown trust level"):
            policy.validate_bounds()

    def test_decreasing_thresholds_raise(self) -> None:
        policy = ScoringPolicy(level_thresholds={"USE_CAUTION": 70.0})
        with pytest.raises(ValueError, match="must not decrease"):
            policy.validate_bounds()
