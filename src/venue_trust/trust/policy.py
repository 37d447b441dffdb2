"""ScoringPolicy — configurable bounds, weights, windows and thresholds.

Policies let operators tune trust scoring for their deployment.
The defaults reproduce the standard venue trust rating.
"""
from __future__ import annotations

from pydantic import BaseModel, Field

from venue_trust.recency import RECENCY_WINDOW_DAYS
from venue_trust.trust.components import COMPONENT_MAXIMA, TOTAL_CAP, TrustComponent
from venue_trust.trust.level import LEVEL_THRESHOLDS, TrustLevel

# (max days since last activity, score) pairs, checked in order.
# Activity older than the last tier scores 0.
DEFAULT_FRESHNESS_TIERS: list[tuple[int, int]] = [
    (7, 25),
    (30, 20),
    (90, 15),
    (180, 10),
    (365, 5),
]


class ScoringPolicy(BaseModel):
    """Configurable trust scoring policy.

    Parameters
    ----------
    professional_max:
        Upper bound of the professional component.
    community_max:
        Upper bound of the community component.
    freshness_max:
        Upper bound of the freshness component; no tier may exceed it.
    total_cap:
        Ceiling applied to the summed components.
    verified_reviewer_weight:
        Multiplier applied to the community base score when at least one
        review comes from a verified reviewer.
    incident_penalty:
        Points subtracted from the community base score per recent incident.
    recency_window_days:
        Length of the "recent incident" window, in days.
    freshness_tiers:
        Ordered ``(max_days, score)`` pairs for the freshness component.
    level_thresholds:
        Minimum total for each trust level, keyed by level name. Levels
        not listed keep their default threshold.
    """

    professional_max: int = Field(
        default=COMPONENT_MAXIMA[TrustComponent.PROFESSIONAL], ge=0
    )
    community_max: int = Field(default=COMPONENT_MAXIMA[TrustComponent.COMMUNITY], ge=0)
    freshness_max: int = Field(default=COMPONENT_MAXIMA[TrustComponent.FRESHNESS], ge=0)
    total_cap: int = Field(default=TOTAL_CAP, gt=0)
    verified_reviewer_weight: float = Field(default=1.2, ge=0.0)
    incident_penalty: float = Field(default=5.0, ge=0.0)
    recency_window_days: int = Field(default=RECENCY_WINDOW_DAYS, gt=0)
    freshness_tiers: list[tuple[int, int]] = Field(
        default_factory=lambda: list(DEFAULT_FRESHNESS_TIERS)
    )
    level_thresholds: dict[str, float] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def thresholds(self) -> dict[TrustLevel, float]:
        """Return the effective level thresholds keyed by TrustLevel."""
        table = dict(LEVEL_THRESHOLDS)
        for name, value in self.level_thresholds.items():
            table[TrustLevel[name.upper()]] = value
        return table

    def validate_bounds(self) -> None:
        """Raise ValueError if tiers or thresholds are inconsistent."""
        previous_days = -1
        previous_score: int | None = None
        for max_days, score in self.freshness_tiers:
            if max_days <= previous_days:
                raise ValueError(
                    f"Freshness tiers must have ascending day bounds, got {max_days} "
                    f"after {previous_days}"
                )
            if not 0 <= score <= self.freshness_max:
                raise ValueError(
                    f"Freshness tier score {score} outside [0, {self.freshness_max}]"
                )
            if previous_score is not None and score > previous_score:
                raise ValueError("Freshness tier scores must not increase with age")
            previous_days, previous_score = max_days, score

        unknown = [
            name for name in self.level_thresholds if name.upper() not in TrustLevel.__members__
        ]
        if unknown:
            raise ValueError(f"Unknown trust level name(s): {', '.join(sorted(unknown))}")

        ordered = [self.thresholds()[level] for level in sorted(TrustLevel)]
        if ordered != sorted(ordered):
            raise ValueError(
                "Level thresholds must not decrease as trust level increases"
            )
