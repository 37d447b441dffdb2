"""TrustLevel enumeration and level derivation from total scores.

Four trust levels are defined. Level boundaries use half-open intervals
so that each total maps to exactly one level.
"""
from __future__ import annotations

from collections.abc import Mapping
from enum import IntEnum


class TrustLevel(IntEnum):
    """Ordinal safety-credibility tiers for a venue.

    Values are ordered so that higher integers represent higher trust.

    UNVERIFIED (0):
        No meaningful verification data.
    USE_CAUTION (1):
        Limited verification; diners should ask about protocols.
    COMMUNITY_SAFE (2):
        Multiple community members report safe experiences.
    VERIFIED (3):
        Professionally verified with documented protocols.
    """

    UNVERIFIED = 0
    USE_CAUTION = 1
    COMMUNITY_SAFE = 2
    VERIFIED = 3

    @property
    def label(self) -> str:
        return LEVEL_LABELS[self]

    @property
    def short_description(self) -> str:
        return LEVEL_SHORT_DESCRIPTIONS[self]

    @property
    def description(self) -> str:
        return LEVEL_DESCRIPTIONS[self]


# Minimum total score required to reach each level.
# Totals below LEVEL_THRESHOLDS[USE_CAUTION] map to UNVERIFIED.
LEVEL_THRESHOLDS: dict[TrustLevel, float] = {
    TrustLevel.UNVERIFIED: float("-inf"),
    TrustLevel.USE_CAUTION: 30.0,
    TrustLevel.COMMUNITY_SAFE: 60.0,
    TrustLevel.VERIFIED: 80.0,
}

LEVEL_LABELS: dict[TrustLevel, str] = {
    TrustLevel.UNVERIFIED: "Unverified",
    TrustLevel.USE_CAUTION: "Use Caution",
    TrustLevel.COMMUNITY_SAFE: "Community Safe",
    TrustLevel.VERIFIED: "Verified Safe",
}

LEVEL_SHORT_DESCRIPTIONS: dict[TrustLevel, str] = {
    TrustLevel.UNVERIFIED: "Not yet verified",
    TrustLevel.USE_CAUTION: "Ask about protocols",
    TrustLevel.COMMUNITY_SAFE: "Community verified",
    TrustLevel.VERIFIED: "Professionally verified",
}

LEVEL_DESCRIPTIONS: dict[TrustLevel, str] = {
    TrustLevel.UNVERIFIED: (
        "No verification data available. Exercise caution and verify with staff."
    ),
    TrustLevel.USE_CAUTION: (
        "Limited verification. Ask staff about cross-contamination protocols "
        "before ordering."
    ),
    TrustLevel.COMMUNITY_SAFE: (
        "Multiple community members have reported safe experiences here."
    ),
    TrustLevel.VERIFIED: (
        "This restaurant has been professionally verified as celiac-safe "
        "with documented protocols."
    ),
}


def derive_level(
    total: float,
    thresholds: Mapping[TrustLevel, float] | None = None,
) -> TrustLevel:
    """Map a total trust score to a TrustLevel.

    The highest level whose threshold does not exceed *total* is returned.

    Parameters
    ----------
    total:
        Total trust score (0 – 100).
    thresholds:
        Optional replacement for :data:`LEVEL_THRESHOLDS`.

    Returns
    -------
    TrustLevel
        The corresponding trust level.
    """
    table = thresholds if thresholds is not None else LEVEL_THRESHOLDS
    level = TrustLevel.UNVERIFIED
    for candidate, threshold in sorted(table.items(), key=lambda kv: kv[1]):
        if total >= threshold:
            level = candidate
    return level
