#!/usr/bin/env python3
"""Example: Scoring Policy

Demonstrates tuning the scorer with a ScoringPolicy and ranking a venue's
incidents by impact.

Usage:
    python examples/02_scoring_policy.py

Requirements:
    pip install venue-trust
"""
from __future__ import annotations

import datetime

import venue_trust
from venue_trust import (
    Incident,
    Review,
    ScoringPolicy,
    Severity,
    TrustScorer,
    VerificationRecord,
    rank_incidents,
)


def main() -> None:
    print(f"venue-trust version: {venue_trust.__version__}")
    now = datetime.datetime.now(datetime.timezone.utc)

    verification = VerificationRecord(
        professional_score=15,
        last_verified_at=now - datetime.timedelta(days=200),
    )
    reviews = [
        Review(
            safety_rating=4,
            food_rating=4,
            had_reaction=index == 3,
            is_verified_reviewer=False,
            created_at=now - datetime.timedelta(days=250),
        )
        for index in range(4)
    ]
    incidents = [
        Incident(severity=Severity.MODERATE, reported_at=now - datetime.timedelta(days=60)),
        Incident(
            severity=Severity.SEVERE,
            reported_at=now - datetime.timedelta(days=400),
            is_resolved=True,
            verified_by_moderator=True,
        ),
    ]

    # Step 1: Score with the default policy
    default_score = TrustScorer().score(verification, reviews, incidents, now)
    print(f"\nDefault policy: total={default_score.total} level={default_score.level.label}")

    # Step 2: Score with a stricter policy
    strict = ScoringPolicy(
        incident_penalty=10.0,
        level_thresholds={"use_caution": 40.0, "community_safe": 70.0, "verified": 90.0},
    )
    strict_score = TrustScorer(strict).score(verification, reviews, incidents, now)
    print(f"Strict policy:  total={strict_score.total} level={strict_score.level.label}")

    # Step 3: Rank incidents by impact
    print("\nIncidents by impact:")
    for incident, impact in rank_incidents(incidents, now):
        print(
            f"  {incident.reported_at.date()}  {incident.severity.value:<8}"
            f"  {incident.status.value:<9}  impact={impact}"
        )


if __name__ == "__main__":
    main()
