#!/usr/bin/env python3
"""Example: Quickstart

Demonstrates scoring a single venue from its verification record,
reviews and incident reports with compute_trust_score.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install venue-trust
"""
from __future__ import annotations

import datetime

import venue_trust
from venue_trust import (
    Incident,
    Review,
    Severity,
    VerificationMethod,
    VerificationRecord,
    compute_trust_score,
    is_celiac_safe,
    summarize_incidents,
    summarize_reviews,
)


def main() -> None:
    print(f"venue-trust version: {venue_trust.__version__}")
    now = datetime.datetime.now(datetime.timezone.utc)

    # Step 1: Describe the venue
    verification = VerificationRecord(
        professional_score=35,
        verification_method=VerificationMethod.DIETITIAN_VERIFIED,
        verified_by="Registered dietitian",
        last_verified_at=now - datetime.timedelta(days=10),
    )
    reviews = [
        Review(
            safety_rating=5,
            food_rating=4,
            had_reaction=False,
            is_verified_reviewer=index == 0,
            created_at=now - datetime.timedelta(days=20 + index),
        )
        for index in range(5)
    ]
    incidents = [
        Incident(
            severity=Severity.MILD,
            reported_at=now - datetime.timedelta(days=300),
            is_resolved=True,
        )
    ]

    # Step 2: Compute the trust score
    score = compute_trust_score(verification, reviews, incidents, now)
    print("\nTrust score:")
    for title, component_score, max_score in score.breakdown():
        print(f"  {title}: {component_score}/{max_score}")
    print(f"  Total: {score.total}/100")
    print(f"  Level: {score.level.label} ({score.level.short_description})")
    print(f"  Celiac safe: {is_celiac_safe(score)}")

    # Step 3: Summaries for display
    review_summary = summarize_reviews(reviews)
    incident_summary = summarize_incidents(incidents, now)
    print(f"\nReviews: {review_summary.count}, {review_summary.safe_percentage:.0f}% safe")
    print(f"Incidents: {incident_summary.total}, {incident_summary.recent_count} recent")


if __name__ == "__main__":
    main()
