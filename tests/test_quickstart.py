"""Test that the quickstart API works for venue-trust."""
from __future__ import annotations

import datetime

NOW = datetime.datetime(2024, 6, 1, 12, 0, tzinfo=datetime.timezone.utc)


def test_quickstart_import() -> None:
    import venue_trust

    assert venue_trust.__version__ == "0.1.0"


def test_quickstart_compute_trust_score() -> None:
    from venue_trust import Review, TrustLevel, VerificationRecord, compute_trust_score

    score = compute_trust_score(
        VerificationRecord(professional_score=30, last_verified_at=NOW),
        reviews=[Review(5, 4, had_reaction=False, is_verified_reviewer=True, created_at=NOW)],
        incidents=[],
        now=NOW,
    )
    assert score.total == 90
    assert score.level is TrustLevel.VERIFIED
    assert score.level.label == "Verified Safe"


def test_quickstart_empty_venue() -> None:
    from venue_trust import TrustLevel, VerificationRecord, compute_trust_score

    score = compute_trust_score(VerificationRecord(), [], [], NOW)
    assert score.total == 0
    assert score.level is TrustLevel.UNVERIFIED


def test_quickstart_summaries() -> None:
    from venue_trust import Incident, Severity, summarize_incidents, summarize_reviews

    assert summarize_reviews([]).count == 0
    summary = summarize_incidents(
        [Incident(severity=Severity.SEVERE, reported_at=NOW)], NOW
    )
    assert summary.total == 1
    assert summary.has_recent_issues is True


def test_quickstart_celiac_safe() -> None:
    from venue_trust import TrustScore, is_celiac_safe

    assert is_celiac_safe(TrustScore.from_components(40, 35, 5))
