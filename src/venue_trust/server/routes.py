"""Route handler functions for the venue-trust HTTP server.

Each function accepts parsed request data and returns a tuple of
(status_code, response_dict). The HTTP handler in app.py calls these
functions and serializes the results to JSON. Handlers that score take
the TrustScorer explicitly; there is no module-level state.
"""
from __future__ import annotations

from pydantic import ValidationError

from venue_trust.records.incident import rank_incidents, summarize_incidents
from venue_trust.records.review import summarize_reviews
from venue_trust.records.validation import RecordValidationError
from venue_trust.server.models import (
    ComponentBreakdown,
    ErrorResponse,
    HealthResponse,
    IncidentImpactItem,
    IncidentImpactRequest,
    IncidentImpactResponse,
    IncidentSummaryRequest,
    IncidentSummaryResponse,
    LevelInfo,
    LevelsResponse,
    ReviewSummaryRequest,
    ReviewSummaryResponse,
    TrustScoreRequest,
    TrustScoreResponse,
)
from venue_trust.trust.level import TrustLevel
from venue_trust.trust.scorer import TrustScorer

_Response = tuple[int, dict[str, object]]


def _validation_error(exc: Exception) -> _Response:
    return 422, ErrorResponse(error="Validation error", detail=str(exc)).model_dump()


def handle_trust_score(body: dict[str, object], scorer: TrustScorer) -> _Response:
    """Handle POST /trust-score.

    Parameters
    ----------
    body:
        Parsed JSON request body.
    scorer:
        The scorer configured for this server.

    Returns
    -------
    tuple[int, dict[str, object]]
        HTTP status code and response dictionary.
    """
    try:
        request = TrustScoreRequest.model_validate(body)
        verification = request.verification.to_record()
        reviews = request.review_records()
        incidents = request.incident_records()
    except (ValidationError, RecordValidationError) as exc:
        return _validation_error(exc)

    trust_score = scorer.score(
        verification,
        reviews,
        incidents,
        request.now,
        venue_created_at=request.venue_created_at,
        last_check_in=request.last_check_in,
    )
    response = TrustScoreResponse(
        professional_score=trust_score.professional_score,
        community_score=trust_score.community_score,
        freshness_score=trust_score.freshness_score,
        total=trust_score.total,
        level=trust_score.level.name,
        level_label=trust_score.level.label,
        breakdown=[
            ComponentBreakdown(title=title, score=score, max_score=max_score)
            for title, score, max_score in trust_score.breakdown()
        ],
        now=request.now.isoformat(),
    )
    return 200, response.model_dump()


def handle_incident_impact(body: dict[str, object], scorer: TrustScorer) -> _Response:
    """Handle POST /incidents/impact.

    Returns the incidents ranked by impact, highest first. ``index`` refers
    to each incident's position in the request.
    """
    try:
        request = IncidentImpactRequest.model_validate(body)
        incidents = [i.to_record() for i in request.incidents]
    except (ValidationError, RecordValidationError) as exc:
        return _validation_error(exc)

    positions = {id(incident): index for index, incident in enumerate(incidents)}
    ranked = rank_incidents(incidents, request.now, scorer.policy.recency_window_days)
    response = IncidentImpactResponse(
        incidents=[
            IncidentImpactItem(
                index=positions[id(incident)],
                severity=incident.severity.value,
                reported_at=incident.reported_at.isoformat(),
                status=incident.status.value,
                impact=impact,
            )
            for incident, impact in ranked
        ]
    )
    return 200, response.model_dump()


def handle_review_summary(body: dict[str, object]) -> _Response:
    """Handle POST /reviews/summary."""
    try:
        request = ReviewSummaryRequest.model_validate(body)
        reviews = [r.to_record() for r in request.reviews]
    except (ValidationError, RecordValidationError) as exc:
        return _validation_error(exc)

    summary = summarize_reviews(reviews)
    return 200, ReviewSummaryResponse(**summary.to_dict()).model_dump()


def handle_incident_summary(body: dict[str, object], scorer: TrustScorer) -> _Response:
    """Handle POST /incidents/summary."""
    try:
        request = IncidentSummaryRequest.model_validate(body)
        incidents = [i.to_record() for i in request.incidents]
    except (ValidationError, RecordValidationError) as exc:
        return _validation_error(exc)

    summary = summarize_incidents(
        incidents, request.now, scorer.policy.recency_window_days
    )
    return 200, IncidentSummaryResponse(**summary.to_dict()).model_dump()


def handle_levels(scorer: TrustScorer) -> _Response:
    """Handle GET /levels."""
    thresholds = scorer.policy.thresholds()
    levels = [
        LevelInfo(
            level=level.name,
            label=level.label,
            min_total=max(0.0, thresholds[level]),
            short_description=level.short_description,
            description=level.description,
        )
        for level in sorted(TrustLevel)
    ]
    return 200, LevelsResponse(levels=levels).model_dump()


def handle_health() -> _Response:
    """Handle GET /health."""
    return 200, HealthResponse().model_dump()


__all__ = [
    "handle_health",
    "handle_incident_impact",
    "handle_incident_summary",
    "handle_levels",
    "handle_review_summary",
    "handle_trust_score",
]
