"""Pydantic request/response models for the venue-trust HTTP server.

The request models double as the JSON snapshot schema read by the CLI.
Each payload converts to its frozen record type via ``to_record()``.
"""
from __future__ import annotations

import datetime
from typing import Optional

from pydantic import BaseModel, Field

from venue_trust import __version__
from venue_trust.records.incident import Incident, Severity
from venue_trust.records.review import Review
from venue_trust.records.verification import VerificationMethod, VerificationRecord


class VerificationPayload(BaseModel):
    """JSON form of a VerificationRecord."""

    professional_score: int = 0
    verification_method: VerificationMethod = VerificationMethod.UNVERIFIED
    verified_by: Optional[str] = None
    last_verified_at: Optional[datetime.datetime] = None
    has_owner_response: bool = False
    owner_response_date: Optional[datetime.datetime] = None
    verification_notes: Optional[str] = None

    def to_record(self) -> VerificationRecord:
        return VerificationRecord(**self.model_dump())


class ReviewPayload(BaseModel):
    """JSON form of a Review."""

    safety_rating: int = Field(ge=1, le=5)
    food_rating: int = Field(ge=1, le=5)
    had_reaction: bool = False
    is_verified_reviewer: bool = False
    created_at: datetime.datetime

    def to_record(self) -> Review:
        return Review(**self.model_dump())


class IncidentPayload(BaseModel):
    """JSON form of an Incident."""

    severity: Severity
    reported_at: datetime.datetime
    is_resolved: bool = False
    verified_by_moderator: bool = False
    has_restaurant_responded: bool = False

    def to_record(self) -> Incident:
        return Incident(**self.model_dump())


class VenueSnapshot(BaseModel):
    """Everything needed to score one venue.

    ``now`` may be omitted in snapshot files read by the CLI; the HTTP API
    requires it (see :class:`TrustScoreRequest`).
    """

    verification: VerificationPayload = Field(default_factory=VerificationPayload)
    reviews: list[ReviewPayload] = Field(default_factory=list)
    incidents: list[IncidentPayload] = Field(default_factory=list)
    venue_created_at: Optional[datetime.datetime] = None
    last_check_in: Optional[datetime.datetime] = None
    now: Optional[datetime.datetime] = None

    def review_records(self) -> list[Review]:
        return [r.to_record() for r in self.reviews]

    def incident_records(self) -> list[Incident]:
        return [i.to_record() for i in self.incidents]


class TrustScoreRequest(VenueSnapshot):
    """Request body for POST /trust-score."""

    now: datetime.datetime


class IncidentImpactRequest(BaseModel):
    """Request body for POST /incidents/impact."""

    incidents: list[IncidentPayload] = Field(default_factory=list)
    now: datetime.datetime


class ReviewSummaryRequest(BaseModel):
    """Request body for POST /reviews/summary."""

    reviews: list[ReviewPayload] = Field(default_factory=list)


class IncidentSummaryRequest(BaseModel):
    """Request body for POST /incidents/summary."""

    incidents: list[IncidentPayload] = Field(default_factory=list)
    now: datetime.datetime


class ComponentBreakdown(BaseModel):
    """One row of a trust score breakdown."""

    title: str
    score: int
    max_score: int


class TrustScoreResponse(BaseModel):
    """Response body for POST /trust-score."""

    professional_score: int
    community_score: int
    freshness_score: int
    total: int
    level: str
    level_label: str
    breakdown: list[ComponentBreakdown] = Field(default_factory=list)
    now: str


class IncidentImpactItem(BaseModel):
    """One ranked incident in an impact response."""

    index: int
    severity: str
    reported_at: str
    status: str
    impact: int


class IncidentImpactResponse(BaseModel):
    """Response body for POST /incidents/impact."""

    incidents: list[IncidentImpactItem] = Field(default_factory=list)


class ReviewSummaryResponse(BaseModel):
    """Response body for POST /reviews/summary."""

    count: int
    avg_rating: float
    avg_safety_rating: float
    safe_count: int
    safe_percentage: float
    reaction_count: int
    verified_reviewer_count: int


class IncidentSummaryResponse(BaseModel):
    """Response body for POST /incidents/summary."""

    total: int
    recent_count: int
    unresolved_count: int
    avg_severity: float
    has_recent_issues: bool


class LevelInfo(BaseModel):
    """Description of a single trust level."""

    level: str
    label: str
    min_total: float
    short_description: str
    description: str


class LevelsResponse(BaseModel):
    """Response body for GET /levels."""

    levels: list[LevelInfo] = Field(default_factory=list)


class HealthResponse(BaseModel):
    """Response body for GET /health."""

    status: str = "ok"
    service: str = "venue-trust"
    version: str = __version__


class ErrorResponse(BaseModel):
    """Standard error response body."""

    error: str
    detail: str = ""


__all__ = [
    "ComponentBreakdown",
    "ErrorResponse",
    "HealthResponse",
    "IncidentImpactItem",
    "IncidentImpactRequest",
    "IncidentImpactResponse",
    "IncidentPayload",
    "IncidentSummaryRequest",
    "IncidentSummaryResponse",
    "LevelInfo",
    "LevelsResponse",
    "ReviewPayload",
    "ReviewSummaryRequest",
    "ReviewSummaryResponse",
    "TrustScoreRequest",
    "TrustScoreResponse",
    "VenueSnapshot",
    "VerificationPayload",
]
