"""Review records and review-collection statistics.

A review captures one diner's visit: a food rating, a safety rating, and
whether they had a reaction afterwards. Reviews are immutable once ingested.
"""
from __future__ import annotations

import datetime
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from venue_trust.recency import SHORT_WINDOW_DAYS, is_recent
from venue_trust.records.validation import check_rating, check_timestamp

# Minimum safety rating for a review to be highlighted.
HIGHLIGHT_MIN_SAFETY_RATING: int = 4


@dataclass(frozen=True)
class Review:
    """A single diner review.

    Parameters
    ----------
    safety_rating:
        Star rating (1 – 5) for gluten-free safety.
    food_rating:
        Star rating (1 – 5) for food quality.
    had_reaction:
        Whether the reviewer reported a reaction after the visit.
    is_verified_reviewer:
        Whether the reviewer passed the external qualification process.
    created_at:
        UTC datetime when the review was written.
    """

    safety_rating: int
    food_rating: int
    had_reaction: bool
    is_verified_reviewer: bool
    created_at: datetime.datetime

    def __post_init__(self) -> None:
        check_rating("Review", "safety_rating", self.safety_rating)
        check_rating("Review", "food_rating", self.food_rating)
        object.__setattr__(
            self, "created_at", check_timestamp("Review", "created_at", self.created_at)
        )

    @property
    def is_safe(self) -> bool:
        """True when the reviewer reported no reaction."""
        return not self.had_reaction

    def to_dict(self) -> dict[str, object]:
        """Serialize to a plain dictionary."""
        return {
            "safety_rating": self.safety_rating,
            "food_rating": self.food_rating,
            "had_reaction": self.had_reaction,
            "is_verified_reviewer": self.is_verified_reviewer,
            "created_at": self.created_at.isoformat(),
        }


@dataclass(frozen=True)
class ReviewSummary:
    """Aggregate statistics over a collection of reviews.

    Every field is zero for an empty collection.
    """

    count: int = 0
    avg_rating: float = 0.0
    avg_safety_rating: float = 0.0
    safe_count: int = 0
    reaction_count: int = 0
    verified_reviewer_count: int = 0

    @property
    def safe_percentage(self) -> float:
        if self.count == 0:
            return 0.0
        return self.safe_count / self.count * 100

    def to_dict(self) -> dict[str, object]:
        """Serialize to a plain dictionary."""
        return {
            "count": self.count,
            "avg_rating": self.avg_rating,
            "avg_safety_rating": self.avg_safety_rating,
            "safe_count": self.safe_count,
            "safe_percentage": self.safe_percentage,
            "reaction_count": self.reaction_count,
            "verified_reviewer_count": self.verified_reviewer_count,
        }


def summarize_reviews(reviews: Iterable[Review]) -> ReviewSummary:
    """Compute counts, averages and the safe percentage for *reviews*."""
    items: Sequence[Review] = list(reviews)
    if not items:
        return ReviewSummary()

    count = len(items)
    safe_count = sum(1 for r in items if r.is_safe)
    return ReviewSummary(
        count=count,
        avg_rating=sum(r.food_rating for r in items) / count,
        avg_safety_rating=sum(r.safety_rating for r in items) / count,
        safe_count=safe_count,
        reaction_count=count - safe_count,
        verified_reviewer_count=sum(1 for r in items if r.is_verified_reviewer),
    )


def is_highlighted(review: Review, now: datetime.datetime) -> bool:
    """Return True if *review* deserves prominent display.

    A highlighted review comes from a verified reviewer, reports no
    reaction, rates safety at least 4 stars, and was written within the
    last three months.
    """
    return (
        review.is_verified_reviewer
        and review.is_safe
        and review.safety_rating >= HIGHLIGHT_MIN_SAFETY_RATING
        and is_recent(review.created_at, now, SHORT_WINDOW_DAYS)
    )


def recent_safe_experiences(reviews: Iterable[Review], now: datetime.datetime) -> int:
    """Count reaction-free reviews written within the last three months."""
    return sum(
        1
        for r in reviews
        if r.is_safe and is_recent(r.created_at, now, SHORT_WINDOW_DAYS)
    )


def most_recent_review_at(reviews: Iterable[Review]) -> datetime.datetime | None:
    """Return the latest ``created_at`` among *reviews*, or None if empty."""
    return max((r.created_at for r in reviews), default=None)
