"""VerificationRecord — the professional verification input for a venue.

Produced by an external verification workflow. The only value the trust
engine consumes directly is ``professional_score``; the remaining fields
describe how and when the verification happened.
"""
from __future__ import annotations

import datetime
import logging
from dataclasses import dataclass
from enum import Enum

from venue_trust.records.validation import (
    RecordValidationError,
    check_optional_timestamp,
)

logger = logging.getLogger(__name__)

# Bounds of the professional verification component.
MIN_PROFESSIONAL_SCORE: int = 0
MAX_PROFESSIONAL_SCORE: int = 40


class VerificationMethod(str, Enum):
    """How a venue's professional score was established."""

    UNVERIFIED = "unverified"
    COMMUNITY_VERIFIED = "community_verified"
    OWNER_VERIFIED = "owner_verified"
    DIETITIAN_VERIFIED = "dietitian_verified"
    CERTIFICATION_VERIFIED = "certification_verified"

    @property
    def display_name(self) -> str:
        return _METHOD_DISPLAY_NAMES[self]


_METHOD_DISPLAY_NAMES: dict[VerificationMethod, str] = {
    VerificationMethod.UNVERIFIED: "Unverified",
    VerificationMethod.COMMUNITY_VERIFIED: "Community Verified",
    VerificationMethod.OWNER_VERIFIED: "Owner/Manager Verified",
    VerificationMethod.DIETITIAN_VERIFIED: "Dietitian Verified",
    VerificationMethod.CERTIFICATION_VERIFIED: "Certification Verified",
}


@dataclass(frozen=True)
class VerificationRecord:
    """Read-only professional verification data for one venue.

    Parameters
    ----------
    professional_score:
        Verification score in [0, 40]. Values outside the range are
        clamped at construction and a warning is logged.
    verification_method:
        How the verification was performed.
    verified_by:
        Optional name of the verifying party.
    last_verified_at:
        UTC datetime of the most recent verification, if any.
    has_owner_response:
        Whether the owner/manager answered the verification questionnaire.
    owner_response_date:
        When the owner/manager answered, if they did.
    verification_notes:
        Free-form notes from the verification process.
    """

    professional_score: int = 0
    verification_method: VerificationMethod = VerificationMethod.UNVERIFIED
    verified_by: str | None = None
    last_verified_at: datetime.datetime | None = None
    has_owner_response: bool = False
    owner_response_date: datetime.datetime | None = None
    verification_notes: str | None = None

    def __post_init__(self) -> None:
        score = self.professional_score
        if isinstance(score, bool) or not isinstance(score, int):
            raise RecordValidationError(
                "VerificationRecord",
                "professional_score",
                f"expected an integer, got {score!r}",
            )
        clamped = max(MIN_PROFESSIONAL_SCORE, min(MAX_PROFESSIONAL_SCORE, score))
        if clamped != score:
            logger.warning(
                "professional_score %d outside [%d, %d]; clamped to %d",
                score,
                MIN_PROFESSIONAL_SCORE,
                MAX_PROFESSIONAL_SCORE,
                clamped,
            )
            object.__setattr__(self, "professional_score", clamped)

        try:
            method = VerificationMethod(self.verification_method)
        except ValueError as exc:
            raise RecordValidationError(
                "VerificationRecord", "verification_method", str(exc)
            ) from exc
        object.__setattr__(self, "verification_method", method)
        object.__setattr__(
            self,
            "last_verified_at",
            check_optional_timestamp(
                "VerificationRecord", "last_verified_at", self.last_verified_at
            ),
        )
        object.__setattr__(
            self,
            "owner_response_date",
            check_optional_timestamp(
                "VerificationRecord", "owner_response_date", self.owner_response_date
            ),
        )

    def to_dict(self) -> dict[str, object]:
        """Serialize to a plain dictionary."""
        return {
            "professional_score": self.professional_score,
            "verification_method": self.verification_method.value,
            "verified_by": self.verified_by,
            "last_verified_at": (
                self.last_verified_at.isoformat() if self.last_verified_at else None
            ),
            "has_owner_response": self.has_owner_response,
            "owner_response_date": (
                self.owner_response_date.isoformat() if self.owner_response_date else None
            ),
            "verification_notes": self.verification_notes,
        }
