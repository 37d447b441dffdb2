"""Unit tests for venue_trust.records.verification — VerificationRecord ingestion."""
from __future__ import annotations

import datetime
import logging

import pytest

from venue_trust.records.validation import RecordValidationError
from venue_trust.records.verification import VerificationMethod, VerificationRecord


class TestVerificationRecordDefaults:
    def test_defaults(self) -> None:
        record = VerificationRecord()
        assert record.professional_score == 0
        assert record.verification_method is VerificationMethod.UNVERIFIED
        assert record.last_verified_at is None
        assert record.has_owner_response is False


class TestProfessionalScoreIngestion:
    def test_in_range_value_is_kept(self) -> None:
        assert VerificationRecord(professional_score=40).professional_score == 40

    def test_above_range_is_clamped(self) -> None:
        assert VerificationRecord(professional_score=55).professional_score == 40

    def test_below_range_is_clamped(self) -> None:
        assert VerificationRecord(professional_score=-3).professional_score == 0

    def test_clamping_logs_warning(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="venue_trust.records.verification"):
            VerificationRecord(professional_score=45)
        assert "clamped to 40" in caplog.text

    def test_in_range_value_logs_nothing(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.WARNING, logger="venue_trust.records.verification"):
            VerificationRecord(professional_score=20)
        assert caplog.text == ""

    def test_non_integer_raises(self) -> None:
        with pytest.raises(RecordValidationError, match="professional_score"):
            VerificationRecord(professional_score=12.5)  # type: ignore[arg-type]


class TestVerificationMethod:
    def test_string_method_is_coerced(self) -> None:
        record = VerificationRecord(verification_method="dietitian_verified")  # type: ignore[arg-type]
        assert record.verification_method is VerificationMethod.DIETITIAN_VERIFIED

    def test_unknown_method_raises(self) -> None:
        with pytest.raises(RecordValidationError, match="verification_method"):
            VerificationRecord(verification_method="notarised")  # type: ignore[arg-type]

    def test_display_names(self) -> None:
        assert VerificationMethod.OWNER_VERIFIED.display_name == "Owner/Manager Verified"
        assert VerificationMethod.CERTIFICATION_VERIFIED.display_name == (
            "Certification Verified"
        )


class TestTimestamps:
    def test_naive_last_verified_at_becomes_utc(self) -> None:
        record = VerificationRecord(last_verified_at=datetime.datetime(2024, 1, 1))
        assert record.last_verified_at is not None
        assert record.last_verified_at.tzinfo == datetime.timezone.utc

    def test_non_datetime_timestamp_raises(self) -> None:
        with pytest.raises(RecordValidationError, match="owner_response_date"):
            VerificationRecord(owner_response_date="yesterday")  # type: ignore[arg-type]

    def test_to_dict_round_trips_fields(self) -> None:
        when = datetime.datetime(2024, 1, 1, tzinfo=datetime.timezone.utc)
        data = VerificationRecord(
            professional_score=30,
            verification_method=VerificationMethod.OWNER_VERIFIED,
            verified_by="Jane Doe",
            last_verified_at=when,
        ).to_dict()
        assert data["professional_score"] == 30
        assert data["verification_method"] == "owner_verified"
        assert data["verified_by"] == "Jane Doe"
        assert data["last_verified_at"] == when.isoformat()
        assert data["owner_response_date"] is None
