"""Unit tests for application status decoding."""

from datetime import datetime, timezone

from attachment_core.domain.models.application_status import ApplicationKey
from attachment_core.domain.services.application_status_decoder import (
    decode_application_status,
    normalize_application_key,
)
from tests.helpers import build_document


def _record(**overrides: object) -> dict[str, object]:
    record: dict[str, object] = {
        "applicationId": "APP-1",
        "applicantEmail": "jo@example.com",
        "applicantName": "Jo Doe",
        "status": "Approved",
        "visaType": "Subclass 500",
        "lastUpdated": 1_767_225_600_000_000_000,
        "comments": [],
        "attachment": [],
    }
    record.update(overrides)
    return record


class TestNormalizeApplicationKey:
    """Identifiers are normalized before lookup."""

    def test_trims_and_lowercases_email(self) -> None:
        key = normalize_application_key("  APP-1 ", " Jo@Example.COM ")
        assert key == ApplicationKey(
            application_id="APP-1", applicant_email="jo@example.com"
        )

    def test_id_case_preserved(self) -> None:
        assert normalize_application_key("app-1", "a@b.c").application_id == "app-1"


class TestDecodeApplicationStatus:
    """Decoding the optional status response."""

    def test_wrapped_record(self) -> None:
        status = decode_application_status([_record()])
        assert status is not None
        assert status.application_id == "APP-1"
        assert status.applicant_name == "Jo Doe"
        assert status.visa_type == "Subclass 500"
        assert status.comments is None
        assert status.attachment is None
        assert not status.has_attachment

    def test_last_updated_conversion(self) -> None:
        status = decode_application_status([_record()])
        assert status is not None
        assert status.last_updated_at == datetime(2026, 1, 1, tzinfo=timezone.utc)

    def test_comments_and_attachment(self) -> None:
        data = build_document(202)
        status = decode_application_status(
            [_record(comments=["  See letter "], attachment=[{"bytes": list(data)}])]
        )
        assert status is not None
        assert status.comments == "See letter"
        assert status.attachment is not None
        assert status.attachment.data == data
        assert status.attachment.filename == "attachment.pdf"

    def test_key(self) -> None:
        status = decode_application_status(_record(applicantEmail="Jo@Example.com"))
        assert status is not None
        assert status.key.applicant_email == "jo@example.com"

    def test_absent(self) -> None:
        assert decode_application_status([]) is None
        assert decode_application_status(None) is None
        assert decode_application_status({"__kind__": "none"}) is None

    def test_missing_identifiers(self) -> None:
        assert decode_application_status([_record(applicationId="")]) is None
        assert decode_application_status([_record(applicantEmail=[])]) is None

    def test_unexpected_shape(self) -> None:
        assert decode_application_status(["just a string"]) is None

    def test_missing_timestamp(self) -> None:
        status = decode_application_status([_record(lastUpdated=[])])
        assert status is not None
        assert status.last_updated_ns is None
        assert status.last_updated_at is None

    def test_out_of_range_timestamp(self) -> None:
        for value in (10**30, -(10**30)):
            status = decode_application_status([_record(lastUpdated=value)])
            assert status is not None
            assert status.last_updated_ns == value
            assert status.last_updated_at is None

    def test_string_timestamp(self) -> None:
        status = decode_application_status([_record(lastUpdated="1000000000")])
        assert status is not None
        assert status.last_updated_ns == 1_000_000_000
