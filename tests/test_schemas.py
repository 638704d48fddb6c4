"""Tests for tracking request parsing."""

from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from tracking import schemas


class TestParseDateValue:
    def test_date_only_string(self):
        assert schemas.parse_date_value("2024-05-01") == datetime(2024, 5, 1, tzinfo=timezone.utc)

    def test_zulu_suffix(self):
        assert schemas.parse_date_value("2024-05-01T10:15:00Z") == datetime(2024, 5, 1, 10, 15, tzinfo=timezone.utc)

    def test_offset_is_kept(self):
        parsed = schemas.parse_date_value("2024-05-01T10:15:00+02:00")

        assert parsed.utcoffset().total_seconds() == 7200

    def test_date_object(self):
        assert schemas.parse_date_value(date(2024, 5, 1)) == datetime(2024, 5, 1, tzinfo=timezone.utc)

    def test_blank_means_unset(self):
        assert schemas.parse_date_value("  ") is None
        assert schemas.parse_date_value(None) is None

    @pytest.mark.parametrize("value", ["yesterday", "2024-13-01", 12345])
    def test_rejects_garbage(self, value):
        with pytest.raises(ValueError):
            schemas.parse_date_value(value)


class TestUpdateRequest:
    def test_changes_only_contains_sent_fields(self):
        request = schemas.TrackingUpdateRequest.model_validate(
            {"status": "delivered", "trackingNumber": "X", "id": 1, "shipDate": "2024-01-02"}
        )

        assert request.changes() == {
            "status": "delivered",
            "ship_date": datetime(2024, 1, 2, tzinfo=timezone.utc),
        }

    def test_null_ship_date_rejected(self):
        with pytest.raises(ValidationError):
            schemas.TrackingUpdateRequest.model_validate({"shipDate": None})


def test_response_uses_camel_case():
    response = schemas.TrackingResponse.model_validate(
        {
            "id": 1,
            "tracking_number": "TRK1",
            "ship_date": datetime(2024, 1, 1, tzinfo=timezone.utc),
            "recipient_name": "A",
            "recipient_phone": "1",
            "destination": "X",
            "origin": "Y",
            "status": "pending",
            "service": "standard",
        }
    )

    dumped = response.model_dump(by_alias=True)
    assert dumped["trackingNumber"] == "TRK1"
    assert dumped["estimatedDeliveryDate"] is None
