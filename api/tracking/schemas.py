"""
Pydantic schemas for tracking endpoints.

JSON bodies use camelCase (`trackingNumber`, `shipDate`, ...); Python code
and SQL columns use snake_case. The alias generator bridges the two.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel


def parse_date_value(value: Any) -> datetime | None:
    """
    Accept ISO dates ("2024-05-01"), ISO datetimes (with or without "Z") and
    datetime objects. Naive values are taken as UTC. Empty strings mean unset.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        parsed = datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        raw = value.strip()
        if not raw:
            return None
        if raw.endswith(("Z", "z")):
            raw = raw[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(raw)
        except ValueError as exc:
            raise ValueError(f"invalid date: {value!r}") from exc
    else:
        raise ValueError("date must be an ISO 8601 string")

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


DateValue = Annotated[datetime | None, BeforeValidator(parse_date_value)]

# Columns that may not be set to null once a record exists.
MANDATORY_FIELDS = (
    "recipient_name",
    "recipient_phone",
    "destination",
    "origin",
    "status",
    "service",
)


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )


class TrackingCreateRequest(_CamelModel):
    # `trackingNumber` and `id` are server-assigned; extra="ignore" drops them.
    recipient_name: str = Field(..., min_length=1, max_length=200)
    recipient_phone: str = Field(..., min_length=1, max_length=50)
    destination: str = Field(..., min_length=1, max_length=500)
    origin: str = Field(..., min_length=1, max_length=500)
    status: str = Field(..., min_length=1, max_length=100)
    service: str = Field(..., min_length=1, max_length=100)
    ship_date: DateValue = None
    delivery_date: DateValue = None
    estimated_delivery_date: DateValue = None


class TrackingUpdateRequest(_CamelModel):
    recipient_name: str | None = Field(default=None, min_length=1, max_length=200)
    recipient_phone: str | None = Field(default=None, min_length=1, max_length=50)
    destination: str | None = Field(default=None, min_length=1, max_length=500)
    origin: str | None = Field(default=None, min_length=1, max_length=500)
    status: str | None = Field(default=None, min_length=1, max_length=100)
    service: str | None = Field(default=None, min_length=1, max_length=100)
    ship_date: DateValue = None
    delivery_date: DateValue = None
    estimated_delivery_date: DateValue = None

    @model_validator(mode="after")
    def _reject_null_mandatory(self) -> TrackingUpdateRequest:
        nulled = [
            name
            for name in MANDATORY_FIELDS + ("ship_date",)
            if name in self.model_fields_set and getattr(self, name) is None
        ]
        if nulled:
            raise ValueError(f"fields cannot be null: {', '.join(to_camel(n) for n in nulled)}")
        return self

    def changes(self) -> dict[str, Any]:
        """
        Only the fields the client actually sent, keyed by column name.
        """
        return self.model_dump(exclude_unset=True)


class TrackingResponse(_CamelModel):
    id: int
    tracking_number: str
    ship_date: datetime
    delivery_date: datetime | None = None
    estimated_delivery_date: datetime | None = None
    recipient_name: str
    recipient_phone: str
    destination: str
    origin: str
    status: str
    service: str
