"""
Reservation request DTOs

Typed request models validated at the service boundary, before any domain
object is built. Timestamps must be ISO-8601 strings with an explicit offset
and go through the same parser as TimeSlot.from_iso8601. pydantic errors are
translated into the reservation validation errors (missing fields first, then
malformed ones).
"""

from datetime import datetime
from typing import Any, Mapping, Self

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    ValidationInfo,
    field_validator,
)

from src.service.reservation.domain.reservation_errors import (
    MalformedFieldError,
    MissingFieldError,
)
from src.service.reservation.domain.value_object.time_slot import TimeSlot, parse_iso8601


_MISSING_ERROR_TYPES = {'missing', 'string_too_short'}


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


class _ReservationRequest(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True, frozen=True)

    @field_validator('starts_at', 'ends_at', mode='before', check_fields=False)
    @classmethod
    def _parse_timestamp(cls, value: Any, info: ValidationInfo) -> datetime:
        if not isinstance(value, str):
            raise ValueError(f'expected an ISO-8601 string, got {type(value).__name__}')
        try:
            return parse_iso8601(value.strip(), field=str(info.field_name))
        except MalformedFieldError as e:
            raise ValueError(e.detail) from e

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> Self:
        try:
            return cls.model_validate(dict(payload))
        except ValidationError as e:
            errors = e.errors()
            for error in errors:
                if error['type'] in _MISSING_ERROR_TYPES or _is_blank(error.get('input')):
                    raise MissingFieldError(str(error['loc'][0]))
            first = errors[0]
            detail = first.get('ctx', {}).get('error', first['msg'])
            raise MalformedFieldError(str(first['loc'][0]), str(detail))

    def to_time_slot(self) -> TimeSlot:
        return TimeSlot(starts_at=self.starts_at, ends_at=self.ends_at)  # type: ignore[attr-defined]


class ReservationCreateRequest(_ReservationRequest):
    user_name: str = Field(min_length=1, max_length=255)
    resource_name: str = Field(min_length=1, max_length=255)
    starts_at: datetime
    ends_at: datetime


class ReservationRescheduleRequest(_ReservationRequest):
    starts_at: datetime
    ends_at: datetime
