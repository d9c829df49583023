"""
Time Slot Value Object

Half-open interval [starts_at, ends_at) used for overlap detection,
policy checks and daily quota bucketing.
"""

from datetime import datetime, timedelta
from typing import Dict

import attrs

from src.service.reservation.domain.reservation_errors import (
    InvalidRangeError,
    MalformedFieldError,
)


def minutes_between(start: datetime, end: datetime) -> int:
    """Whole minutes from start to end, truncated toward zero (negative when end < start)."""
    return int((end - start) / timedelta(minutes=1))


def parse_iso8601(value: str, *, field: str) -> datetime:
    try:
        parsed = datetime.fromisoformat(value)
    except (TypeError, ValueError):
        raise MalformedFieldError(field, f'invalid ISO-8601 datetime: {value!r}')
    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise MalformedFieldError(field, f'timezone offset is required: {value!r}')
    return parsed


def format_iso8601(value: datetime) -> str:
    return value.isoformat(timespec='seconds')


def _validate_aware(_instance: 'TimeSlot', attribute: attrs.Attribute, value: datetime) -> None:
    if value.tzinfo is None or value.utcoffset() is None:
        raise MalformedFieldError(attribute.name, 'timezone offset is required')


@attrs.define(frozen=True)
class TimeSlot:
    """Time Slot (Value Object)"""

    starts_at: datetime = attrs.field(
        validator=[attrs.validators.instance_of(datetime), _validate_aware]
    )
    ends_at: datetime = attrs.field(
        validator=[attrs.validators.instance_of(datetime), _validate_aware]
    )

    def __attrs_post_init__(self) -> None:
        if self.ends_at <= self.starts_at:
            raise InvalidRangeError()

    @classmethod
    def from_iso8601(cls, starts_at: str, ends_at: str) -> 'TimeSlot':
        return cls(
            starts_at=parse_iso8601(starts_at, field='starts_at'),
            ends_at=parse_iso8601(ends_at, field='ends_at'),
        )

    def overlaps(self, other: 'TimeSlot') -> bool:
        return self.starts_at < other.ends_at and other.starts_at < self.ends_at

    @property
    def duration_in_minutes(self) -> int:
        return minutes_between(self.starts_at, self.ends_at)

    @property
    def day_key(self) -> str:
        """Calendar day of the start, in the slot's own timezone"""
        return self.starts_at.strftime('%Y-%m-%d')

    def to_dict(self) -> Dict[str, str]:
        return {
            'starts_at': format_iso8601(self.starts_at),
            'ends_at': format_iso8601(self.ends_at),
        }
