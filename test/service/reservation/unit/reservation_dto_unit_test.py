"""
Unit tests for the reservation request DTOs

Timestamps at the boundary follow the same rule as TimeSlot.from_iso8601:
an ISO-8601 string with an explicit offset, nothing else.
"""

from typing import Any

import pytest

from src.service.reservation.app.dto import (
    ReservationCreateRequest,
    ReservationRescheduleRequest,
)
from src.service.reservation.domain.reservation_errors import (
    MalformedFieldError,
    MissingFieldError,
)
from src.service.reservation.domain.value_object.time_slot import TimeSlot


VALID_END = '2025-01-01T11:00:00Z'


class TestRescheduleRequestTimestamps:
    @pytest.mark.unit
    @pytest.mark.parametrize(
        'value',
        ['not-a-date', '2025-01-01T10:00:00', '2025-13-01T10:00:00Z', '1735725600'],
    )
    def test_same_rule_as_time_slot(self, value: str) -> None:
        with pytest.raises(MalformedFieldError):
            TimeSlot.from_iso8601(value, VALID_END)

        with pytest.raises(MalformedFieldError) as exc_info:
            ReservationRescheduleRequest.from_payload({'starts_at': value, 'ends_at': VALID_END})
        assert exc_info.value.field == 'starts_at'

    @pytest.mark.unit
    @pytest.mark.parametrize('value', [1735725600, 1735725600.0, ['2025-01-01T10:00:00Z']])
    def test_non_string_is_malformed(self, value: Any) -> None:
        with pytest.raises(MalformedFieldError, match='expected an ISO-8601 string'):
            ReservationRescheduleRequest.from_payload({'starts_at': value, 'ends_at': VALID_END})

    @pytest.mark.unit
    def test_surrounding_whitespace_is_trimmed(self) -> None:
        request = ReservationRescheduleRequest.from_payload(
            {'starts_at': ' 2025-01-01T10:00:00+09:00 ', 'ends_at': '2025-01-01T11:00:00+09:00'}
        )
        assert request.to_time_slot() == TimeSlot.from_iso8601(
            '2025-01-01T10:00:00+09:00', '2025-01-01T11:00:00+09:00'
        )

    @pytest.mark.unit
    @pytest.mark.parametrize('value', ['', '   ', None])
    def test_blank_timestamp_is_missing(self, value: Any) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            ReservationRescheduleRequest.from_payload({'starts_at': VALID_END, 'ends_at': value})
        assert exc_info.value.field == 'ends_at'


class TestCreateRequest:
    @pytest.mark.unit
    def test_missing_field_wins_over_malformed_timestamp(self) -> None:
        with pytest.raises(MissingFieldError) as exc_info:
            ReservationCreateRequest.from_payload(
                {'resource_name': 'Room-A', 'starts_at': 1735725600, 'ends_at': VALID_END}
            )
        assert exc_info.value.field == 'user_name'
