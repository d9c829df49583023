"""
Reservation Policy

Stateless booking rules. The caller supplies "now" and the user's current
daily reservation count so the policy never touches a data source.
"""

from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.reservation.domain.enum import PolicyViolationCode
from src.service.reservation.domain.reservation_errors import (
    InvalidPolicyConfigError,
    ReservationPolicyViolationError,
)
from src.service.reservation.domain.value_object.time_slot import TimeSlot


if TYPE_CHECKING:
    from src.platform.config.core_setting import Settings


def _validate_positive_int(_instance: Any, attribute: attrs.Attribute, value: Any) -> None:
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        raise InvalidPolicyConfigError(attribute.name, value)


@attrs.define(frozen=True)
class ReservationPolicy:
    max_duration_minutes: int = attrs.field(default=240, validator=_validate_positive_int)
    max_advance_days: int = attrs.field(default=30, validator=_validate_positive_int)
    time_slot_step_minutes: int = attrs.field(default=15, validator=_validate_positive_int)
    max_daily_reservations_per_user: int = attrs.field(default=3, validator=_validate_positive_int)

    @classmethod
    def from_settings(cls, settings: 'Settings') -> 'ReservationPolicy':
        return cls(
            max_duration_minutes=settings.RESERVATION_MAX_DURATION_MINUTES,
            max_advance_days=settings.RESERVATION_MAX_ADVANCE_DAYS,
            time_slot_step_minutes=settings.RESERVATION_TIME_SLOT_STEP_MINUTES,
            max_daily_reservations_per_user=settings.RESERVATION_MAX_DAILY_PER_USER,
        )

    @Logger.io
    def assert_acceptable(
        self,
        time_slot: TimeSlot,
        now: datetime,
        existing_daily_reservations: int = 0,
    ) -> None:
        """
        Validate a requested slot against the booking rules (first failing rule wins)

        Raises:
            ReservationPolicyViolationError: With the code of the violated rule
        """
        if time_slot.duration_in_minutes > self.max_duration_minutes:
            raise ReservationPolicyViolationError(
                f'Reservation exceeds the maximum duration of {self.max_duration_minutes} minutes',
                PolicyViolationCode.DURATION_EXCEEDED,
            )

        # Whole days, truncated toward zero: a start earlier today counts as 0
        days_ahead = int((time_slot.starts_at - now) / timedelta(days=1))
        if days_ahead > self.max_advance_days:
            raise ReservationPolicyViolationError(
                f'Reservations can be made at most {self.max_advance_days} days in advance',
                PolicyViolationCode.TOO_FAR_IN_FUTURE,
            )

        if days_ahead < 0:
            raise ReservationPolicyViolationError(
                'Reservation must start in the future',
                PolicyViolationCode.START_IN_PAST,
            )

        if time_slot.starts_at.minute % self.time_slot_step_minutes != 0:
            raise ReservationPolicyViolationError(
                f'Reservation must start on a {self.time_slot_step_minutes}-minute boundary',
                PolicyViolationCode.MISALIGNED_START,
            )

        if existing_daily_reservations >= self.max_daily_reservations_per_user:
            raise ReservationPolicyViolationError(
                f'Daily reservation limit of {self.max_daily_reservations_per_user} reached',
                PolicyViolationCode.DAILY_LIMIT_EXCEEDED,
            )
