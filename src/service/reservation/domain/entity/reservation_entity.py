from datetime import datetime
from typing import Any, Dict

import attrs

from src.platform.logging.loguru_io import Logger
from src.service.reservation.domain.enum import ReservationStatus
from src.service.reservation.domain.reservation_errors import (
    AlreadyCancelledError,
    NotModifiableError,
)
from src.service.reservation.domain.value_object.time_slot import TimeSlot, format_iso8601


@attrs.define(frozen=True)
class Reservation:
    id: str = attrs.field(validator=attrs.validators.instance_of(str))
    user_name: str = attrs.field(validator=attrs.validators.instance_of(str))
    resource_name: str = attrs.field(validator=attrs.validators.instance_of(str))
    time_slot: TimeSlot = attrs.field(validator=attrs.validators.instance_of(TimeSlot))
    created_at: datetime = attrs.field(validator=attrs.validators.instance_of(datetime))
    updated_at: datetime = attrs.field(validator=attrs.validators.instance_of(datetime))
    status: ReservationStatus = attrs.field(
        default=ReservationStatus.BOOKED, validator=attrs.validators.instance_of(ReservationStatus)
    )

    @classmethod
    @Logger.io
    def book(
        cls,
        *,
        id: str,
        user_name: str,
        resource_name: str,
        time_slot: TimeSlot,
        now: datetime,
    ) -> 'Reservation':
        return cls(
            id=id,
            user_name=user_name,
            resource_name=resource_name,
            time_slot=time_slot,
            status=ReservationStatus.BOOKED,
            created_at=now,
            updated_at=now,
        )

    @property
    def is_active(self) -> bool:
        return self.status.is_active

    def overlaps(self, time_slot: TimeSlot) -> bool:
        return self.time_slot.overlaps(time_slot)

    @Logger.io
    def cancel(self, *, now: datetime) -> 'Reservation':
        """
        Cancel reservation

        Raises:
            AlreadyCancelledError: Reservation is already cancelled
            NotModifiableError: Reservation is completed
        """
        if self.status == ReservationStatus.CANCELLED:
            raise AlreadyCancelledError()
        self._assert_active('Cannot cancel a completed reservation')
        return attrs.evolve(self, status=ReservationStatus.CANCELLED, updated_at=now)

    @Logger.io
    def reschedule(self, *, time_slot: TimeSlot, now: datetime) -> 'Reservation':
        self._assert_active(f'Cannot reschedule a {self.status} reservation')
        return attrs.evolve(self, time_slot=time_slot, updated_at=now)

    @Logger.io
    def complete(self, *, now: datetime) -> 'Reservation':
        self._assert_active(f'Cannot complete a {self.status} reservation')
        return attrs.evolve(self, status=ReservationStatus.COMPLETED, updated_at=now)

    def _assert_active(self, message: str) -> None:
        if not self.is_active:
            raise NotModifiableError(message)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'user_name': self.user_name,
            'resource_name': self.resource_name,
            'status': self.status.value,
            'created_at': format_iso8601(self.created_at),
            'updated_at': format_iso8601(self.updated_at),
        } | self.time_slot.to_dict()
