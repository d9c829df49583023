"""Reservation Status Enum"""

from enum import StrEnum


class ReservationStatus(StrEnum):
    BOOKED = 'booked'
    CANCELLED = 'cancelled'
    COMPLETED = 'completed'

    @property
    def is_active(self) -> bool:
        return self is ReservationStatus.BOOKED
