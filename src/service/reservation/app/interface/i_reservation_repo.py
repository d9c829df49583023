"""
Reservation Repository Interface

Owns the canonical copy of every reservation, keyed by id.
Reservations are never deleted; cancelled and completed ones stay queryable.
"""

from abc import ABC, abstractmethod
from typing import List

from src.service.reservation.domain.entity.reservation_entity import Reservation
from src.service.reservation.domain.value_object.time_slot import TimeSlot


class IReservationRepo(ABC):
    @abstractmethod
    def save(self, *, reservation: Reservation) -> Reservation:
        """
        Insert or replace a reservation by id (idempotent per id)

        Returns:
            The stored reservation
        """
        pass

    @abstractmethod
    def find_by_id(self, *, reservation_id: str) -> Reservation | None:
        pass

    @abstractmethod
    def find_overlapping(self, *, resource_name: str, time_slot: TimeSlot) -> List[Reservation]:
        """
        Reservations on the resource whose slot overlaps, regardless of status

        Callers filter by active status themselves.
        """
        pass

    @abstractmethod
    def all(self) -> List[Reservation]:
        """Every saved reservation, in insertion order"""
        pass
