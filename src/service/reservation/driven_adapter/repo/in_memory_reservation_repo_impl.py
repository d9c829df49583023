"""
In-memory Reservation Repository

Dict keyed by reservation id; Python dicts keep first-insertion order, so an
upsert leaves the reservation in its original position. Lookups are linear
scans. Not thread-safe: callers must serialize overlap-check + save sequences
if they share one instance across threads.
"""

from typing import Dict, List

from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_reservation_repo import IReservationRepo
from src.service.reservation.domain.entity.reservation_entity import Reservation
from src.service.reservation.domain.value_object.time_slot import TimeSlot


class InMemoryReservationRepoImpl(IReservationRepo):
    def __init__(self) -> None:
        self._items: Dict[str, Reservation] = {}

    @Logger.io
    def save(self, *, reservation: Reservation) -> Reservation:
        self._items[reservation.id] = reservation
        return reservation

    def find_by_id(self, *, reservation_id: str) -> Reservation | None:
        return self._items.get(reservation_id)

    def find_overlapping(self, *, resource_name: str, time_slot: TimeSlot) -> List[Reservation]:
        return [
            reservation
            for reservation in self._items.values()
            if reservation.resource_name == resource_name and reservation.overlaps(time_slot)
        ]

    def all(self) -> List[Reservation]:
        return list(self._items.values())
