from typing import List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_reservation_repo import IReservationRepo
from src.service.reservation.domain.entity.reservation_entity import Reservation
from src.service.reservation.domain.enum import ReservationStatus


class ListReservationsUseCase:
    def __init__(self, *, reservation_repo: IReservationRepo) -> None:
        self.reservation_repo = reservation_repo

    @Logger.io(truncate_content=True)
    def execute(
        self,
        *,
        resource_name: Optional[str] = None,
        status: Optional[ReservationStatus] = None,
    ) -> List[Reservation]:
        """Filtered reservations in repository order"""
        return [
            reservation
            for reservation in self.reservation_repo.all()
            if (resource_name is None or reservation.resource_name == resource_name)
            and (status is None or reservation.status == status)
        ]
