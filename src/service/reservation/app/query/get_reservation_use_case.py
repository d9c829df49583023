from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_reservation_repo import IReservationRepo
from src.service.reservation.domain.entity.reservation_entity import Reservation
from src.service.reservation.domain.reservation_errors import ReservationNotFoundError


class GetReservationUseCase:
    def __init__(self, *, reservation_repo: IReservationRepo) -> None:
        self.reservation_repo = reservation_repo

    @Logger.io
    def execute(self, *, reservation_id: str) -> Reservation:
        reservation = self.reservation_repo.find_by_id(reservation_id=reservation_id)
        if not reservation:
            raise ReservationNotFoundError(reservation_id)
        return reservation
