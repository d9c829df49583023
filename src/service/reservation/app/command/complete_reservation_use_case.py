from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_clock import IClock
from src.service.reservation.app.interface.i_reservation_repo import IReservationRepo
from src.service.reservation.domain.entity.reservation_entity import Reservation
from src.service.reservation.domain.reservation_errors import ReservationNotFoundError


class CompleteReservationUseCase:
    def __init__(self, *, reservation_repo: IReservationRepo, clock: IClock) -> None:
        self.reservation_repo = reservation_repo
        self.clock = clock

    @Logger.io
    def execute(self, *, reservation_id: str) -> Reservation:
        reservation = self.reservation_repo.find_by_id(reservation_id=reservation_id)
        if not reservation:
            raise ReservationNotFoundError(reservation_id)

        completed = reservation.complete(now=self.clock.now())
        saved = self.reservation_repo.save(reservation=completed)

        Logger.base.info(f'[COMPLETE] Reservation {reservation_id} completed')
        return saved
