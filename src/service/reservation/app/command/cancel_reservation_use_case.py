from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_clock import IClock
from src.service.reservation.app.interface.i_reservation_repo import IReservationRepo
from src.service.reservation.domain.entity.reservation_entity import Reservation
from src.service.reservation.domain.reservation_errors import ReservationNotFoundError


class CancelReservationUseCase:
    def __init__(self, *, reservation_repo: IReservationRepo, clock: IClock) -> None:
        self.reservation_repo = reservation_repo
        self.clock = clock

    @Logger.io
    def execute(self, *, reservation_id: str) -> Reservation:
        """
        Raises:
            ReservationNotFoundError: Unknown reservation id
            AlreadyCancelledError: Reservation was cancelled before
            NotModifiableError: Reservation is completed
        """
        reservation = self.reservation_repo.find_by_id(reservation_id=reservation_id)
        if not reservation:
            raise ReservationNotFoundError(reservation_id)

        cancelled = reservation.cancel(now=self.clock.now())
        saved = self.reservation_repo.save(reservation=cancelled)

        Logger.base.info(f'[CANCEL] Reservation {reservation_id} cancelled')
        return saved
