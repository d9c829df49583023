from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto.reservation_dto import ReservationRescheduleRequest
from src.service.reservation.app.interface.i_clock import IClock
from src.service.reservation.app.interface.i_reservation_repo import IReservationRepo
from src.service.reservation.app.reservation_slot_guard import ReservationSlotGuard
from src.service.reservation.domain.entity.reservation_entity import Reservation
from src.service.reservation.domain.reservation_errors import ReservationNotFoundError
from src.service.reservation.domain.reservation_policy import ReservationPolicy


class RescheduleReservationUseCase:
    """
    Move an active reservation to a new slot.

    Runs the same pipeline as booking, against the stored owner and resource,
    with the reservation's own id excluded from quota and conflict checks.
    """

    def __init__(
        self,
        *,
        reservation_repo: IReservationRepo,
        policy: ReservationPolicy,
        clock: IClock,
    ) -> None:
        self.reservation_repo = reservation_repo
        self.clock = clock
        self.slot_guard = ReservationSlotGuard(reservation_repo=reservation_repo, policy=policy)

    @Logger.io
    def execute(self, *, reservation_id: str, request: ReservationRescheduleRequest) -> Reservation:
        reservation = self.reservation_repo.find_by_id(reservation_id=reservation_id)
        if not reservation:
            raise ReservationNotFoundError(reservation_id)

        time_slot = request.to_time_slot()
        now = self.clock.now()

        # State check (NotModifiableError) precedes quota and conflict checks
        rescheduled = reservation.reschedule(time_slot=time_slot, now=now)

        self.slot_guard.assert_slot_available(
            user_name=reservation.user_name,
            resource_name=reservation.resource_name,
            time_slot=time_slot,
            now=now,
            exclude_id=reservation.id,
        )

        saved = self.reservation_repo.save(reservation=rescheduled)
        Logger.base.info(
            f'[RESCHEDULE] Reservation {saved.id} moved to '
            f'{time_slot.starts_at.isoformat()} - {time_slot.ends_at.isoformat()}'
        )
        return saved
