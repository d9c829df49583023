import uuid_utils as uuid

from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto.reservation_dto import ReservationCreateRequest
from src.service.reservation.app.interface.i_clock import IClock
from src.service.reservation.app.interface.i_reservation_repo import IReservationRepo
from src.service.reservation.app.reservation_slot_guard import ReservationSlotGuard
from src.service.reservation.domain.entity.reservation_entity import Reservation
from src.service.reservation.domain.reservation_policy import ReservationPolicy


class CreateReservationUseCase:
    """
    Book a resource for a user.

    Flow:
    1. Build the TimeSlot from the validated request (InvalidRangeError)
    2. Count the user's active reservations on the same calendar day
    3. Run the policy (ReservationPolicyViolationError)
    4. Reject overlapping active reservations on the resource (BookingConflictError)
    5. Book with a new UUIDv7 id and persist
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
    def execute(self, *, request: ReservationCreateRequest) -> Reservation:
        time_slot = request.to_time_slot()
        now = self.clock.now()

        self.slot_guard.assert_slot_available(
            user_name=request.user_name,
            resource_name=request.resource_name,
            time_slot=time_slot,
            now=now,
        )

        reservation = Reservation.book(
            id=str(uuid.uuid7()),
            user_name=request.user_name,
            resource_name=request.resource_name,
            time_slot=time_slot,
            now=now,
        )
        saved = self.reservation_repo.save(reservation=reservation)

        Logger.base.info(
            f'[CREATE] Reservation {saved.id} booked: {saved.user_name} -> {saved.resource_name}'
        )
        return saved
