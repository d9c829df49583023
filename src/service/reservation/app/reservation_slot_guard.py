from datetime import datetime

from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.interface.i_reservation_repo import IReservationRepo
from src.service.reservation.domain.reservation_errors import BookingConflictError
from src.service.reservation.domain.reservation_policy import ReservationPolicy
from src.service.reservation.domain.value_object.time_slot import TimeSlot


class ReservationSlotGuard:
    """
    Validation pipeline shared by booking and rescheduling:
    daily quota count -> policy -> conflict check.

    `exclude_id` removes the reservation being edited from both the quota
    count and the conflict check, so a reservation never conflicts with itself.
    """

    def __init__(self, *, reservation_repo: IReservationRepo, policy: ReservationPolicy) -> None:
        self.reservation_repo = reservation_repo
        self.policy = policy

    def count_daily_active(
        self, *, user_name: str, day_key: str, exclude_id: str | None = None
    ) -> int:
        return sum(
            1
            for reservation in self.reservation_repo.all()
            if reservation.user_name == user_name
            and reservation.is_active
            and reservation.time_slot.day_key == day_key
            and reservation.id != exclude_id
        )

    @Logger.io
    def assert_slot_available(
        self,
        *,
        user_name: str,
        resource_name: str,
        time_slot: TimeSlot,
        now: datetime,
        exclude_id: str | None = None,
    ) -> None:
        existing_daily = self.count_daily_active(
            user_name=user_name, day_key=time_slot.day_key, exclude_id=exclude_id
        )
        self.policy.assert_acceptable(time_slot, now, existing_daily)

        conflicts = [
            reservation
            for reservation in self.reservation_repo.find_overlapping(
                resource_name=resource_name, time_slot=time_slot
            )
            if reservation.is_active and reservation.id != exclude_id
        ]
        if conflicts:
            Logger.base.info(
                f'[GUARD] {resource_name} {time_slot.starts_at}-{time_slot.ends_at} '
                f'conflicts with {[reservation.id for reservation in conflicts]}'
            )
            raise BookingConflictError()
