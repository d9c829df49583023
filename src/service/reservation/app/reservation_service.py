"""
Reservation Service

Entry point for callers exchanging plain mappings: validates inbound payloads
into typed requests, delegates to the command / query use cases and renders
reservations as ISO-8601 views. Holds no state of its own; the repository is
passed in explicitly.
"""

from typing import Any, Dict, List, Mapping, Optional

from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.command.cancel_reservation_use_case import (
    CancelReservationUseCase,
)
from src.service.reservation.app.command.complete_reservation_use_case import (
    CompleteReservationUseCase,
)
from src.service.reservation.app.command.create_reservation_use_case import (
    CreateReservationUseCase,
)
from src.service.reservation.app.command.reschedule_reservation_use_case import (
    RescheduleReservationUseCase,
)
from src.service.reservation.app.dto.reservation_dto import (
    ReservationCreateRequest,
    ReservationRescheduleRequest,
)
from src.service.reservation.app.interface.i_clock import IClock
from src.service.reservation.app.interface.i_reservation_repo import IReservationRepo
from src.service.reservation.app.query.get_reservation_statistics_use_case import (
    GetReservationStatisticsUseCase,
)
from src.service.reservation.app.query.get_reservation_use_case import GetReservationUseCase
from src.service.reservation.app.query.list_reservations_use_case import (
    ListReservationsUseCase,
)
from src.service.reservation.domain.enum import ReservationStatus
from src.service.reservation.domain.reservation_errors import MalformedFieldError
from src.service.reservation.domain.reservation_policy import ReservationPolicy


class ReservationService:
    def __init__(
        self,
        *,
        reservation_repo: IReservationRepo,
        policy: ReservationPolicy,
        clock: IClock,
    ) -> None:
        self.create_use_case = CreateReservationUseCase(
            reservation_repo=reservation_repo, policy=policy, clock=clock
        )
        self.reschedule_use_case = RescheduleReservationUseCase(
            reservation_repo=reservation_repo, policy=policy, clock=clock
        )
        self.cancel_use_case = CancelReservationUseCase(reservation_repo=reservation_repo, clock=clock)
        self.complete_use_case = CompleteReservationUseCase(
            reservation_repo=reservation_repo, clock=clock
        )
        self.get_use_case = GetReservationUseCase(reservation_repo=reservation_repo)
        self.list_use_case = ListReservationsUseCase(reservation_repo=reservation_repo)
        self.statistics_use_case = GetReservationStatisticsUseCase(
            reservation_repo=reservation_repo, clock=clock
        )

    @Logger.io
    def create_reservation(self, payload: Mapping[str, Any]) -> Dict[str, Any]:
        """
        Book a resource.

        Args:
            payload: user_name, resource_name, starts_at, ends_at (ISO-8601 with offset)

        Raises:
            MissingFieldError / MalformedFieldError / InvalidRangeError: Bad payload
            ReservationPolicyViolationError: Booking rule violated
            BookingConflictError: Overlaps an active reservation on the resource
        """
        request = ReservationCreateRequest.from_payload(payload)
        return self.create_use_case.execute(request=request).to_dict()

    @Logger.io
    def reschedule_reservation(
        self, reservation_id: str, payload: Mapping[str, Any]
    ) -> Dict[str, Any]:
        request = ReservationRescheduleRequest.from_payload(payload)
        return self.reschedule_use_case.execute(
            reservation_id=reservation_id, request=request
        ).to_dict()

    @Logger.io
    def cancel_reservation(self, reservation_id: str) -> Dict[str, Any]:
        return self.cancel_use_case.execute(reservation_id=reservation_id).to_dict()

    @Logger.io
    def complete_reservation(self, reservation_id: str) -> Dict[str, Any]:
        return self.complete_use_case.execute(reservation_id=reservation_id).to_dict()

    @Logger.io
    def get_reservation(self, reservation_id: str) -> Dict[str, Any]:
        return self.get_use_case.execute(reservation_id=reservation_id).to_dict()

    @Logger.io
    def list_reservations(
        self, resource_name: Optional[str] = None, status: Optional[str] = None
    ) -> List[Dict[str, Any]]:
        status_filter = None
        if status is not None:
            try:
                status_filter = ReservationStatus(status)
            except ValueError:
                raise MalformedFieldError('status', f'unknown reservation status: {status!r}')

        reservations = self.list_use_case.execute(resource_name=resource_name, status=status_filter)
        return [reservation.to_dict() for reservation in reservations]

    @Logger.io
    def statistics(self) -> Dict[str, Any]:
        return self.statistics_use_case.execute().to_dict()
