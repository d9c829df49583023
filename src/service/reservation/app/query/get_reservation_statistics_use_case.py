from typing import Dict

from src.platform.config.business_config import StatisticsLimits
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.dto.reservation_stats_dto import (
    ReservationStatistics,
    ResourceStatistics,
)
from src.service.reservation.app.interface.i_clock import IClock
from src.service.reservation.app.interface.i_reservation_repo import IReservationRepo


class GetReservationStatisticsUseCase:
    """
    Aggregate reservation counts.

    - totals: reservation count, per-status breakdown, earliest upcoming active start
    - per resource: total, active count, soonest upcoming active slots (ascending)
    - resources ordered by active count, descending (ties keep first-seen order)

    "Upcoming" means starts_at >= now.
    """

    def __init__(self, *, reservation_repo: IReservationRepo, clock: IClock) -> None:
        self.reservation_repo = reservation_repo
        self.clock = clock

    @Logger.io
    def execute(self) -> ReservationStatistics:
        now = self.clock.now()
        stats = ReservationStatistics()
        by_resource: Dict[str, ResourceStatistics] = {}

        for reservation in self.reservation_repo.all():
            stats.total_reservations += 1
            stats.status_breakdown[reservation.status] += 1

            resource = by_resource.setdefault(
                reservation.resource_name,
                ResourceStatistics(resource_name=reservation.resource_name),
            )
            resource.total_reservations += 1

            if not reservation.is_active:
                continue
            resource.active_reservations += 1

            starts_at = reservation.time_slot.starts_at
            if starts_at < now:
                continue
            resource.upcoming_slots.append(reservation.time_slot)
            if stats.next_reservation_at is None or starts_at < stats.next_reservation_at:
                stats.next_reservation_at = starts_at

        for resource in by_resource.values():
            resource.upcoming_slots = sorted(
                resource.upcoming_slots, key=lambda slot: slot.starts_at
            )[: StatisticsLimits.UPCOMING_SLOTS_PER_RESOURCE]

        stats.resources = sorted(
            by_resource.values(), key=lambda resource: resource.active_reservations, reverse=True
        )
        return stats
