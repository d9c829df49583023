"""Application layer DTOs"""

from src.service.reservation.app.dto.reservation_dto import (
    ReservationCreateRequest,
    ReservationRescheduleRequest,
)
from src.service.reservation.app.dto.reservation_stats_dto import (
    ReservationStatistics,
    ResourceStatistics,
)

__all__ = [
    'ReservationCreateRequest',
    'ReservationRescheduleRequest',
    'ReservationStatistics',
    'ResourceStatistics',
]
