"""Reservation statistics DTOs."""

from datetime import datetime
from typing import Any, Dict, List, Optional

import attrs

from src.service.reservation.domain.enum import ReservationStatus
from src.service.reservation.domain.value_object.time_slot import TimeSlot, format_iso8601


@attrs.define
class ResourceStatistics:
    """Per-resource counters and the soonest upcoming active slots"""

    resource_name: str
    total_reservations: int = 0
    active_reservations: int = 0
    upcoming_slots: List[TimeSlot] = attrs.field(factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'resource_name': self.resource_name,
            'total_reservations': self.total_reservations,
            'active_reservations': self.active_reservations,
            'upcoming_slots': [slot.to_dict() for slot in self.upcoming_slots],
        }


@attrs.define
class ReservationStatistics:
    total_reservations: int = 0
    status_breakdown: Dict[ReservationStatus, int] = attrs.field(
        factory=lambda: {status: 0 for status in ReservationStatus}
    )
    next_reservation_at: Optional[datetime] = None
    resources: List[ResourceStatistics] = attrs.field(factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'totals': {
                'reservations': self.total_reservations,
                'status_breakdown': {
                    status.value: count for status, count in self.status_breakdown.items()
                },
                'next_reservation_at': (
                    format_iso8601(self.next_reservation_at) if self.next_reservation_at else None
                ),
            },
            'resources': [resource.to_dict() for resource in self.resources],
        }
