"""
Reservation demo

Walks through booking, conflict detection, rescheduling and cancellation
against an in-memory repository, then prints the statistics as JSON.

    python -m src.service.reservation.main
"""

from datetime import datetime, timedelta, timezone

import orjson

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io import Logger
from src.service.reservation.app.reservation_service import ReservationService
from src.service.reservation.domain.reservation_policy import ReservationPolicy
from src.service.reservation.driven_adapter.clock.system_clock import SystemClock
from src.service.reservation.driven_adapter.repo.in_memory_reservation_repo_impl import (
    InMemoryReservationRepoImpl,
)


def _slot(day: datetime, start_hour: int, start_minute: int, minutes: int) -> dict[str, str]:
    starts_at = day.replace(hour=start_hour, minute=start_minute)
    return {
        'starts_at': starts_at.isoformat(),
        'ends_at': (starts_at + timedelta(minutes=minutes)).isoformat(),
    }


def _dump(data: object) -> str:
    return orjson.dumps(data, option=orjson.OPT_INDENT_2).decode()


def main() -> None:
    Logger.base.info(f'🚀 [{settings.PROJECT_NAME} {settings.VERSION}] Demo starting...')

    service = ReservationService(
        reservation_repo=InMemoryReservationRepoImpl(),
        policy=ReservationPolicy.from_settings(settings),
        clock=SystemClock(),
    )
    tomorrow = (datetime.now(timezone.utc) + timedelta(days=1)).replace(second=0, microsecond=0)

    alice = service.create_reservation(
        {'user_name': 'Alice', 'resource_name': 'Room-A', **_slot(tomorrow, 10, 0, 60)}
    )
    Logger.base.info(f'1. Booked for Alice:\n{_dump(alice)}')

    try:
        service.create_reservation(
            {'user_name': 'Bob', 'resource_name': 'Room-A', **_slot(tomorrow, 10, 30, 60)}
        )
    except CustomBaseError as e:
        Logger.base.info(f'2. Overlapping booking rejected (expected): [{e.code}] {e.message}')

    bob = service.create_reservation(
        {'user_name': 'Bob', 'resource_name': 'Room-A', **_slot(tomorrow, 11, 0, 60)}
    )
    Logger.base.info(f'3. Adjacent slot booked for Bob: {bob["starts_at"]} - {bob["ends_at"]}')

    carol = service.create_reservation(
        {'user_name': 'Carol', 'resource_name': 'Room-B', **_slot(tomorrow, 9, 0, 30)}
    )
    moved = service.reschedule_reservation(carol['id'], _slot(tomorrow, 14, 15, 45))
    Logger.base.info(f'4. Carol rescheduled to {moved["starts_at"]} - {moved["ends_at"]}')

    try:
        service.create_reservation(
            {'user_name': 'Carol', 'resource_name': 'Room-B', **_slot(tomorrow, 16, 10, 30)}
        )
    except CustomBaseError as e:
        Logger.base.info(f'5. Misaligned start rejected (expected): [{e.code}] {e.message}')

    cancelled = service.cancel_reservation(bob['id'])
    Logger.base.info(f'6. Bob cancelled: status={cancelled["status"]}')

    Logger.base.info(f'7. Booked reservations: {len(service.list_reservations(status="booked"))}')
    Logger.base.info(f'8. Statistics:\n{_dump(service.statistics())}')
    Logger.base.info('✅ Demo completed')


if __name__ == '__main__':
    main()
