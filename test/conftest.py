"""
Test Configuration and Fixtures

- Test log directory is set before any application module reads it at import time
- Reservation fixtures: frozen clock, fresh in-memory repository, default policy, service
"""

import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    """Set test environment variables before any module imports."""
    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)
    os.environ.setdefault('SERVICE_NAME', 'reservation-service-test')


_early_setup_test_environment()

from datetime import datetime, timezone  # noqa: E402
from typing import Any, Callable  # noqa: E402

import pytest  # noqa: E402

from src.service.reservation.app.reservation_service import ReservationService  # noqa: E402
from src.service.reservation.domain.reservation_policy import ReservationPolicy  # noqa: E402
from src.service.reservation.driven_adapter.clock.frozen_clock import FrozenClock  # noqa: E402
from src.service.reservation.driven_adapter.repo.in_memory_reservation_repo_impl import (  # noqa: E402
    InMemoryReservationRepoImpl,
)


FROZEN_NOW = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def frozen_clock() -> FrozenClock:
    return FrozenClock(FROZEN_NOW)


@pytest.fixture
def reservation_repo() -> InMemoryReservationRepoImpl:
    return InMemoryReservationRepoImpl()


@pytest.fixture
def policy() -> ReservationPolicy:
    return ReservationPolicy()


@pytest.fixture
def reservation_service(
    reservation_repo: InMemoryReservationRepoImpl,
    policy: ReservationPolicy,
    frozen_clock: FrozenClock,
) -> ReservationService:
    return ReservationService(
        reservation_repo=reservation_repo, policy=policy, clock=frozen_clock
    )


@pytest.fixture
def make_payload() -> Callable[..., dict[str, Any]]:
    def _make_payload(
        *,
        user_name: str = 'Alice',
        resource_name: str = 'Room-A',
        starts_at: str = '2025-01-01T10:00:00Z',
        ends_at: str = '2025-01-01T11:00:00Z',
    ) -> dict[str, Any]:
        return {
            'user_name': user_name,
            'resource_name': resource_name,
            'starts_at': starts_at,
            'ends_at': ends_at,
        }

    return _make_payload
