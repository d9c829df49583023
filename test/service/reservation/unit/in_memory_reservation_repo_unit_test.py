from datetime import datetime, timedelta, timezone

import pytest

from src.service.reservation.domain.entity.reservation_entity import Reservation
from src.service.reservation.domain.value_object.time_slot import TimeSlot
from src.service.reservation.driven_adapter.repo.in_memory_reservation_repo_impl import (
    InMemoryReservationRepoImpl,
)


NOW = datetime(2025, 1, 1, 9, 0, tzinfo=timezone.utc)


def _reservation(
    reservation_id: str, resource_name: str = 'Room-A', start: str = '10:00', end: str = '11:00'
) -> Reservation:
    return Reservation.book(
        id=reservation_id,
        user_name='Alice',
        resource_name=resource_name,
        time_slot=TimeSlot.from_iso8601(f'2025-01-01T{start}:00Z', f'2025-01-01T{end}:00Z'),
        now=NOW,
    )


class TestInMemoryReservationRepoSave:
    @pytest.mark.unit
    def test_save_and_find_by_id(self, reservation_repo: InMemoryReservationRepoImpl) -> None:
        reservation = _reservation('r-1')

        saved = reservation_repo.save(reservation=reservation)

        assert saved is reservation
        assert reservation_repo.find_by_id(reservation_id='r-1') == reservation

    @pytest.mark.unit
    def test_find_by_unknown_id_returns_none(
        self, reservation_repo: InMemoryReservationRepoImpl
    ) -> None:
        assert reservation_repo.find_by_id(reservation_id='missing') is None

    @pytest.mark.unit
    def test_save_upserts_in_place(self, reservation_repo: InMemoryReservationRepoImpl) -> None:
        first = _reservation('r-1')
        reservation_repo.save(reservation=first)
        reservation_repo.save(reservation=_reservation('r-2', start='12:00', end='13:00'))

        cancelled = first.cancel(now=NOW + timedelta(minutes=1))
        reservation_repo.save(reservation=cancelled)

        stored = reservation_repo.all()
        assert [reservation.id for reservation in stored] == ['r-1', 'r-2']
        assert stored[0] == cancelled

    @pytest.mark.unit
    def test_all_returns_a_copy(self, reservation_repo: InMemoryReservationRepoImpl) -> None:
        reservation_repo.save(reservation=_reservation('r-1'))

        snapshot = reservation_repo.all()
        snapshot.clear()

        assert len(reservation_repo.all()) == 1


class TestInMemoryReservationRepoFindOverlapping:
    @pytest.fixture
    def seeded_repo(
        self, reservation_repo: InMemoryReservationRepoImpl
    ) -> InMemoryReservationRepoImpl:
        reservation_repo.save(reservation=_reservation('a-10', start='10:00', end='11:00'))
        reservation_repo.save(reservation=_reservation('a-11', start='11:00', end='12:00'))
        reservation_repo.save(reservation=_reservation('b-10', resource_name='Room-B'))
        cancelled = _reservation('a-1030', start='10:30', end='11:30').cancel(now=NOW)
        reservation_repo.save(reservation=cancelled)
        return reservation_repo

    @pytest.mark.unit
    def test_matches_resource_and_interval(
        self, seeded_repo: InMemoryReservationRepoImpl
    ) -> None:
        probe = TimeSlot.from_iso8601('2025-01-01T10:15:00Z', '2025-01-01T10:45:00Z')

        found = seeded_repo.find_overlapping(resource_name='Room-A', time_slot=probe)

        # Status is not filtered here; callers decide what counts as a conflict
        assert {reservation.id for reservation in found} == {'a-10', 'a-1030'}

    @pytest.mark.unit
    def test_touching_slot_is_not_returned(self, seeded_repo: InMemoryReservationRepoImpl) -> None:
        probe = TimeSlot.from_iso8601('2025-01-01T12:00:00Z', '2025-01-01T13:00:00Z')
        assert seeded_repo.find_overlapping(resource_name='Room-A', time_slot=probe) == []

    @pytest.mark.unit
    def test_unknown_resource(self, seeded_repo: InMemoryReservationRepoImpl) -> None:
        probe = TimeSlot.from_iso8601('2025-01-01T10:00:00Z', '2025-01-01T11:00:00Z')
        assert seeded_repo.find_overlapping(resource_name='Room-Z', time_slot=probe) == []
