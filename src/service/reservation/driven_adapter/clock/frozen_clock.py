from datetime import datetime, timedelta

from src.service.reservation.app.interface.i_clock import IClock


class FrozenClock(IClock):
    """Clock pinned to a fixed instant, moved only explicitly"""

    def __init__(self, now: datetime) -> None:
        self._now = now

    def now(self) -> datetime:
        return self._now

    def set_now(self, now: datetime) -> None:
        self._now = now

    def advance(self, delta: timedelta) -> None:
        self._now += delta
