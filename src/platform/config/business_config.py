"""Business logic configuration and constants."""

from typing import Final


class StatisticsLimits:
    """Reservation statistics limits."""

    UPCOMING_SLOTS_PER_RESOURCE: Final[int] = 3
