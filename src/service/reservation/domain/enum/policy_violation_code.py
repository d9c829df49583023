"""Policy Violation Code Enum"""

from enum import StrEnum


class PolicyViolationCode(StrEnum):
    DURATION_EXCEEDED = 'duration_exceeded'
    TOO_FAR_IN_FUTURE = 'too_far_in_future'
    START_IN_PAST = 'start_in_past'
    MISALIGNED_START = 'misaligned_start'
    DAILY_LIMIT_EXCEEDED = 'daily_limit_exceeded'
