"""
Reservation Domain Errors

Concrete errors raised by the reservation bounded context. Each one extends a
platform error class so callers can catch by category (validation, policy,
conflict, not found, state) or by the precise case.
"""

from src.platform.exception.exceptions import (
    ConflictError,
    NotFoundError,
    PolicyViolationError,
    StateError,
    ValidationError,
)
from src.service.reservation.domain.enum import PolicyViolationCode


class MissingFieldError(ValidationError):
    code = 'missing_field'

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f'{field} is required')


class MalformedFieldError(ValidationError):
    code = 'malformed_field'

    def __init__(self, field: str, detail: str) -> None:
        self.field = field
        self.detail = detail
        super().__init__(f'{field} is invalid: {detail}')


class InvalidRangeError(ValidationError):
    code = 'invalid_range'

    def __init__(self, message: str = 'ends_at must be after starts_at') -> None:
        super().__init__(message)


class InvalidPolicyConfigError(ValidationError):
    code = 'invalid_policy_config'

    def __init__(self, parameter: str, value: object) -> None:
        self.parameter = parameter
        super().__init__(f'{parameter} must be a positive integer, got {value!r}')


class ReservationPolicyViolationError(PolicyViolationError):
    def __init__(self, message: str, code: PolicyViolationCode) -> None:
        super().__init__(message, code)


class BookingConflictError(ConflictError):
    code = 'booking_conflict'

    def __init__(self, message: str = 'Time slot overlaps with existing reservation') -> None:
        super().__init__(message)


class ReservationNotFoundError(NotFoundError):
    def __init__(self, reservation_id: str) -> None:
        self.reservation_id = reservation_id
        super().__init__(f'Reservation not found: {reservation_id}')


class AlreadyCancelledError(StateError):
    code = 'already_cancelled'

    def __init__(self, message: str = 'Reservation is already cancelled') -> None:
        super().__init__(message)


class NotModifiableError(StateError):
    code = 'not_modifiable'
