"""Reservation Domain Enums"""

from src.service.reservation.domain.enum.policy_violation_code import PolicyViolationCode
from src.service.reservation.domain.enum.reservation_status import ReservationStatus

__all__ = ['PolicyViolationCode', 'ReservationStatus']
