"""Reservation Value Objects"""

from src.service.reservation.domain.value_object.time_slot import TimeSlot

__all__ = ['TimeSlot']
