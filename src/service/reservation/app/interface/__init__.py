"""Reservation App Interfaces"""

from src.service.reservation.app.interface.i_clock import IClock
from src.service.reservation.app.interface.i_reservation_repo import IReservationRepo

__all__ = ['IClock', 'IReservationRepo']
