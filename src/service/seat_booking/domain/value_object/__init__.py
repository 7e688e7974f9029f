"""Seat Booking Value Objects"""

from src.service.seat_booking.domain.value_object.coach_layout import (
    DEFAULT_COACH_LAYOUT,
    CoachLayout,
)
from src.service.seat_booking.domain.value_object.seat_position import SeatPosition

__all__ = ['DEFAULT_COACH_LAYOUT', 'CoachLayout', 'SeatPosition']
