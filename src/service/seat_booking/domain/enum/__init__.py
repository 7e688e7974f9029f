from src.service.seat_booking.domain.enum.booking_attempt_status import BookingAttemptStatus
from src.service.seat_booking.domain.enum.seat_category import SeatCategory

__all__ = ['BookingAttemptStatus', 'SeatCategory']
