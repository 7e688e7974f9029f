from src.service.seat_booking.domain.entity.booking_attempt import BookingAttempt
from src.service.seat_booking.domain.entity.booking_entity import Booking
from src.service.seat_booking.domain.entity.seat_entity import Seat, total_price_of

__all__ = ['Booking', 'BookingAttempt', 'Seat', 'total_price_of']
