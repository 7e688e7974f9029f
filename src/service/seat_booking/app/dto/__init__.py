from src.service.seat_booking.app.dto.seat_record import SeatRecord
from src.service.seat_booking.app.dto.seating_chart import SeatingChart

__all__ = ['SeatRecord', 'SeatingChart']
