from src.service.seat_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.seat_booking.app.interface.i_seat_state_command_handler import (
    ISeatStateCommandHandler,
)
from src.service.seat_booking.app.interface.i_seat_state_query_handler import (
    ISeatStateQueryHandler,
)

__all__ = ['IBookingCommandRepo', 'ISeatStateCommandHandler', 'ISeatStateQueryHandler']
