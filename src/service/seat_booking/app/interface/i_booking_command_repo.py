"""
Booking Command Repository Interface

Append-only access to the ``bookings`` collection.
"""

from abc import ABC, abstractmethod

from src.service.seat_booking.domain.entity.booking_entity import Booking


class IBookingCommandRepo(ABC):
    @abstractmethod
    async def append_booking(self, *, booking: Booking) -> Booking:
        """
        Append a booking record

        Args:
            booking: Booking without id

        Returns:
            The stored booking with its generated id
        """
        pass
