"""
Seat State Query Handler Interface

CQRS Query Side
Read-only access to the ``seats`` collection of the inventory store
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from src.service.seat_booking.app.dto.seat_record import SeatRecord


class ISeatStateQueryHandler(ABC):
    @abstractmethod
    async def fetch_all_seats(self) -> List[SeatRecord]:
        """
        Fetch every seat record

        Returns:
            List of raw seat records (order not guaranteed)
        """
        pass

    @abstractmethod
    async def find_booked_seat_ids(self, *, seat_ids: Sequence[str]) -> List[str]:
        """
        Query the seats whose id is in ``seat_ids`` AND ``booked = true``

        Args:
            seat_ids: Seat IDs to check

        Returns:
            IDs of the seats that are already booked, in ``seat_ids`` order
        """
        pass
