"""
Seat State Command Handler Interface

CQRS Command Side
Writes to the ``seats`` collection of the inventory store
"""

from abc import ABC, abstractmethod
from typing import Sequence


class ISeatStateCommandHandler(ABC):
    @abstractmethod
    async def mark_seat_booked(self, *, seat_id: str) -> None:
        """
        Set ``booked = true`` on a single seat record

        Unconditional write: no check of the current value.

        Raises:
            NotFoundError: If the seat record does not exist
        """
        pass

    @abstractmethod
    async def initialize_seats(self, *, seat_ids: Sequence[str]) -> int:
        """
        Create an unbooked record for every seat id not yet in the store

        Returns:
            Number of records created
        """
        pass
