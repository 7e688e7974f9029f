from typing import List, Sequence

from src.platform.exception.exceptions import DomainError, NotFoundError
from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.domain.entity.seat_entity import Seat
from src.service.seat_booking.domain.value_object.coach_layout import (
    DEFAULT_COACH_LAYOUT,
    CoachLayout,
)


class SeatSelectionController:
    """Manual seat picks, independent of the allocator."""

    def __init__(self, *, layout: CoachLayout = DEFAULT_COACH_LAYOUT) -> None:
        self._layout = layout

    @Logger.io(truncate_content=True)
    def toggle(self, *, seats: Sequence[Seat], seat_id: str) -> List[Seat]:
        target = next((seat for seat in seats if seat.id == seat_id), None)
        if target is None:
            raise NotFoundError(f'Seat {seat_id} not found')

        if target.booked:
            raise DomainError(f'Seat {seat_id} is already booked.')

        # The limit only applies when adding a seat
        max_seats = self._layout.max_seats_per_booking
        if not target.selected and sum(1 for seat in seats if seat.selected) >= max_seats:
            raise DomainError(f'Max {max_seats} seats allowed.')

        return [
            seat.with_selected(not seat.selected) if seat.id == seat_id else seat
            for seat in seats
        ]
