"""
Seat Allocator

Picks seats for a party of N on the coach, keeping the party together when
possible.
"""

from typing import List, Sequence

from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.domain.entity.seat_entity import Seat
from src.service.seat_booking.domain.value_object.coach_layout import (
    DEFAULT_COACH_LAYOUT,
    CoachLayout,
)


class SeatAllocator:
    """
    Auto-select seats for a requested quantity.

    Strategy:
    1. Unbooked seats in row-major order are split into runs; a run continues
       to the next seat in the same row or wraps to column 1 of the next row.
    2. The longest run wins (earliest on ties) and is cut to the first N seats.
    3. When that run is too short, the remaining seats are the unpicked free
       seats closest (Manhattan distance) to the last seat of the run.
    """

    def __init__(self, *, layout: CoachLayout = DEFAULT_COACH_LAYOUT) -> None:
        self._layout = layout

    @Logger.io(truncate_content=True)
    def allocate(self, *, seats: Sequence[Seat], quantity: int) -> List[Seat]:
        """
        Args:
            seats: Current seat set (any order)
            quantity: Requested seat count, clamped to [1, max_seats_per_booking]

        Returns:
            The seat set in its original order, with exactly the allocated
            seats marked selected and every other seat unselected
        """
        wanted = self._layout.clamp_quantity(quantity)
        available = sorted((seat for seat in seats if not seat.booked), key=lambda s: s.position)

        picked = self.find_longest_block(available)[:wanted]
        if picked and len(picked) < wanted:
            picked += self._nearest_seats(
                available=available, picked=picked, count=wanted - len(picked)
            )

        picked_ids = {seat.id for seat in picked}
        if len(picked) < wanted:
            Logger.base.info(
                f'[ALLOCATOR] Only {len(picked)} free seats for a request of {wanted}'
            )
        return [seat.with_selected(seat.id in picked_ids) for seat in seats]

    @staticmethod
    def find_longest_block(available: Sequence[Seat]) -> List[Seat]:
        """Longest row-major run in ``available`` (already sorted row-major)"""
        best: List[Seat] = []
        current: List[Seat] = []

        for seat in available:
            if current and not current[-1].position.is_followed_by(seat.position):
                if len(current) > len(best):
                    best = current
                current = []
            current.append(seat)

        if len(current) > len(best):
            best = current
        return best

    @staticmethod
    def _nearest_seats(
        *, available: Sequence[Seat], picked: Sequence[Seat], count: int
    ) -> List[Seat]:
        anchor = picked[-1].position
        picked_ids = {seat.id for seat in picked}
        rest = [seat for seat in available if seat.id not in picked_ids]
        # sorted() is stable, so equal distances keep row-major order
        rest.sort(key=lambda seat: seat.position.manhattan_distance(anchor))
        return rest[:count]
