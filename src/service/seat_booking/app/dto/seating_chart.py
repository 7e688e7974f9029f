"""Seating chart DTO returned to the driving adapters."""

from typing import Iterable, List

import attrs

from src.platform.exception.exceptions import NotFoundError, StoreUnavailableError
from src.service.seat_booking.domain.entity.seat_entity import Seat, total_price_of


@attrs.define(frozen=True)
class SeatingChart:
    """Immutable snapshot of the seat set plus the current selection"""

    seats: tuple[Seat, ...] = attrs.field(converter=tuple, factory=tuple)

    @property
    def selected_seats(self) -> List[Seat]:
        return [seat for seat in self.seats if seat.selected]

    @property
    def selected_seat_ids(self) -> List[str]:
        return [seat.id for seat in self.selected_seats]

    @property
    def total_price(self) -> int:
        return total_price_of(self.seats)

    @property
    def available_count(self) -> int:
        return sum(1 for seat in self.seats if not seat.booked)

    def with_selection(self, seat_ids: Iterable[str], *, include_booked: bool) -> 'SeatingChart':
        """
        Replace the selection with ``seat_ids``.

        Raises:
            StoreUnavailableError: If the chart is empty, i.e. the seats could not be loaded
            NotFoundError: If a seat id is not part of the chart
        """
        if not self.seats:
            raise StoreUnavailableError('Seats could not be loaded. Try again.')
        wanted = set(seat_ids)
        unknown = wanted - {seat.id for seat in self.seats}
        if unknown:
            raise NotFoundError(f'Seat {", ".join(sorted(unknown))} not found')
        return SeatingChart(
            seats=[
                seat.with_selected(seat.id in wanted and (include_booked or not seat.booked))
                for seat in self.seats
            ]
        )
