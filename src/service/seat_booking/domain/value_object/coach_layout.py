"""Coach layout value object."""

from typing import List

import attrs

from src.service.seat_booking.domain.enum.seat_category import SeatCategory
from src.service.seat_booking.domain.value_object.seat_position import SeatPosition


@attrs.define(frozen=True)
class CoachLayout:
    """
    Coach layout (Value Object).

    A fixed grid of ``rows`` x ``cols`` seats whose final row is shortened to
    ``last_row_seats``. One row is the exit row, sold at a premium.
    """

    rows: int = 13
    cols: int = 7
    last_row_seats: int = 3
    max_seats_per_booking: int = 7
    exit_row: int = 4
    exit_price: int = 380
    standard_price: int = 130

    def seats_in_row(self, row: int) -> int:
        if row < 1 or row > self.rows:
            return 0
        return self.last_row_seats if row == self.rows else self.cols

    @property
    def total_seats(self) -> int:
        return sum(self.seats_in_row(row) for row in range(1, self.rows + 1))

    def positions(self) -> List[SeatPosition]:
        """All seat positions in row-major order"""
        return [
            SeatPosition(row=row, col=col)
            for row in range(1, self.rows + 1)
            for col in range(1, self.seats_in_row(row) + 1)
        ]

    def seat_ids(self) -> List[str]:
        return [position.seat_id for position in self.positions()]

    def contains(self, position: SeatPosition) -> bool:
        return 1 <= position.col <= self.seats_in_row(position.row)

    def category_for_row(self, row: int) -> SeatCategory:
        return SeatCategory.EXIT if row == self.exit_row else SeatCategory.STANDARD

    def price_for_row(self, row: int) -> int:
        return self.exit_price if row == self.exit_row else self.standard_price

    def clamp_quantity(self, quantity: int) -> int:
        return max(1, min(quantity, self.max_seats_per_booking))


DEFAULT_COACH_LAYOUT = CoachLayout()
