from typing import Iterable

import attrs

from src.service.seat_booking.domain.enum.seat_category import SeatCategory
from src.service.seat_booking.domain.value_object.coach_layout import (
    DEFAULT_COACH_LAYOUT,
    CoachLayout,
)
from src.service.seat_booking.domain.value_object.seat_position import SeatPosition


@attrs.define(frozen=True)
class Seat:
    """
    A seat in the coach.

    ``booked`` mirrors the inventory store and only changes through a reload.
    ``selected`` is client state, replaced through ``with_selected``.
    """

    id: str
    row: int
    col: int
    price: int
    category: SeatCategory
    booked: bool = False
    selected: bool = False

    @property
    def position(self) -> SeatPosition:
        return SeatPosition(row=self.row, col=self.col)

    @classmethod
    def from_record(
        cls, *, seat_id: str, booked: bool | None, layout: CoachLayout = DEFAULT_COACH_LAYOUT
    ) -> 'Seat':
        position = SeatPosition.from_seat_id(seat_id)
        return cls(
            id=seat_id,
            row=position.row,
            col=position.col,
            price=layout.price_for_row(position.row),
            category=layout.category_for_row(position.row),
            booked=bool(booked),
            selected=False,
        )

    def with_selected(self, selected: bool) -> 'Seat':
        if self.selected == selected:
            return self
        return attrs.evolve(self, selected=selected)


def total_price_of(seats: Iterable[Seat]) -> int:
    """Sum of prices over the selected seats"""
    return sum(seat.price for seat in seats if seat.selected)
