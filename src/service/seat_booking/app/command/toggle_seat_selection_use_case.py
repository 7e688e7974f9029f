from typing import Self, Sequence

from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.dto.seating_chart import SeatingChart
from src.service.seat_booking.app.query.load_seats_use_case import LoadSeatsUseCase
from src.service.seat_booking.domain.service.seat_selection_controller import (
    SeatSelectionController,
)


class ToggleSeatSelectionUseCase:
    """
    Apply one manual seat click to a selection held by the client.

    The selection is replayed on a freshly loaded chart; seats booked since the
    client last loaded drop out of it before the click is applied.
    """

    def __init__(
        self, *, load_seats: LoadSeatsUseCase, selection_controller: SeatSelectionController
    ) -> None:
        self.load_seats = load_seats
        self.selection_controller = selection_controller

    @classmethod
    @inject
    def depends(
        cls,
        load_seats: LoadSeatsUseCase = Depends(LoadSeatsUseCase.depends),
        selection_controller: SeatSelectionController = Depends(
            Provide[Container.seat_selection_controller]
        ),
    ) -> Self:
        return cls(load_seats=load_seats, selection_controller=selection_controller)

    @Logger.io(truncate_content=True)
    async def execute(self, *, seat_id: str, selected_seat_ids: Sequence[str]) -> SeatingChart:
        chart = SeatingChart(seats=await self.load_seats.execute())
        chart = chart.with_selection(selected_seat_ids, include_booked=False)

        max_seats = self.load_seats.layout.max_seats_per_booking
        if len(chart.selected_seats) > max_seats:
            raise DomainError(f'Max {max_seats} seats allowed.')

        return SeatingChart(
            seats=self.selection_controller.toggle(seats=chart.seats, seat_id=seat_id)
        )
