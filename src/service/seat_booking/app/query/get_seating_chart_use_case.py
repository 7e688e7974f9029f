from typing import Optional, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.dto.seating_chart import SeatingChart
from src.service.seat_booking.app.query.load_seats_use_case import LoadSeatsUseCase
from src.service.seat_booking.domain.service.seat_allocator import SeatAllocator


class GetSeatingChartUseCase:
    """Fresh seating chart, optionally with the allocator's pick for a party size."""

    def __init__(self, *, load_seats: LoadSeatsUseCase, allocator: SeatAllocator) -> None:
        self.load_seats = load_seats
        self.allocator = allocator
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        load_seats: LoadSeatsUseCase = Depends(LoadSeatsUseCase.depends),
        allocator: SeatAllocator = Depends(Provide[Container.seat_allocator]),
    ) -> Self:
        return cls(load_seats=load_seats, allocator=allocator)

    @Logger.io(truncate_content=True)
    async def execute(self, *, quantity: Optional[int] = None) -> SeatingChart:
        with self.tracer.start_as_current_span(
            'use_case.get_seating_chart',
            attributes={'seat.quantity': quantity or 0},
        ):
            seats = await self.load_seats.execute()
            if quantity is None:
                return SeatingChart(seats=seats)
            return SeatingChart(seats=self.allocator.allocate(seats=seats, quantity=quantity))
