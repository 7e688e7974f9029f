from typing import List, Self

from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.interface.i_seat_state_query_handler import (
    ISeatStateQueryHandler,
)
from src.service.seat_booking.domain.entity.seat_entity import Seat
from src.service.seat_booking.domain.value_object.coach_layout import (
    DEFAULT_COACH_LAYOUT,
    CoachLayout,
)


class LoadSeatsUseCase:
    """
    Seat Model Loader

    Turns the raw seat records of the store into Seat entities with price and
    category derived from the row. An unreachable store yields an empty seat
    set instead of an error.
    """

    def __init__(
        self,
        *,
        seat_state_handler: ISeatStateQueryHandler,
        layout: CoachLayout = DEFAULT_COACH_LAYOUT,
    ) -> None:
        self.seat_state_handler = seat_state_handler
        self.layout = layout
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        seat_state_handler: ISeatStateQueryHandler = Depends(
            Provide[Container.seat_state_query_handler]
        ),
        layout: CoachLayout = Depends(Provide[Container.coach_layout]),
    ) -> Self:
        return cls(seat_state_handler=seat_state_handler, layout=layout)

    @Logger.io(truncate_content=True)
    async def execute(self) -> List[Seat]:
        with self.tracer.start_as_current_span('use_case.load_seats'):
            try:
                records = await self.seat_state_handler.fetch_all_seats()
            except Exception as e:
                Logger.base.error(f'[LOAD] Seat store unreachable, showing no seats: {e}')
                return []

            seats: List[Seat] = []
            for record in records:
                try:
                    seat = Seat.from_record(
                        seat_id=record.id, booked=record.booked, layout=self.layout
                    )
                except DomainError as e:
                    Logger.base.warning(f'[LOAD] Skipping seat record {record.id!r}: {e.message}')
                    continue
                if not self.layout.contains(seat.position):
                    Logger.base.warning(f'[LOAD] Skipping seat {seat.id}: outside the coach layout')
                    continue
                seats.append(seat)

            seats.sort(key=lambda seat: seat.position)
            Logger.base.info(
                f'[LOAD] Loaded {len(seats)} seats, {sum(1 for s in seats if s.booked)} booked'
            )
            return seats
