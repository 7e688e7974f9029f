from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.command.commit_booking_use_case import CommitBookingUseCase
from src.service.seat_booking.app.command.toggle_seat_selection_use_case import (
    ToggleSeatSelectionUseCase,
)
from src.service.seat_booking.app.dto.seating_chart import SeatingChart
from src.service.seat_booking.app.query.get_seating_chart_use_case import GetSeatingChartUseCase
from src.service.seat_booking.app.query.load_seats_use_case import LoadSeatsUseCase
from src.service.seat_booking.driving_adapter.http_controller.schema.booking_schema import (
    BookingCreateRequest,
    BookingResponse,
)
from src.service.seat_booking.driving_adapter.http_controller.schema.seat_schema import (
    SeatingChartResponse,
    SeatToggleRequest,
)


seat_router = APIRouter()
booking_router = APIRouter()
tracer = trace.get_tracer(__name__)


@seat_router.get('')
@Logger.io(truncate_content=True)
async def get_seating_chart(
    quantity: Optional[int] = Query(default=None, description='Party size to auto-select'),
    use_case: GetSeatingChartUseCase = Depends(GetSeatingChartUseCase.depends),
) -> SeatingChartResponse:
    chart = await use_case.execute(quantity=quantity)
    return SeatingChartResponse.from_chart(chart)


@seat_router.post('/toggle')
@Logger.io(truncate_content=True)
async def toggle_seat(
    request: SeatToggleRequest,
    use_case: ToggleSeatSelectionUseCase = Depends(ToggleSeatSelectionUseCase.depends),
) -> SeatingChartResponse:
    chart = await use_case.execute(
        seat_id=request.seat_id, selected_seat_ids=request.selected_seat_ids
    )
    return SeatingChartResponse.from_chart(chart)


@booking_router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_booking(
    request: BookingCreateRequest,
    load_seats: LoadSeatsUseCase = Depends(LoadSeatsUseCase.depends),
    commit_booking: CommitBookingUseCase = Depends(CommitBookingUseCase.depends),
) -> BookingResponse:
    with tracer.start_as_current_span('controller.create_booking') as span:
        span.set_attribute('booking.seat_count', len(request.seat_ids))

        # Booked seats stay in the selection so re-validation can name them
        chart = SeatingChart(seats=await load_seats.execute()).with_selection(
            request.seat_ids, include_booked=True
        )
        seats_by_id = {seat.id: seat for seat in chart.selected_seats}

        booking = await commit_booking.execute(
            selected_seats=[seats_by_id[seat_id] for seat_id in request.seat_ids],
            name=request.name,
            email=request.email,
        )
        span.set_attribute('booking.id', booking.id or '')
        return BookingResponse.from_entity(booking)
