from typing import List

from pydantic import BaseModel, ConfigDict, Field

from src.service.seat_booking.app.dto.seating_chart import SeatingChart
from src.service.seat_booking.domain.entity.seat_entity import Seat


class SeatResponse(BaseModel):
    id: str
    row: int
    col: int
    price: int
    category: str
    booked: bool
    selected: bool

    @classmethod
    def from_entity(cls, seat: Seat) -> 'SeatResponse':
        return cls(
            id=seat.id,
            row=seat.row,
            col=seat.col,
            price=seat.price,
            category=seat.category.value,
            booked=seat.booked,
            selected=seat.selected,
        )


class SeatingChartResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'seats': [
                    {
                        'id': '1-1',
                        'row': 1,
                        'col': 1,
                        'price': 130,
                        'category': 'standard',
                        'booked': False,
                        'selected': True,
                    }
                ],
                'selected_seat_ids': ['1-1'],
                'total_price': 130,
                'available_count': 87,
            }
        }
    )

    seats: List[SeatResponse]
    selected_seat_ids: List[str]
    total_price: int
    available_count: int

    @classmethod
    def from_chart(cls, chart: SeatingChart) -> 'SeatingChartResponse':
        return cls(
            seats=[SeatResponse.from_entity(seat) for seat in chart.seats],
            selected_seat_ids=chart.selected_seat_ids,
            total_price=chart.total_price,
            available_count=chart.available_count,
        )


class SeatToggleRequest(BaseModel):
    seat_id: str
    selected_seat_ids: List[str] = Field(default_factory=list)

    class Config:
        json_schema_extra = {'example': {'seat_id': '2-3', 'selected_seat_ids': ['2-1', '2-2']}}
