from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict

from src.service.seat_booking.domain.entity.booking_entity import Booking


class BookingCreateRequest(BaseModel):
    seat_ids: List[str]
    name: str
    email: str  # blank values are rejected by the committer with its own message

    class Config:
        json_schema_extra = {
            'example': {
                'seat_ids': ['4-1', '4-2'],
                'name': 'Asha Rao',
                'email': 'asha@example.com',
            }
        }


class BookingResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': '01234567-89ab-7def-0123-456789abcdef',
                'seat_ids': ['4-1', '4-2'],
                'total_price': 760,
                'name': 'Asha Rao',
                'email': 'asha@example.com',
                'booked_at': '2025-01-10T10:30:00+00:00',
            }
        }
    )

    id: str
    seat_ids: List[str]
    total_price: int
    name: str
    email: str
    booked_at: datetime

    @classmethod
    def from_entity(cls, booking: Booking) -> 'BookingResponse':
        if booking.id is None:
            raise ValueError('Booking ID should not be None after commit.')
        return cls(
            id=booking.id,
            seat_ids=list(booking.seat_ids),
            total_price=booking.total_price,
            name=booking.name,
            email=booking.email,
            booked_at=booking.booked_at,
        )
