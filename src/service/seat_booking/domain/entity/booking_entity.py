from datetime import datetime, timezone
from typing import Any, Optional, Sequence

import attrs

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.domain.value_object.coach_layout import DEFAULT_COACH_LAYOUT


@attrs.define(frozen=True)
class Booking:
    seat_ids: tuple[str, ...] = attrs.field(converter=tuple)
    total_price: int
    name: str
    email: str
    booked_at: datetime
    id: Optional[str] = None

    @classmethod
    @Logger.io
    def create(
        cls,
        *,
        seat_ids: Sequence[str],
        total_price: int,
        name: str,
        email: str,
        max_seats: int = DEFAULT_COACH_LAYOUT.max_seats_per_booking,
    ) -> 'Booking':
        if not seat_ids:
            raise DomainError('Select seats to book.')
        if len(seat_ids) > max_seats:
            raise DomainError(f'Max {max_seats} seats allowed.')
        if len(set(seat_ids)) != len(seat_ids):
            raise DomainError('Each seat can only be booked once per booking.')
        if not name or not name.strip() or not email or not email.strip():
            raise DomainError('Please enter your name and email.')

        return cls(
            seat_ids=seat_ids,
            total_price=total_price,
            name=name.strip(),
            email=email.strip(),
            booked_at=datetime.now(timezone.utc),
        )

    def with_id(self, booking_id: str) -> 'Booking':
        return attrs.evolve(self, id=booking_id)

    @property
    def timestamp(self) -> str:
        return self.booked_at.isoformat()

    def to_document(self) -> dict[str, Any]:
        """Shape of the record appended to the ``bookings`` collection"""
        return {
            'id': self.id,
            'seats': list(self.seat_ids),
            'price': self.total_price,
            'name': self.name,
            'email': self.email,
            'time': self.timestamp,
        }

    @classmethod
    def from_document(cls, document: dict[str, Any]) -> 'Booking':
        return cls(
            id=document.get('id'),
            seat_ids=document['seats'],
            total_price=document['price'],
            name=document['name'],
            email=document['email'],
            booked_at=datetime.fromisoformat(document['time']),
        )
