"""
In-memory Seat Inventory

Single-process stand-in for the Kvrocks store, used for local development
(SEAT_STORE_BACKEND=memory) and tests. Implements both collections behind the
same ports as the Kvrocks adapters.

Every operation yields to the event loop once, so concurrent callers
interleave the way they would against a remote store.
"""

from typing import Dict, List, Sequence

import anyio
import uuid_utils

from src.platform.exception.exceptions import NotFoundError
from src.service.seat_booking.app.dto.seat_record import SeatRecord
from src.service.seat_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.seat_booking.app.interface.i_seat_state_command_handler import (
    ISeatStateCommandHandler,
)
from src.service.seat_booking.app.interface.i_seat_state_query_handler import (
    ISeatStateQueryHandler,
)
from src.service.seat_booking.domain.entity.booking_entity import Booking


class InMemorySeatInventory(ISeatStateQueryHandler, ISeatStateCommandHandler, IBookingCommandRepo):
    def __init__(self) -> None:
        self._seats: Dict[str, Dict[str, object]] = {}
        self._bookings: List[Booking] = []

    @property
    def bookings(self) -> List[Booking]:
        return list(self._bookings)

    def booked_seat_ids(self) -> List[str]:
        return [seat_id for seat_id, document in self._seats.items() if document.get('booked')]

    def put_seat_record(self, document: Dict[str, object]) -> None:
        """Write a raw seat document as-is (seeding and fixtures)"""
        self._seats[str(document['id'])] = dict(document)

    async def fetch_all_seats(self) -> List[SeatRecord]:
        await anyio.sleep(0)
        return [
            SeatRecord(id=seat_id, booked=document.get('booked'))  # type: ignore[arg-type]
            for seat_id, document in self._seats.items()
        ]

    async def find_booked_seat_ids(self, *, seat_ids: Sequence[str]) -> List[str]:
        await anyio.sleep(0)
        return [
            seat_id
            for seat_id in seat_ids
            if seat_id in self._seats and self._seats[seat_id].get('booked') is True
        ]

    async def mark_seat_booked(self, *, seat_id: str) -> None:
        await anyio.sleep(0)
        if seat_id not in self._seats:
            raise NotFoundError(f'Seat {seat_id} not found')
        self._seats[seat_id]['booked'] = True

    async def initialize_seats(self, *, seat_ids: Sequence[str]) -> int:
        await anyio.sleep(0)
        created = 0
        for seat_id in seat_ids:
            if seat_id not in self._seats:
                self._seats[seat_id] = {'id': seat_id, 'booked': False}
                created += 1
        return created

    async def append_booking(self, *, booking: Booking) -> Booking:
        await anyio.sleep(0)
        stored = booking.with_id(str(uuid_utils.uuid7()))
        self._bookings.append(stored)
        return stored
