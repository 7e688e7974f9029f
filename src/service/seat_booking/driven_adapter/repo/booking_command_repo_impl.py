"""
Booking Command Repository Implementation - Kvrocks list of JSON documents
"""

import orjson
import uuid_utils

from src.platform.logging.loguru_io import Logger
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.seat_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.seat_booking.domain.entity.booking_entity import Booking
from src.service.seat_booking.driven_adapter.state.key_str_generator import make_bookings_key


class BookingCommandRepoImpl(IBookingCommandRepo):
    @Logger.io
    async def append_booking(self, *, booking: Booking) -> Booking:
        client = kvrocks_client.get_client()
        stored = booking.with_id(str(uuid_utils.uuid7()))
        await client.rpush(make_bookings_key(), orjson.dumps(stored.to_document()))  # type: ignore[misc]
        Logger.base.info(f'[BOOKING-REPO] Appended booking {stored.id} for {len(stored.seat_ids)} seats')
        return stored
