"""
Seat State Command Handler Implementation - Kvrocks
"""

from typing import Sequence

from src.platform.exception.exceptions import NotFoundError
from src.platform.logging.loguru_io import Logger
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.seat_booking.app.interface.i_seat_state_command_handler import (
    ISeatStateCommandHandler,
)
from src.service.seat_booking.driven_adapter.state.key_str_generator import (
    make_seat_index_key,
    make_seat_key,
)


class SeatStateCommandHandlerImpl(ISeatStateCommandHandler):
    @Logger.io
    async def mark_seat_booked(self, *, seat_id: str) -> None:
        client = kvrocks_client.get_client()
        key = make_seat_key(seat_id=seat_id)

        # Update semantics: the record must already exist
        if not await client.exists(key):
            raise NotFoundError(f'Seat {seat_id} not found')

        await client.hset(key, 'booked', '1')  # type: ignore[misc]

    @Logger.io(truncate_content=True)
    async def initialize_seats(self, *, seat_ids: Sequence[str]) -> int:
        if not seat_ids:
            return 0

        client = kvrocks_client.get_client()

        # HSETNX keeps existing booked flags untouched
        async with client.pipeline(transaction=False) as pipe:
            for seat_id in seat_ids:
                pipe.hsetnx(make_seat_key(seat_id=seat_id), 'booked', '0')
            created_flags = await pipe.execute()

        new_seat_ids = [
            seat_id for seat_id, created in zip(seat_ids, created_flags, strict=True) if created
        ]

        async with client.pipeline(transaction=False) as pipe:
            for seat_id in new_seat_ids:
                pipe.hset(make_seat_key(seat_id=seat_id), 'id', seat_id)
            pipe.sadd(make_seat_index_key(), *seat_ids)
            await pipe.execute()

        Logger.base.info(
            f'[SEAT-INIT] Created {len(new_seat_ids)} seat records ({len(seat_ids)} requested)'
        )
        return len(new_seat_ids)
