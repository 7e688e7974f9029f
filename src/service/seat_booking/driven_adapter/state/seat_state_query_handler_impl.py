"""
Seat State Query Handler Implementation - Kvrocks
"""

from typing import List, Sequence

from src.platform.logging.loguru_io import Logger
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.seat_booking.app.dto.seat_record import SeatRecord
from src.service.seat_booking.app.interface.i_seat_state_query_handler import (
    ISeatStateQueryHandler,
)
from src.service.seat_booking.driven_adapter.state.key_str_generator import (
    make_seat_index_key,
    make_seat_key,
)

BOOKED_FLAG = '1'


class SeatStateQueryHandlerImpl(ISeatStateQueryHandler):
    @Logger.io(truncate_content=True)
    async def fetch_all_seats(self) -> List[SeatRecord]:
        client = kvrocks_client.get_client()
        seat_ids = sorted(await client.smembers(make_seat_index_key()))  # type: ignore[misc]
        if not seat_ids:
            return []

        async with client.pipeline(transaction=False) as pipe:
            for seat_id in seat_ids:
                pipe.hgetall(make_seat_key(seat_id=seat_id))
            documents = await pipe.execute()

        records: List[SeatRecord] = []
        for seat_id, document in zip(seat_ids, documents, strict=True):
            if not document:
                Logger.base.warning(f'[SEAT-QUERY] Index lists {seat_id} but its record is gone')
                continue
            booked = document.get('booked')
            records.append(
                SeatRecord(
                    id=document.get('id', seat_id),
                    booked=None if booked is None else booked == BOOKED_FLAG,
                )
            )
        return records

    @Logger.io
    async def find_booked_seat_ids(self, *, seat_ids: Sequence[str]) -> List[str]:
        if not seat_ids:
            return []

        client = kvrocks_client.get_client()
        async with client.pipeline(transaction=False) as pipe:
            for seat_id in seat_ids:
                pipe.hget(make_seat_key(seat_id=seat_id), 'booked')
            flags = await pipe.execute()

        return [
            seat_id for seat_id, flag in zip(seat_ids, flags, strict=True) if flag == BOOKED_FLAG
        ]
