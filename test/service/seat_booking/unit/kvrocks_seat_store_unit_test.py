"""
Unit tests for the Kvrocks seat store adapters

The redis client is replaced with a mock; pipelines record queued commands
and return canned results from execute().
"""

import os
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import orjson
import pytest

from src.platform.exception.exceptions import NotFoundError
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.seat_booking.app.dto.seat_record import SeatRecord
from src.service.seat_booking.domain.entity.booking_entity import Booking
from src.service.seat_booking.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.seat_booking.driven_adapter.state.seat_state_command_handler_impl import (
    SeatStateCommandHandlerImpl,
)
from src.service.seat_booking.driven_adapter.state.seat_state_query_handler_impl import (
    SeatStateQueryHandlerImpl,
)


pytestmark = pytest.mark.unit

_PREFIX = os.environ.get('KVROCKS_KEY_PREFIX', '')


class FakePipeline:
    def __init__(self, results: list[Any]) -> None:
        self.commands: list[tuple[str, tuple[Any, ...]]] = []
        self._results = results

    async def __aenter__(self) -> 'FakePipeline':
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        return None

    def __getattr__(self, name: str):
        def queue(*args: Any) -> 'FakePipeline':
            self.commands.append((name, args))
            return self

        return queue

    async def execute(self) -> list[Any]:
        return self._results


@pytest.fixture
def redis_client(monkeypatch):
    client = MagicMock()
    client.smembers = AsyncMock()
    client.exists = AsyncMock()
    client.hset = AsyncMock()
    client.rpush = AsyncMock()
    monkeypatch.setattr(kvrocks_client, '_client', client)
    return client


def _use_pipelines(client: MagicMock, *results: list[Any]) -> list[FakePipeline]:
    pipelines = [FakePipeline(result) for result in results]
    client.pipeline.side_effect = pipelines
    return pipelines


class TestSeatStateQueryHandlerImpl:
    @pytest.mark.asyncio
    async def test_fetch_all_seats_reads_every_indexed_hash(self, redis_client):
        redis_client.smembers.return_value = {'1-2', '1-1', '4-1'}
        (pipe,) = _use_pipelines(
            redis_client,
            [
                {'id': '1-1', 'booked': '0'},
                {'id': '1-2', 'booked': '1'},
                {'id': '4-1'},
            ],
        )

        records = await SeatStateQueryHandlerImpl().fetch_all_seats()

        assert records == [
            SeatRecord(id='1-1', booked=False),
            SeatRecord(id='1-2', booked=True),
            SeatRecord(id='4-1', booked=None),
        ]
        assert pipe.commands == [
            ('hgetall', (f'{_PREFIX}seat:1-1',)),
            ('hgetall', (f'{_PREFIX}seat:1-2',)),
            ('hgetall', (f'{_PREFIX}seat:4-1',)),
        ]
        redis_client.smembers.assert_awaited_once_with(f'{_PREFIX}seats:index')

    @pytest.mark.asyncio
    async def test_fetch_all_seats_skips_vanished_records(self, redis_client):
        redis_client.smembers.return_value = {'1-1', '1-2'}
        _use_pipelines(redis_client, [{'id': '1-1', 'booked': '0'}, {}])

        records = await SeatStateQueryHandlerImpl().fetch_all_seats()

        assert records == [SeatRecord(id='1-1', booked=False)]

    @pytest.mark.asyncio
    async def test_find_booked_seat_ids_filters_on_flag(self, redis_client):
        _use_pipelines(redis_client, ['1', '0', None])

        booked = await SeatStateQueryHandlerImpl().find_booked_seat_ids(
            seat_ids=['5-1', '5-2', '5-3']
        )

        assert booked == ['5-1']

    @pytest.mark.asyncio
    async def test_find_booked_seat_ids_with_no_ids_skips_store(self, redis_client):
        assert await SeatStateQueryHandlerImpl().find_booked_seat_ids(seat_ids=[]) == []
        redis_client.pipeline.assert_not_called()


class TestSeatStateCommandHandlerImpl:
    @pytest.mark.asyncio
    async def test_mark_seat_booked_sets_flag(self, redis_client):
        redis_client.exists.return_value = 1

        await SeatStateCommandHandlerImpl().mark_seat_booked(seat_id='3-3')

        redis_client.hset.assert_awaited_once_with(f'{_PREFIX}seat:3-3', 'booked', '1')

    @pytest.mark.asyncio
    async def test_mark_missing_seat_is_not_found(self, redis_client):
        redis_client.exists.return_value = 0

        with pytest.raises(NotFoundError):
            await SeatStateCommandHandlerImpl().mark_seat_booked(seat_id='3-3')

        redis_client.hset.assert_not_called()

    @pytest.mark.asyncio
    async def test_initialize_seats_only_creates_missing_records(self, redis_client):
        # 1-1 exists already, 1-2 is new
        _, write_pipe = _use_pipelines(redis_client, [False, True], [])

        created = await SeatStateCommandHandlerImpl().initialize_seats(seat_ids=['1-1', '1-2'])

        assert created == 1
        assert write_pipe.commands == [
            ('hset', (f'{_PREFIX}seat:1-2', 'id', '1-2')),
            ('sadd', (f'{_PREFIX}seats:index', '1-1', '1-2')),
        ]


class TestBookingCommandRepoImpl:
    @pytest.mark.asyncio
    async def test_append_booking_assigns_id_and_pushes_document(self, redis_client):
        booking = Booking.create(
            seat_ids=['2-1', '2-2'], total_price=260, name='Asha', email='asha@example.com'
        )

        stored = await BookingCommandRepoImpl().append_booking(booking=booking)

        assert stored.id is not None
        key, payload = redis_client.rpush.await_args.args
        assert key == f'{_PREFIX}bookings'
        assert orjson.loads(payload) == stored.to_document()
