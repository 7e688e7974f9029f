from unittest.mock import AsyncMock

import pytest

from src.service.seat_booking.app.dto.seat_record import SeatRecord
from src.service.seat_booking.app.query.load_seats_use_case import LoadSeatsUseCase
from src.service.seat_booking.domain.enum.seat_category import SeatCategory


pytestmark = pytest.mark.unit


class TestLoadSeatsUseCase:
    def setup_method(self):
        self.seat_state_handler = AsyncMock()
        self.use_case = LoadSeatsUseCase(seat_state_handler=self.seat_state_handler)

    @pytest.mark.asyncio
    async def test_records_become_sorted_seats(self):
        # Given: records in store order, one without a booked flag
        self.seat_state_handler.fetch_all_seats.return_value = [
            SeatRecord(id='10-1', booked=False),
            SeatRecord(id='4-3', booked=True),
            SeatRecord(id='2-7'),
        ]

        # When
        seats = await self.use_case.execute()

        # Then: row-major order with derived fields
        assert [seat.id for seat in seats] == ['2-7', '4-3', '10-1']
        assert [seat.booked for seat in seats] == [False, True, False]
        assert [seat.price for seat in seats] == [130, 380, 130]
        assert seats[1].category == SeatCategory.EXIT
        assert not any(seat.selected for seat in seats)

    @pytest.mark.asyncio
    async def test_unreachable_store_gives_empty_seat_set(self):
        self.seat_state_handler.fetch_all_seats.side_effect = ConnectionError('store down')

        seats = await self.use_case.execute()

        assert seats == []

    @pytest.mark.asyncio
    async def test_unparseable_and_out_of_layout_records_are_skipped(self):
        self.seat_state_handler.fetch_all_seats.return_value = [
            SeatRecord(id='garbage', booked=False),
            SeatRecord(id='13-4', booked=False),
            SeatRecord(id='1-1', booked=False),
        ]

        seats = await self.use_case.execute()

        assert [seat.id for seat in seats] == ['1-1']
