#!/usr/bin/env python3
"""
Seat Seed Script
Populate the Kvrocks seat inventory with the coach layout

Notes:
- One unbooked record per seat (13 rows, 87 seats); existing records are untouched
- Key prefix follows KVROCKS_KEY_PREFIX
"""

import asyncio

from src.platform.logging.loguru_io import Logger
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.seat_booking.app.command.initialize_seat_inventory_use_case import (
    InitializeSeatInventoryUseCase,
)
from src.service.seat_booking.domain.value_object.coach_layout import DEFAULT_COACH_LAYOUT
from src.service.seat_booking.driven_adapter.state.seat_state_command_handler_impl import (
    SeatStateCommandHandlerImpl,
)


async def main() -> None:
    try:
        await kvrocks_client.initialize()
        print('📡 Kvrocks connection pool initialized')
    except Exception as e:
        print(f'❌ Failed to initialize Kvrocks: {e}')
        raise

    try:
        print(f'🪑 Seeding {DEFAULT_COACH_LAYOUT.total_seats} seats...')
        created = await InitializeSeatInventoryUseCase(
            seat_state_handler=SeatStateCommandHandlerImpl(),
            layout=DEFAULT_COACH_LAYOUT,
        ).execute()
        print(f'   ✅ Created {created} seat records')
        Logger.base.info(f'[SEED] {created} seat records created')
    finally:
        await kvrocks_client.disconnect()


if __name__ == '__main__':
    asyncio.run(main())
