"""
Production FastAPI Application

Run with: granian --interface asgi src.main:app
"""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from src.platform.app_factory import create_app
from src.platform.config.di import container
from src.platform.config.wire_modules import WIRE_MODULES
from src.platform.logging.loguru_io import Logger
from src.platform.state.kvrocks_client import kvrocks_client
from src.service.seat_booking.app.command.initialize_seat_inventory_use_case import (
    InitializeSeatInventoryUseCase,
)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan: startup and shutdown."""
    Logger.base.info('🚀 [Seat Booking] Starting up...')
    settings = container.config_service()

    container.wire(modules=WIRE_MODULES)
    Logger.base.info('🔌 [Seat Booking] Dependency injection wired')

    use_kvrocks = settings.SEAT_STORE_BACKEND == 'kvrocks'
    if use_kvrocks:
        # Fail fast when the store is unreachable
        await kvrocks_client.initialize()
        Logger.base.info('📡 [Seat Booking] Kvrocks initialized')
    else:
        Logger.base.warning('🧪 [Seat Booking] Using in-memory seat store (single process only)')

    if settings.SEED_SEATS_ON_STARTUP:
        created = await InitializeSeatInventoryUseCase(
            seat_state_handler=container.seat_state_command_handler(),
            layout=container.coach_layout(),
        ).execute()
        Logger.base.info(f'🌱 [Seat Booking] Seeded {created} seat records')

    Logger.base.info('✅ [Seat Booking] Ready to serve requests')

    yield

    Logger.base.info('🛑 [Seat Booking] Shutting down...')

    if use_kvrocks:
        await kvrocks_client.disconnect()
        Logger.base.info('📡 [Seat Booking] Kvrocks disconnected')

    container.unwire()

    Logger.base.info('👋 [Seat Booking] Shutdown complete')


app = create_app(lifespan=lifespan)


@app.get('/')
async def root() -> RedirectResponse:
    """Root endpoint - redirect to docs."""
    return RedirectResponse(url='/docs')
