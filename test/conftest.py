"""
Test Configuration and Fixtures

This module provides:
- Test environment (in-memory seat store, isolated Kvrocks key prefix, log dir)
- Seat fixtures built from the coach layout
- FastAPI TestClient running the full lifespan against the in-memory store

Architecture:
- Unit tests (test/**/unit/): every store port is an AsyncMock or an in-memory store
- Integration tests: HTTP surface and BDD scenarios on the in-memory store
"""

# =============================================================================
# CRITICAL: Environment setup MUST happen before any other imports
# Settings are read once at import time
# =============================================================================
import os
from pathlib import Path


def _early_setup_test_environment() -> None:
    worker_id = os.environ.get('PYTEST_XDIST_WORKER', 'master')
    os.environ['KVROCKS_KEY_PREFIX'] = 'test_' if worker_id == 'master' else f'test_{worker_id}_'

    os.environ['SEAT_STORE_BACKEND'] = 'memory'
    os.environ['SEED_SEATS_ON_STARTUP'] = 'True'

    test_log_dir = Path(__file__).parent / 'test_log'
    test_log_dir.mkdir(exist_ok=True)
    os.environ['TEST_LOG_DIR'] = str(test_log_dir)


_early_setup_test_environment()

from collections.abc import Callable, Generator, Iterable  # noqa: E402

from fastapi.testclient import TestClient  # noqa: E402
import pytest  # noqa: E402

from src.platform.config.di import cleanup, container  # noqa: E402
from src.service.seat_booking.domain.entity.seat_entity import Seat  # noqa: E402
from src.service.seat_booking.domain.value_object.coach_layout import (  # noqa: E402
    DEFAULT_COACH_LAYOUT,
)
from src.service.seat_booking.driven_adapter.memory.in_memory_seat_inventory import (  # noqa: E402
    InMemorySeatInventory,
)


# =============================================================================
# Seat Fixtures
# =============================================================================
def build_seats(*, booked: Iterable[str] = ()) -> list[Seat]:
    """Full coach layout in row-major order with the given seats booked"""
    booked_ids = set(booked)
    return [
        Seat.from_record(seat_id=seat_id, booked=seat_id in booked_ids)
        for seat_id in DEFAULT_COACH_LAYOUT.seat_ids()
    ]


@pytest.fixture
def seats_factory() -> Callable[..., list[Seat]]:
    return build_seats


@pytest.fixture
def seeded_store() -> InMemorySeatInventory:
    """In-memory store holding an unbooked record for every layout seat"""
    store = InMemorySeatInventory()
    for seat_id in DEFAULT_COACH_LAYOUT.seat_ids():
        store.put_seat_record({'id': seat_id, 'booked': False})
    return store


# =============================================================================
# HTTP Fixtures
# =============================================================================
@pytest.fixture
def client() -> Generator[TestClient, None, None]:
    """TestClient with a fresh in-memory store seeded by the app lifespan"""
    cleanup()
    from src.main import app

    with TestClient(app) as test_client:
        yield test_client
    cleanup()


@pytest.fixture
def memory_store(client: TestClient) -> InMemorySeatInventory:
    """The store instance behind the running app"""
    return container.in_memory_seat_inventory()
