"""
Wire Modules Configuration

Defines the modules that need dependency injection wiring.
Shared between production and test environments.
"""

from types import ModuleType

from src.service.seat_booking.app.command import (
    commit_booking_use_case,
    toggle_seat_selection_use_case,
)
from src.service.seat_booking.app.query import get_seating_chart_use_case, load_seats_use_case


WIRE_MODULES: list[ModuleType] = [
    load_seats_use_case,
    get_seating_chart_use_case,
    toggle_seat_selection_use_case,
    commit_booking_use_case,
]
