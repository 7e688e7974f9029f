"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/providers/selector.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.seat_booking.domain.service.seat_allocator import SeatAllocator
from src.service.seat_booking.domain.service.seat_selection_controller import (
    SeatSelectionController,
)
from src.service.seat_booking.domain.value_object.coach_layout import DEFAULT_COACH_LAYOUT
from src.service.seat_booking.driven_adapter.memory.in_memory_seat_inventory import (
    InMemorySeatInventory,
)
from src.service.seat_booking.driven_adapter.repo.booking_command_repo_impl import (
    BookingCommandRepoImpl,
)
from src.service.seat_booking.driven_adapter.state.seat_state_command_handler_impl import (
    SeatStateCommandHandlerImpl,
)
from src.service.seat_booking.driven_adapter.state.seat_state_query_handler_impl import (
    SeatStateQueryHandlerImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    coach_layout = providers.Object(DEFAULT_COACH_LAYOUT)

    # In-memory store serves all three ports from one instance
    in_memory_seat_inventory = providers.Singleton(InMemorySeatInventory)

    # Store adapters (CQRS), picked by SEAT_STORE_BACKEND
    seat_state_query_handler = providers.Selector(
        config_service.provided.SEAT_STORE_BACKEND,
        kvrocks=providers.Singleton(SeatStateQueryHandlerImpl),
        memory=in_memory_seat_inventory,
    )
    seat_state_command_handler = providers.Selector(
        config_service.provided.SEAT_STORE_BACKEND,
        kvrocks=providers.Singleton(SeatStateCommandHandlerImpl),
        memory=in_memory_seat_inventory,
    )
    booking_command_repo = providers.Selector(
        config_service.provided.SEAT_STORE_BACKEND,
        kvrocks=providers.Singleton(BookingCommandRepoImpl),
        memory=in_memory_seat_inventory,
    )

    # Domain services (stateless)
    seat_allocator = providers.Singleton(SeatAllocator, layout=coach_layout)
    seat_selection_controller = providers.Singleton(SeatSelectionController, layout=coach_layout)


container = Container()


def cleanup() -> None:
    container.reset_singletons()
