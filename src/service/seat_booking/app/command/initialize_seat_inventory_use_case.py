from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.interface.i_seat_state_command_handler import (
    ISeatStateCommandHandler,
)
from src.service.seat_booking.domain.value_object.coach_layout import (
    DEFAULT_COACH_LAYOUT,
    CoachLayout,
)


class InitializeSeatInventoryUseCase:
    """Seed one unbooked record per layout seat. Existing records are kept, so reruns are safe."""

    def __init__(
        self,
        *,
        seat_state_handler: ISeatStateCommandHandler,
        layout: CoachLayout = DEFAULT_COACH_LAYOUT,
    ) -> None:
        self.seat_state_handler = seat_state_handler
        self.layout = layout

    @Logger.io
    async def execute(self) -> int:
        seat_ids = self.layout.seat_ids()
        created = await self.seat_state_handler.initialize_seats(seat_ids=seat_ids)
        Logger.base.info(f'[SEAT-INIT] {created} of {len(seat_ids)} layout seats were new')
        return created
