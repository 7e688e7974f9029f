"""
Seating Session

Client-side owner of the seat set for one user: the loaded seats, the current
selection, the requested party size, the loading flag and the last booking
attempt. Every booking attempt that wrote to the store is followed by a reload.
"""

from typing import List, Optional

from src.platform.logging.loguru_io import Logger
from src.service.seat_booking.app.command.commit_booking_use_case import CommitBookingUseCase
from src.service.seat_booking.app.query.load_seats_use_case import LoadSeatsUseCase
from src.service.seat_booking.domain.booking_exceptions import BookingInProgressError
from src.service.seat_booking.domain.entity.booking_attempt import BookingAttempt
from src.service.seat_booking.domain.entity.booking_entity import Booking
from src.service.seat_booking.domain.entity.seat_entity import Seat, total_price_of
from src.service.seat_booking.domain.enum.booking_attempt_status import BookingAttemptStatus
from src.service.seat_booking.domain.service.seat_allocator import SeatAllocator
from src.service.seat_booking.domain.service.seat_selection_controller import (
    SeatSelectionController,
)

_RELOAD_AFTER = frozenset({BookingAttemptStatus.COMMITTED, BookingAttemptStatus.FAILED})


class SeatingSession:
    def __init__(
        self,
        *,
        load_seats: LoadSeatsUseCase,
        commit_booking: CommitBookingUseCase,
        allocator: SeatAllocator,
        selection_controller: SeatSelectionController,
    ) -> None:
        self._load_seats = load_seats
        self._commit_booking = commit_booking
        self._allocator = allocator
        self._selection_controller = selection_controller

        self._seats: List[Seat] = []
        self._requested_count = 1
        self._is_loading = False
        self._attempt = BookingAttempt()
        self._last_booking: Optional[Booking] = None

    @property
    def seats(self) -> List[Seat]:
        return list(self._seats)

    @property
    def selected_seats(self) -> List[Seat]:
        return [seat for seat in self._seats if seat.selected]

    @property
    def total_price(self) -> int:
        return total_price_of(self._seats)

    @property
    def requested_count(self) -> int:
        return self._requested_count

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def attempt_status(self) -> BookingAttemptStatus:
        return self._attempt.status

    @property
    def last_booking(self) -> Optional[Booking]:
        return self._last_booking

    async def reload(self) -> None:
        """Replace the seat set with a fresh load; selection and total start empty"""
        self._seats = await self._load_seats.execute()
        self._requested_count = 1

    def set_requested_count(self, count: int) -> List[Seat]:
        self._requested_count = self._load_seats.layout.clamp_quantity(count)
        self._seats = self._allocator.allocate(seats=self._seats, quantity=self._requested_count)
        return self.selected_seats

    def toggle_seat(self, seat_id: str) -> List[Seat]:
        self._seats = self._selection_controller.toggle(seats=self._seats, seat_id=seat_id)
        return self.selected_seats

    async def submit(self, *, name: str, email: str) -> Booking:
        """
        Book the current selection.

        Raises:
            BookingInProgressError: A previous submit has not finished yet
            DomainError / SeatUnavailableError / BookingCommitError: from the committer
        """
        if self._is_loading or self._attempt.status.is_in_progress:
            raise BookingInProgressError()

        self._is_loading = True
        self._attempt = BookingAttempt()
        try:
            booking = await self._commit_booking.execute(
                selected_seats=self.selected_seats,
                name=name,
                email=email,
                attempt=self._attempt,
            )
            self._last_booking = booking
            return booking
        finally:
            self._is_loading = False
            if self._attempt.status in _RELOAD_AFTER:
                Logger.base.info(f'[SESSION] Reloading seats after {self._attempt.status} attempt')
                await self.reload()
