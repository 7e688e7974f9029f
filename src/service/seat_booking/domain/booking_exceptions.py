"""Seat booking errors raised by the selection and commit flows."""

from typing import Any, Sequence

from src.platform.exception.exceptions import ConflictError, StoreUnavailableError


class SeatUnavailableError(ConflictError):
    """Re-validation found selected seats already booked by someone else."""

    def __init__(self, seat_ids: Sequence[str]) -> None:
        self.seat_ids = list(seat_ids)
        super().__init__(f'Seats already booked: {", ".join(self.seat_ids)}')

    def response_content(self) -> dict[str, Any]:
        return {'detail': self.message, 'seat_ids': self.seat_ids}


class BookingInProgressError(ConflictError):
    def __init__(self) -> None:
        super().__init__('A booking is already in progress.')


class BookingCommitError(StoreUnavailableError):
    """A seat update or the booking append failed after re-validation passed."""

    def __init__(self, seat_ids: Sequence[str]) -> None:
        self.seat_ids = list(seat_ids)
        super().__init__('Booking failed. Try again.')
