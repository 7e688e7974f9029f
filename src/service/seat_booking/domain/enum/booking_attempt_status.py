"""Booking Attempt Status Enum"""

from enum import StrEnum


class BookingAttemptStatus(StrEnum):
    IDLE = 'idle'
    VALIDATING = 'validating'
    REJECTED = 'rejected'
    COMMITTING = 'committing'
    COMMITTED = 'committed'
    FAILED = 'failed'

    @property
    def is_in_progress(self) -> bool:
        return self in (BookingAttemptStatus.VALIDATING, BookingAttemptStatus.COMMITTING)
