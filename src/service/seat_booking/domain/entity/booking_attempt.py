"""
Booking Attempt

State machine for one submit of the current selection:

    IDLE -> VALIDATING -> REJECTED
                       -> COMMITTING -> COMMITTED
                                     -> FAILED

REJECTED and FAILED may be retried with a new attempt. COMMITTED is final.
"""

from typing import Dict, FrozenSet, Optional

import attrs

from src.platform.exception.exceptions import DomainError
from src.service.seat_booking.domain.enum.booking_attempt_status import BookingAttemptStatus


_ALLOWED_TRANSITIONS: Dict[BookingAttemptStatus, FrozenSet[BookingAttemptStatus]] = {
    BookingAttemptStatus.IDLE: frozenset({BookingAttemptStatus.VALIDATING}),
    BookingAttemptStatus.VALIDATING: frozenset(
        {BookingAttemptStatus.REJECTED, BookingAttemptStatus.COMMITTING}
    ),
    BookingAttemptStatus.COMMITTING: frozenset(
        {BookingAttemptStatus.COMMITTED, BookingAttemptStatus.FAILED}
    ),
    BookingAttemptStatus.REJECTED: frozenset(),
    BookingAttemptStatus.FAILED: frozenset(),
    BookingAttemptStatus.COMMITTED: frozenset(),
}


@attrs.define
class BookingAttempt:
    status: BookingAttemptStatus = BookingAttemptStatus.IDLE
    failure_reason: Optional[str] = None

    def transition_to(
        self, status: BookingAttemptStatus, *, reason: Optional[str] = None
    ) -> None:
        if status not in _ALLOWED_TRANSITIONS[self.status]:
            raise DomainError(
                f'Invalid booking attempt transition: {self.status} -> {status}', 500
            )
        self.status = status
        if reason is not None:
            self.failure_reason = reason

    @property
    def is_finished(self) -> bool:
        return not _ALLOWED_TRANSITIONS[self.status]
