import asyncio
from functools import partial
import time
from typing import Optional, Self, Sequence

import anyio
from dependency_injector.wiring import Provide, inject
from fastapi import Depends
from opentelemetry import trace

from src.platform.config.di import Container
from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.metrics.seat_booking_metrics import metrics
from src.service.seat_booking.app.interface.i_booking_command_repo import IBookingCommandRepo
from src.service.seat_booking.app.interface.i_seat_state_command_handler import (
    ISeatStateCommandHandler,
)
from src.service.seat_booking.app.interface.i_seat_state_query_handler import (
    ISeatStateQueryHandler,
)
from src.service.seat_booking.domain.booking_exceptions import (
    BookingCommitError,
    SeatUnavailableError,
)
from src.service.seat_booking.domain.entity.booking_attempt import BookingAttempt
from src.service.seat_booking.domain.entity.booking_entity import Booking
from src.service.seat_booking.domain.entity.seat_entity import Seat, total_price_of
from src.service.seat_booking.domain.enum.booking_attempt_status import BookingAttemptStatus
from src.service.seat_booking.domain.value_object.coach_layout import (
    DEFAULT_COACH_LAYOUT,
    CoachLayout,
)


class CommitBookingUseCase:
    """
    Booking Committer

    Flow:
    1. Preconditions (selection size, name and email) - no store access on failure
    2. Re-validate: ask the store which selected seats are already booked
    3. Mark every seat booked, all updates in flight together
    4. Append the booking record once every seat update succeeded

    The re-validate-then-write check is optimistic: two attempts passing step 2
    at the same time can both write. Partially written seats are not rolled back.
    Cancellation is honoured up to step 2; steps 3 and 4 always run to the end.

    Dependencies:
    - seat_state_query_handler: re-validation query
    - seat_state_command_handler: per-seat booked update
    - booking_command_repo: booking record append
    """

    def __init__(
        self,
        *,
        seat_state_query_handler: ISeatStateQueryHandler,
        seat_state_command_handler: ISeatStateCommandHandler,
        booking_command_repo: IBookingCommandRepo,
        layout: CoachLayout = DEFAULT_COACH_LAYOUT,
    ) -> None:
        self.seat_state_query_handler = seat_state_query_handler
        self.seat_state_command_handler = seat_state_command_handler
        self.booking_command_repo = booking_command_repo
        self.layout = layout
        self.tracer = trace.get_tracer(__name__)

    @classmethod
    @inject
    def depends(
        cls,
        seat_state_query_handler: ISeatStateQueryHandler = Depends(
            Provide[Container.seat_state_query_handler]
        ),
        seat_state_command_handler: ISeatStateCommandHandler = Depends(
            Provide[Container.seat_state_command_handler]
        ),
        booking_command_repo: IBookingCommandRepo = Depends(
            Provide[Container.booking_command_repo]
        ),
        layout: CoachLayout = Depends(Provide[Container.coach_layout]),
    ) -> Self:
        return cls(
            seat_state_query_handler=seat_state_query_handler,
            seat_state_command_handler=seat_state_command_handler,
            booking_command_repo=booking_command_repo,
            layout=layout,
        )

    @Logger.io
    async def execute(
        self,
        *,
        selected_seats: Sequence[Seat],
        name: str,
        email: str,
        attempt: Optional[BookingAttempt] = None,
    ) -> Booking:
        """
        Commit the selected seats as one booking.

        Args:
            selected_seats: Seats chosen by the user, in selection order
            name: Passenger name
            email: Passenger email
            attempt: State machine to drive; a fresh one when omitted

        Returns:
            The stored booking with its generated id

        Raises:
            DomainError: Precondition failed (attempt ends Rejected)
            SeatUnavailableError: Some seats are booked already (attempt ends Rejected)
            BookingCommitError: A store write failed (attempt ends Failed)
        """
        attempt = attempt if attempt is not None else BookingAttempt()
        attempt.transition_to(BookingAttemptStatus.VALIDATING)
        seat_ids = [seat.id for seat in selected_seats]

        with self.tracer.start_as_current_span(
            'use_case.commit_booking',
            attributes={'booking.seat_count': len(seat_ids)},
        ):
            try:
                booking = Booking.create(
                    seat_ids=seat_ids,
                    total_price=total_price_of(selected_seats),
                    name=name,
                    email=email,
                    max_seats=self.layout.max_seats_per_booking,
                )
            except DomainError as e:
                self._reject(attempt, reason=e.message, result='rejected')
                raise

            try:
                unavailable = await self.seat_state_query_handler.find_booked_seat_ids(
                    seat_ids=seat_ids
                )
            except asyncio.CancelledError:
                self._reject(attempt, reason='Cancelled before commit', result='cancelled')
                raise
            except Exception as e:
                self._reject(attempt, reason=str(e), result='failed')
                raise BookingCommitError(seat_ids) from e

            if unavailable:
                self._reject(
                    attempt, reason=f'Seats already booked: {", ".join(unavailable)}', result='conflict'
                )
                raise SeatUnavailableError(unavailable)

            attempt.transition_to(BookingAttemptStatus.COMMITTING)
            return await self._commit(booking=booking, attempt=attempt)

    async def _commit(self, *, booking: Booking, attempt: BookingAttempt) -> Booking:
        # Once the first write is issued the attempt runs to completion;
        # a cancel request is honoured only after it ends Committed or Failed
        write = asyncio.create_task(self._write(booking=booking, attempt=attempt))
        cancel_requested = False
        while not write.done():
            try:
                await asyncio.wait({write})
            except asyncio.CancelledError:
                if not cancel_requested:
                    Logger.base.warning(
                        f'[COMMIT] Cancel ignored while committing {", ".join(booking.seat_ids)}'
                    )
                cancel_requested = True

        stored = write.result()
        if cancel_requested:
            raise asyncio.CancelledError()
        return stored

    async def _write(self, *, booking: Booking, attempt: BookingAttempt) -> Booking:
        started = time.perf_counter()
        try:
            async with anyio.create_task_group() as tg:
                for seat_id in booking.seat_ids:
                    tg.start_soon(
                        partial(self.seat_state_command_handler.mark_seat_booked, seat_id=seat_id)
                    )
            stored = await self.booking_command_repo.append_booking(booking=booking)
        except BaseException as e:
            attempt.transition_to(BookingAttemptStatus.FAILED, reason=str(e) or type(e).__name__)
            metrics.record_attempt(result='failed')
            Logger.base.error(
                f'[COMMIT] Store write failed for {", ".join(booking.seat_ids)}: {e!r}'
            )
            if isinstance(e, Exception):
                raise BookingCommitError(booking.seat_ids) from e
            raise
        finally:
            metrics.commit_duration.observe(time.perf_counter() - started)

        attempt.transition_to(BookingAttemptStatus.COMMITTED)
        metrics.record_attempt(result='committed')
        metrics.record_seats_booked(count=len(stored.seat_ids))
        Logger.base.info(
            f'[COMMIT] Booking {stored.id} committed: {", ".join(stored.seat_ids)} '
            f'for {stored.total_price}'
        )
        return stored

    @staticmethod
    def _reject(attempt: BookingAttempt, *, reason: str, result: str) -> None:
        attempt.transition_to(BookingAttemptStatus.REJECTED, reason=reason)
        metrics.record_attempt(result=result)
        Logger.base.info(f'[COMMIT] Attempt rejected: {reason}')
