from prometheus_client import Counter, Histogram


class SeatBookingMetrics:
    """Booking attempt and seat commit metrics for the coach inventory."""

    def __init__(self) -> None:
        self.booking_attempts = Counter(
            'seat_booking_attempts_total',
            'Booking attempts by outcome',
            ['result'],  # committed, rejected, conflict, failed, cancelled
        )

        self.seats_booked = Counter('seats_booked_total', 'Seats marked booked by commits')

        self.commit_duration = Histogram(
            'seat_booking_commit_duration_seconds',
            'Time from re-validation to booking record append',
            buckets=[0.005, 0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.0, 5.0],
        )

    def record_attempt(self, *, result: str) -> None:
        self.booking_attempts.labels(result=result).inc()

    def record_seats_booked(self, *, count: int) -> None:
        self.seats_booked.inc(count)


# Global metrics instance
metrics = SeatBookingMetrics()
