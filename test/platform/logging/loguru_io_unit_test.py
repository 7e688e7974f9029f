import pytest

from src.platform.exception.exceptions import DomainError
from src.platform.logging.loguru_io import Logger
from src.platform.logging.loguru_io_config import access_log_level
from src.platform.logging.loguru_io_utils import (
    MASK,
    MAX_CONTENT_LENGTH,
    mask_sensitive,
    normalize_args_kwargs,
    should_mask_keyword,
    truncate_content,
)
from src.service.seat_booking.domain.entity.booking_entity import Booking


pytestmark = pytest.mark.unit


class TestMasking:
    def test_email_keyword_is_masked(self):
        assert should_mask_keyword('email', 'asha@example.com') == MASK
        assert should_mask_keyword('name', 'Asha') == 'Asha'

    def test_entity_repr_is_masked(self):
        booking = Booking.create(
            seat_ids=['1-1'], total_price=130, name='Asha', email='asha@example.com'
        )

        masked = mask_sensitive(booking)

        assert 'asha@example.com' not in masked
        assert f"email='{MASK}'" in masked
        assert "name='Asha'" in masked

    def test_plain_values_pass_through(self):
        assert mask_sensitive(42) == 42

    def test_long_content_is_truncated(self):
        truncated = truncate_content('x' * (MAX_CONTENT_LENGTH + 10))

        assert truncated.endswith(f'({MAX_CONTENT_LENGTH + 10} chars)')
        assert truncate_content('short') == 'short'


class TestLoggerIO:
    def test_drops_unknown_kwargs(self):
        def target(a, *, b):
            return a, b

        args, kwargs = normalize_args_kwargs(target, 1, b=2, c=3)

        assert args == (1,)
        assert kwargs == {'b': 2}

    def test_sync_function_returns_value(self):
        @Logger.io
        def add(a: int, b: int) -> int:
            return a + b

        assert add(1, 2) == 3

    @pytest.mark.asyncio
    async def test_exception_is_reraised_once_logged(self):
        @Logger.io
        async def fail() -> None:
            raise DomainError('boom')

        with pytest.raises(DomainError) as exc_info:
            await fail()

        assert getattr(exc_info.value, '_has_logged', False) is True

    def test_reraise_false_swallows_and_returns_none(self):
        @Logger.io(reraise=False)
        def fail() -> int:
            raise ValueError('boom')

        assert fail() is None


class TestAccessLogLevel:
    @pytest.mark.parametrize(
        'status_code, level',
        [(201, 'SUCCESS'), (302, 'WARNING'), (409, 'ERROR'), (502, 'CRITICAL')],
    )
    def test_level_follows_status_code(self, status_code, level):
        message = f'127.0.0.1 - "POST /api/booking HTTP/1.1" - {status_code} - 3ms'

        assert access_log_level(message) == level

    def test_other_messages_are_ignored(self):
        assert access_log_level('[COMMIT] Booking committed') is None
