from contextvars import ContextVar
from datetime import datetime
from enum import StrEnum
import logging
import os
import re
import sys
from typing import TYPE_CHECKING, Any
import zoneinfo

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR as DEFAULT_LOG_DIR
from src.platform.logging.service_context import get_service_context


# Tests redirect log files with TEST_LOG_DIR
LOG_DIR = os.environ.get('TEST_LOG_DIR', str(DEFAULT_LOG_DIR))

# Argument names whose values never reach the log (passenger contact data)
SENSITIVE_KEYWORDS = {
    'password',
    'email',
}

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


def _default_extra() -> dict[str, Any]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


# granian access log: '127.0.0.1 - "POST /api/booking HTTP/1.1" - 409 - 3ms'
_ACCESS_LOG_STATUS = re.compile(r'" - (\d{3}) - ')
_STATUS_LEVELS = ((500, 'CRITICAL'), (400, 'ERROR'), (300, 'WARNING'), (200, 'SUCCESS'))


def access_log_level(message: str) -> str | None:
    """Level for a granian access log line by status code, None for other messages"""
    match = _ACCESS_LOG_STATUS.search(message)
    if match is None:
        return None
    status_code = int(match.group(1))
    for lower_bound, level in _STATUS_LEVELS:
        if status_code >= lower_bound:
            return level
    return 'INFO'


class InterceptHandler(logging.Handler):
    """Route stdlib logging (granian, uvicorn, redis) into loguru"""

    def __init__(self) -> None:
        super().__init__()
        self._logger: 'LoguruLogger' = loguru_logger.bind(**_default_extra())

    def emit(self, record: logging.LogRecord) -> None:
        message = record.getMessage()
        if record.levelno <= logging.DEBUG and 'Using selector:' in message:
            return

        level: str | int | None = access_log_level(message)
        if level is None:
            try:
                level = loguru_logger.level(record.levelname).name
            except ValueError:
                level = record.levelno

        frame, depth = logging.currentframe(), 2
        while frame and frame.f_code.co_filename == logging.__file__:
            frame = frame.f_back  # type: ignore
            depth += 1

        self._logger.opt(depth=depth, exception=record.exc_info).log(level, message)


io_log_format = ' | '.join(
    (
        f'<c>{{extra[{ExtraField.SERVICE_CONTEXT}]}}</>',
        '<lvl>{level:<8}</>',
        f'<c>{{file}}::{{function}}:{{line}}</>=><y>{{extra[{ExtraField.CALL_TARGET}]}}</>',
        '{message}',
        '<lk>{elapsed}</>',
        f'<lk>{{extra[{ExtraField.CHAIN_START_TIME}]:<18}}</>',
    )
)


def _log_file_path() -> str:
    hour = datetime.now(zoneinfo.ZoneInfo(settings.LOG_TIMEZONE)).strftime('%Y-%m-%d_%H')
    prefix = 'test_' if os.environ.get('TEST_LOG_DIR') else ''
    return f'{LOG_DIR}/{prefix}{hour}.log'


def _configure() -> 'LoguruLogger':
    loguru_logger.remove()
    bound = loguru_logger.bind(**_default_extra())
    level = 'DEBUG' if settings.DEBUG else 'INFO'

    bound.add(sys.stdout, format=io_log_format, level=level, enqueue=True)

    # Production ships stdout only
    if settings.DEBUG:
        bound.add(
            _log_file_path(),
            format=io_log_format,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            enqueue=True,
            level=level,
        )

    logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
    return bound


custom_logger = _configure()
