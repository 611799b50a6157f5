from contextvars import ContextVar
from datetime import datetime, timezone
from enum import StrEnum
from functools import cache
import logging
import os
import re
import sys
from typing import TYPE_CHECKING, Any, Dict, Optional

from loguru import logger as loguru_logger


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.constant.path import LOG_DIR
from src.platform.logging.service_context import get_service_context


LOG_DIR = os.environ.get('TEST_LOG_DIR', LOG_DIR)

SENSITIVE_KEYWORDS = {'password', 'secret', 'token'}
MAX_CONTENT_LENGTH = 1000

chain_start_time_var: ContextVar[float] = ContextVar('chain_start_time_var', default=0)
call_depth_var: ContextVar[int] = ContextVar('call_depth_var', default=0)


class ExtraField(StrEnum):
    SERVICE_CONTEXT = 'service_context'
    CHAIN_START_TIME = 'chain_start_time'
    CALL_TARGET = 'call_target'


class GeneratorMethod(StrEnum):
    NEXT = 'next'
    SEND = 'send'
    THROW = 'throw'


# '127.0.0.1 - "PUT /api/seat-diagrams/1/seat-configuration HTTP/1.1" - 200 - 8ms'
_ACCESS_LOG_STATUS = re.compile(r'^\S+ - "[A-Z]+ \S+ HTTP/[\d.]+" - (\d{3}) - ')

_STATUS_LEVELS = (
    (500, 'CRITICAL'),
    (400, 'ERROR'),
    (300, 'WARNING'),
    (200, 'SUCCESS'),
)


def access_log_level(message: str) -> Optional[str]:
    """Level for a granian access log line, None for any other message"""
    match = _ACCESS_LOG_STATUS.match(message)
    if match is None:
        return None
    status_code = int(match.group(1))
    return next((level for floor, level in _STATUS_LEVELS if status_code >= floor), 'INFO')


def default_extra() -> Dict[str, Any]:
    return {
        ExtraField.SERVICE_CONTEXT: get_service_context(),
        ExtraField.CHAIN_START_TIME: '',
        ExtraField.CALL_TARGET: '',
    }


@cache
def _intercept_logger() -> 'LoguruLogger':
    return loguru_logger.bind(**default_extra())


def _is_noise(record: logging.LogRecord) -> bool:
    if record.levelno <= logging.DEBUG and 'Using selector:' in record.getMessage():
        return True
    # statement echo from the engine
    return record.name.startswith('sqlalchemy') and record.levelno <= logging.INFO


class InterceptHandler(logging.Handler):
    """Route standard logging records (granian, sqlalchemy, asyncio) into loguru"""

    def emit(self, record: logging.LogRecord) -> None:
        if _is_noise(record):
            return

        message = record.getMessage()
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

        _intercept_logger().opt(depth=depth, exception=record.exc_info).log(level, message)


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


def _log_file_path(log_dir: str, *, under_test: bool) -> str:
    stamp = datetime.now(timezone.utc).strftime('%Y-%m-%d_%H')
    prefix = 'test_' if under_test else ''
    return f'{log_dir}/{prefix}{stamp}.log'


def configure_sinks(target: 'LoguruLogger', *, debug: bool, log_dir: str) -> None:
    """Console always; an hourly rotated file only while debugging"""
    level = 'DEBUG' if debug else 'INFO'
    target.add(sys.stdout, format=io_log_format, level=level, enqueue=True)
    if debug:
        target.add(
            _log_file_path(log_dir, under_test='TEST_LOG_DIR' in os.environ),
            format=io_log_format,
            rotation='1 hour',
            retention='7 days',
            compression='gz',
            enqueue=True,
            level=level,
        )


loguru_logger.remove()
custom_logger = loguru_logger.bind(**default_extra())
configure_sinks(custom_logger, debug=settings.DEBUG, log_dir=LOG_DIR)

logging.basicConfig(handlers=[InterceptHandler()], level=0, force=True)
