from collections.abc import Awaitable, Generator
from functools import wraps
from inspect import iscoroutinefunction, isgeneratorfunction
import types
from typing import TYPE_CHECKING, Any, Callable, Optional, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.generator_wrapper import GeneratorWrapper
from src.platform.logging.loguru_io_config import (
    ExtraField,
    GeneratorMethod,
    call_depth_var,
    custom_logger,
)
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    get_chain_start_time,
    handle_yield,
    mask_sensitive,
    normalize_args_kwargs,
    reset_call_depth,
    should_mask_keyword,
    truncate_content,
)


_F = TypeVar('_F', bound=Callable[..., Any])

# frames between a log call and the decorated function's caller
_WRAPPER_FRAMES = 2


class LoguruIO:
    """
    Decorator that logs a call's arguments and result at DEBUG and logs an
    escaping exception once, however many decorated layers it crosses.

    Works on coroutine functions, generator functions and plain callables.
    With ``reraise=False`` a failing call returns None after logging.
    """

    def __init__(
        self, custom_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = False
    ) -> None:
        self._logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self._extra: dict[str, Any] = {}

    def _bound(self, extra_frames: int = 0) -> 'LoguruLogger':
        return self._logger.bind(**self._extra).opt(depth=_WRAPPER_FRAMES + extra_frames)

    def log_args_kwargs_content(
        self, *args: Any, yield_method: Optional[GeneratorMethod] = None, **kwargs: Any
    ) -> None:
        call_depth_var.set(call_depth_var.get() + 1)
        self._extra[ExtraField.CHAIN_START_TIME] = get_chain_start_time()
        if not settings.DEBUG:
            return
        prefix = handle_yield(yield_method)
        self._bound().debug(
            f'{prefix}args: {self.mask_sensitive(args)}, kwargs: {self.mask_sensitive(kwargs)}'
        )

    def log_return_content(
        self, return_value: Any, yield_method: Optional[GeneratorMethod] = None
    ) -> None:
        if settings.DEBUG:
            prefix = handle_yield(yield_method)
            self._bound().debug(f'{prefix}return: {self.mask_sensitive(return_value)}')

    def log_exception(self, e: Exception) -> None:
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]

        message = f'{type(e).__name__}: {e}'
        bound = self._bound(extra_frames=1)
        # domain errors are expected outcomes, no traceback
        if isinstance(e, CustomBaseError):
            bound.error(message)
        else:
            bound.exception(message)

    def _absorb(self, e: Exception) -> bool:
        """Log the failure; True when the wrapper should swallow it"""
        self.log_exception(e)
        return not self.reraise

    def mask_sensitive(self, data: Any) -> Any:
        match data:
            case dict():
                masked: Any = {
                    key: self.mask_sensitive(should_mask_keyword(key, value))
                    for key, value in data.items()
                }
            case list() | tuple():
                masked = type(data)(self.mask_sensitive(item) for item in data)
            case _:
                masked = mask_sensitive(data)
        return truncate_content(masked) if self.truncate_content else masked

    def _disguise(self, wrapper: Callable[..., Any]) -> _F:
        # report wrapper frames under loguru's own file so tracebacks skip them
        loguru_file = cast(types.FunctionType, self._logger.catch).__code__.co_filename
        wrapper.__code__ = wrapper.__code__.replace(co_filename=loguru_file)  # type: ignore[attr-defined]
        return cast(_F, wrapper)

    def _wrap_coroutine(self, func: Callable[..., Awaitable[Any]]) -> _F:
        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                self.log_args_kwargs_content(*args, **kwargs)
                args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                result = await func(*args, **kwargs)
                self.log_return_content(result)
                return result
            except Exception as e:
                if not self._absorb(e):
                    raise
                return None
            finally:
                reset_call_depth()

        return self._disguise(async_wrapper)

    def _wrap_generator(self, func: Callable[..., Generator[Any, Any, Any]]) -> _F:
        @wraps(func)
        def generator_wrapper(*args: Any, **kwargs: Any) -> GeneratorWrapper | None:
            try:
                self.log_args_kwargs_content(*args, **kwargs)
                generator = func(*args, **kwargs)
                self.log_return_content(generator)
                return GeneratorWrapper(generator, self)
            except Exception as e:
                if not self._absorb(e):
                    raise
                return None
            finally:
                reset_call_depth()

        return self._disguise(generator_wrapper)

    def _wrap_plain(self, func: Callable[..., Any]) -> _F:
        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                self.log_args_kwargs_content(*args, **kwargs)
                args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                result = func(*args, **kwargs)
                self.log_return_content(result)
                return result
            except Exception as e:
                if not self._absorb(e):
                    raise
                return None
            finally:
                reset_call_depth()

        return self._disguise(sync_wrapper)

    def __call__(self, func: _F) -> _F:
        self._extra[ExtraField.CALL_TARGET] = build_call_target_func_path(func)
        if iscoroutinefunction(func):
            return self._wrap_coroutine(func)
        if isgeneratorfunction(func):
            return self._wrap_generator(func)
        return self._wrap_plain(func)


_P = ParamSpec('_P')
_T = TypeVar('_T')


class Logger:
    base = custom_logger

    @overload
    @staticmethod
    def io(func: Callable[_P, _T]) -> Callable[_P, _T]: ...

    @overload
    @staticmethod
    def io(func: None = ..., *, reraise: bool = ..., truncate_content: bool = ...) -> LoguruIO: ...

    @staticmethod
    def io(
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = True
    ) -> Callable[_P, _T] | LoguruIO:
        io_logger = LoguruIO(custom_logger, reraise=reraise, truncate_content=truncate_content)
        return io_logger(func) if func else io_logger
