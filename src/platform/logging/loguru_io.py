from collections.abc import Awaitable
from functools import wraps
from inspect import iscoroutinefunction
import types
from typing import TYPE_CHECKING, Any, Callable, ParamSpec, TypeVar, cast, overload


if TYPE_CHECKING:
    from loguru import Logger as LoguruLogger

from src.platform.config.core_setting import settings
from src.platform.exception.exceptions import CustomBaseError
from src.platform.logging.loguru_io_config import (
    ExtraField,
    call_depth_var,
    custom_logger,
)
from src.platform.logging.loguru_io_utils import (
    build_call_target_func_path,
    get_chain_start_time,
    mask_sensitive,
    normalize_args_kwargs,
    reset_call_depth,
    should_mask_keyword,
    truncate_content,
)

_F = TypeVar('_F', bound=Callable[..., Any])


class LoguruIO:
    """
    Decorator logging the input and output of a call.

    Arguments and return values are logged at DEBUG (only when settings.DEBUG),
    with sensitive keywords masked. Exceptions are logged once, at the
    innermost decorated frame; CustomBaseError is logged without traceback.
    """

    def __init__(
        self, custom_logger: 'LoguruLogger', *, reraise: bool = True, truncate_content: bool = False
    ) -> None:
        self._custom_logger = custom_logger
        self.reraise = reraise
        self.truncate_content = truncate_content
        self.extra: dict[str, Any] = {}
        self.depth = 2  # wrapper -> log helper

    def _bound(self) -> 'LoguruLogger':
        return self._custom_logger.bind(**self.extra).opt(depth=self.depth)

    def _on_enter(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> None:
        call_depth_var.set(call_depth_var.get() + 1)
        self.extra[ExtraField.CHAIN_START_TIME] = get_chain_start_time()
        if settings.DEBUG:
            self._bound().debug(f'args: {self.mask(args)}, kwargs: {self.mask(kwargs)}')

    def _on_return(self, return_value: Any) -> None:
        if settings.DEBUG:
            self._bound().debug(f'return: {self.mask(return_value)}')

    def _on_error(self, e: Exception) -> None:
        if getattr(e, '_has_logged', False):
            return
        e._has_logged = True  # type: ignore[attr-defined]
        if isinstance(e, CustomBaseError):
            self._bound().error(f'{type(e).__name__}({e.status_code}): {e.message}')
        else:
            self._bound().exception(f'{type(e).__name__}: {e}')

    def mask(self, data: Any) -> Any:
        if isinstance(data, dict):
            masked: Any = {key: self.mask(should_mask_keyword(key, value)) for key, value in data.items()}
        elif isinstance(data, list | tuple):
            masked = type(data)(self.mask(item) for item in data)
        else:
            masked = mask_sensitive(data)
        return truncate_content(masked) if self.truncate_content else masked

    def _hide_from_traceback(self, func: Callable[..., Any]) -> Callable[..., Any]:
        func.__code__ = func.__code__.replace(  # type: ignore[attr-defined]
            co_filename=cast(types.FunctionType, self._custom_logger.catch).__code__.co_filename
        )
        return func

    def __call__(self, func: _F) -> _F:
        self.extra[ExtraField.CALL_TARGET] = build_call_target_func_path(func)

        if iscoroutinefunction(func):

            @wraps(func)
            async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
                try:
                    self._on_enter(args, kwargs)
                    args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                    return_value = await cast(Awaitable[Any], func(*args, **kwargs))
                    self._on_return(return_value)
                    return return_value
                except Exception as e:
                    self._on_error(e)
                    if self.reraise:
                        raise
                    return None
                finally:
                    reset_call_depth()

            return cast(_F, self._hide_from_traceback(async_wrapper))

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            try:
                self._on_enter(args, kwargs)
                args, kwargs = normalize_args_kwargs(func, *args, **kwargs)
                return_value = func(*args, **kwargs)
                self._on_return(return_value)
                return return_value
            except Exception as e:
                self._on_error(e)
                if self.reraise:
                    raise
                return None
            finally:
                reset_call_depth()

        return cast(_F, self._hide_from_traceback(sync_wrapper))


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
        func: Callable[_P, _T] | None = None, *, reraise: bool = True, truncate_content: bool = False
    ) -> Callable[_P, _T] | LoguruIO:
        decorator = LoguruIO(
            custom_logger=custom_logger, reraise=reraise, truncate_content=truncate_content
        )
        return decorator(func) if func else decorator
