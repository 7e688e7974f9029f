from inspect import FullArgSpec, getfile, getfullargspec, getsourcelines
from os.path import basename
from re import sub
from time import time
from typing import Any, Callable

from src.platform.logging.loguru_io_config import (
    SENSITIVE_KEYWORDS,
    call_depth_var,
    chain_start_time_var,
)


MAX_CONTENT_LENGTH = 500
MASK = '********'


def get_chain_start_time() -> float:
    if not (start_time := chain_start_time_var.get()):
        start_time = time()
        chain_start_time_var.set(start_time)
    return start_time


def build_call_target_func_path(func: Callable[..., Any]) -> str:
    try:
        lineno = getsourcelines(func)[1]
    except (OSError, TypeError):
        lineno = 0
    return f'{basename(getfile(getattr(func, "__func__", func)))}::{func.__qualname__}:{lineno}'


def reset_call_depth() -> None:
    layer = call_depth_var.get() - 1
    call_depth_var.set(layer)
    if not layer:
        chain_start_time_var.set(0)


def normalize_args_kwargs(
    func: Callable[..., Any], *args: Any, **kwargs: Any
) -> tuple[tuple[Any, ...], dict[Any, Any]]:
    if hasattr(func, '__wrapped__'):
        func = func.__wrapped__  # type: ignore
    full_arg_spec: FullArgSpec = getfullargspec(func)
    spec_args: list[str] = full_arg_spec.args

    if not full_arg_spec.varkw:
        kw_list: list[str] = spec_args + full_arg_spec.kwonlyargs
        kwargs = {k: v for k, v in kwargs.items() if k in kw_list}

    if not full_arg_spec.varargs:
        if len(args) > len(spec_args):
            args = args[: len(spec_args)]

    return args, kwargs


def mask_sensitive(data: Any) -> Any:
    """Mask ``keyword='value'`` fragments in the repr of attrs/pydantic objects."""
    try:
        data_str = str(data)
        pattern = r"(\b(?:%s))=('[^']*'|\"[^\"]*\")" % '|'.join(SENSITIVE_KEYWORDS)
        new_data_str = sub(pattern, rf"\1='{MASK}'", data_str)
        return data if data_str == new_data_str else new_data_str
    except Exception:
        return data


def should_mask_keyword(keyword: Any, value: Any) -> Any:
    return MASK if keyword in SENSITIVE_KEYWORDS else value


def truncate_content(data: Any) -> Any:
    data_str = data if isinstance(data, str) else repr(data)
    if len(data_str) <= MAX_CONTENT_LENGTH:
        return data
    return f'{data_str[:MAX_CONTENT_LENGTH]}... ({len(data_str)} chars)'
