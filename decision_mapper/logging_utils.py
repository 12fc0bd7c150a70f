from __future__ import annotations

import dataclasses
import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Mapping, MutableMapping, Optional, Sequence, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxstring = 60
_repr.maxlist = 8
_repr.maxdict = 8


def _summarize_record(value: Any) -> str:
    # Records carry nested score maps; the id and name are enough to follow a trace.
    label = getattr(value, "name", None)
    ident = getattr(value, "id", None)
    if ident is None:
        return _repr.repr(value)
    if label:
        return f"{type(value).__name__}({ident}, {label!r})"
    return f"{type(value).__name__}({ident})"


def _safe_repr(value: Any, *, max_items: int = 5, max_length: int = 300) -> str:
    if isinstance(value, np.ndarray):
        if value.size == 0:
            return f"ndarray(shape={value.shape})"
        return f"ndarray(shape={value.shape}, min={float(value.min()):.4g}, max={float(value.max()):.4g})"

    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _summarize_record(value)

    if isinstance(value, Mapping):
        items = []
        for idx, (key, item) in enumerate(value.items()):
            if idx >= max_items:
                items.append(f"... ({len(value)} total)")
                break
            items.append(f"{_safe_repr(key)}: {_safe_repr(item)}")
        return "{" + ", ".join(items) + "}"

    if isinstance(value, (list, tuple)):
        items = [_safe_repr(item) for item in value[:max_items]]
        if len(value) > max_items:
            items.append(f"... ({len(value)} total)")
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        return f"{open_br}{', '.join(items)}{close_br}"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: Mapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(_safe_repr(arg) for arg in args) + "]")
    if kwargs:
        parts.append("kwargs={" + ", ".join(f"{key}={_safe_repr(val)}" for key, val in kwargs.items()) + "}")
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(logger: logging.Logger, *, name: Optional[str] = None) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG logs on entry and exit of the wrapped call."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", func.__name__)

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            result = func(*args, **kwargs)
            if logger.isEnabledFor(logging.DEBUG):
                logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Wrap the public module-level functions of ``namespace`` with DEBUG tracing.

    Private helpers (leading underscore) are left alone. Only functions
    defined in the module itself are wrapped, so re-exported imports keep
    their original identity.
    """

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name if isinstance(module_name, str) else __name__)

    for attr, value in list(namespace.items()):
        if attr.startswith("_"):
            continue
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[attr] = debug_log_call(logger, name=attr)(value)
