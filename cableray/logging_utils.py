from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Sequence, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 120
_repr.maxlist = 8
_repr.maxtuple = 8
_repr.maxdict = 8


def summarize(value: Any, *, max_items: int = 6, max_length: int = 300) -> str:
    """Return a bounded, log-friendly rendering of ``value``.

    Arrays are reduced to shape, dtype and range; the count of non-finite
    entries is reported because degenerate samples show up as NaN/Inf.
    """

    if isinstance(value, np.ndarray):
        parts = [f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"]
        if value.size == 0:
            return parts[0]
        if value.size <= max_items:
            parts.append(f"values={_repr.repr(value.tolist())}")
            return ", ".join(parts)
        if np.issubdtype(value.dtype, np.number):
            finite = np.isfinite(value)
            if finite.any():
                parts.append(f"min={float(np.min(value[finite])):.6g}")
                parts.append(f"max={float(np.max(value[finite])):.6g}")
            if not finite.all():
                parts.append(f"non_finite={int(value.size - finite.sum())}")
        return ", ".join(parts)

    if isinstance(value, (list, tuple)):
        open_br, close_br = ("(", ")") if isinstance(value, tuple) else ("[", "]")
        items = [summarize(item) for item in value[:max_items]]
        if len(value) > max_items:
            items.append(f"... (+{len(value) - max_items})")
        return f"{open_br}{', '.join(items)}{close_br}"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(summarize(arg) for arg in args) + "]")
    if kwargs:
        parts.append("kwargs={" + ", ".join(f"{k}={summarize(v)}" for k, v in kwargs.items()) + "}")
    return ", ".join(parts) if parts else "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator that traces calls of the wrapped callable at DEBUG level."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func

        qualname = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                logger.exception("Exception in %s", qualname)
                raise
            if log_result:
                logger.debug("Exiting %s -> %s", qualname, summarize(result))
            else:
                logger.debug("Exiting %s", qualname)
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def _wrap_class(cls: type, logger: logging.Logger, skip: Set[str]) -> None:
    for attr_name, attr_value in list(cls.__dict__.items()):
        if attr_name.startswith("__") and attr_name.endswith("__"):
            continue
        qualified = f"{cls.__name__}.{attr_name}"
        if attr_name in skip or qualified in skip:
            continue
        if isinstance(attr_value, staticmethod):
            wrapped = debug_log_call(logger, name=qualified)(attr_value.__func__)
            setattr(cls, attr_name, staticmethod(wrapped))
        elif isinstance(attr_value, classmethod):
            wrapped = debug_log_call(logger, name=qualified)(attr_value.__func__)
            setattr(cls, attr_name, classmethod(wrapped))
        elif inspect.isfunction(attr_value) and attr_value.__module__ == cls.__module__:
            setattr(cls, attr_name, debug_log_call(logger, name=qualified)(attr_value))


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Wrap the functions and classes defined in ``namespace`` with DEBUG tracing."""

    module_name = namespace.get("__name__")
    if not isinstance(module_name, str):
        module_name = __name__
    logger = logger or logging.getLogger(module_name)
    skip_set: Set[str] = set(skip or [])

    for name, value in list(namespace.items()):
        if name in skip_set or name.startswith("__"):
            continue
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)
        elif inspect.isclass(value) and value.__module__ == module_name:
            _wrap_class(value, logger, skip_set)


__all__ = ["apply_debug_logging", "debug_log_call", "summarize"]
