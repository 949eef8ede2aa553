"""DEBUG-level call tracing for the graph building and traversal modules."""

from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Iterable, MutableMapping, Optional, Set, TypeVar, cast

import numpy as np

F = TypeVar("F", bound=Callable[..., Any])

_MARKER = "_slotgraph_traced"

_repr = reprlib.Repr()
_repr.maxlist = 8
_repr.maxtuple = 8
_repr.maxdict = 8
_repr.maxset = 8
_repr.maxother = 120


def short_repr(value: Any, *, max_length: int = 300) -> str:
    """Bounded repr used in trace lines; character surfaces are summarised."""

    if isinstance(value, np.ndarray):
        return f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})"
    try:
        rendered = _repr.repr(value)
    except Exception as exc:  # pragma: no cover - repr of foreign objects
        rendered = f"<repr-error {exc!r}>"
    if len(rendered) > max_length:
        return rendered[:max_length] + "..."
    return rendered


def _describe_call(args: Iterable[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = [short_repr(arg) for arg in args]
    parts.extend(f"{key}={short_repr(value)}" for key, value in kwargs.items())
    return ", ".join(parts) or "no-args"


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Return a decorator logging entry, exit and failures of a callable at DEBUG."""

    def decorator(func: F) -> F:
        if getattr(func, _MARKER, False):
            return func

        label = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            tracing = logger.isEnabledFor(logging.DEBUG)
            if tracing:
                logger.debug("-> %s(%s)", label, _describe_call(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                if tracing:
                    logger.debug("!! %s raised %s: %s", label, type(exc).__name__, exc)
                raise
            if tracing:
                if log_result:
                    logger.debug("<- %s = %s", label, short_repr(result))
                else:
                    logger.debug("<- %s", label)
            return result

        setattr(wrapper, _MARKER, True)
        return cast(F, wrapper)

    return decorator


def _trace_class(cls: type, logger: logging.Logger, skip: Set[str]) -> None:
    for attr, value in list(cls.__dict__.items()):
        if attr.startswith("__") and attr.endswith("__"):
            continue
        label = f"{cls.__name__}.{attr}"
        if attr in skip or label in skip:
            continue
        if isinstance(value, (staticmethod, classmethod)):
            func = value.__func__
            if getattr(func, "__module__", None) != cls.__module__:
                continue
            setattr(cls, attr, type(value)(debug_log_call(logger, name=label)(func)))
        elif inspect.isfunction(value) and value.__module__ == cls.__module__:
            setattr(cls, attr, debug_log_call(logger, name=label)(value))


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
) -> None:
    """Trace every function and class method defined in a module's ``globals()``."""

    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name if isinstance(module_name, str) else __name__)
    skip_set: Set[str] = set(skip or ())

    for name, value in list(namespace.items()):
        if name in skip_set:
            continue
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)
        elif inspect.isclass(value) and value.__module__ == module_name:
            _trace_class(value, logger, skip_set)
