from __future__ import annotations

import inspect
import logging
import reprlib
from functools import wraps
from typing import Any, Callable, Mapping, MutableMapping, Optional, Sequence, TypeVar, cast

import numpy as np

from .tree import TreeNode

F = TypeVar("F", bound=Callable[..., Any])

_repr = reprlib.Repr()
_repr.maxother = 160
_repr.maxlist = 10
_repr.maxtuple = 10


def _node_summary(node: TreeNode) -> str:
    parts = [repr(node.value)]
    if node.children:
        parts.append(f"children={len(node.children)}")
    if node.head is not None:
        parts.append(f"head={node.head!r}")
    if node.tail is not None:
        parts.append(f"tail={node.tail!r}")
    parts.append(f"at=({node.x:g}, {node.y:g})")
    return "TreeNode(" + ", ".join(parts) + ")"


def _array_summary(value: np.ndarray, max_items: int) -> str:
    parts = [f"ndarray(shape={tuple(value.shape)}, dtype={value.dtype})", f"size={int(value.size)}"]
    if 0 < value.size <= max_items:
        parts.append(f"values={_repr.repr(value.tolist())}")
    elif value.size > max_items:
        parts.append(f"min={float(value.min()):.6g}")
        parts.append(f"max={float(value.max()):.6g}")
    return ", ".join(parts)


def _truncated(items: Sequence[str], total: int, max_items: int) -> str:
    shown = list(items[:max_items])
    if total > max_items:
        shown.append("...")
    return ", ".join(shown)


def _safe_repr(value: Any, *, max_items: int = 5, max_length: int = 400) -> str:
    """Short description of a call argument or result for trace logs."""
    if isinstance(value, TreeNode):
        return _node_summary(value)
    if isinstance(value, np.ndarray):
        return _array_summary(value, max_items)
    if isinstance(value, Mapping):
        pairs = [f"{_safe_repr(k)}: {_safe_repr(v)}" for k, v in list(value.items())[:max_items]]
        return "{" + _truncated(pairs, len(value), max_items) + "}"
    if isinstance(value, (list, tuple)):
        items = [_safe_repr(item) for item in value[:max_items]]
        body = _truncated(items, len(value), max_items)
        return f"({body})" if isinstance(value, tuple) else f"[{body}]"

    rendered = _repr.repr(value)
    if len(rendered) > max_length:
        return rendered[:max_length] + "... (truncated)"
    return rendered


def _format_arguments(args: Sequence[Any], kwargs: MutableMapping[str, Any]) -> str:
    parts = []
    if args:
        parts.append("args=[" + ", ".join(_safe_repr(arg) for arg in args) + "]")
    if kwargs:
        parts.append("kwargs={" + ", ".join(f"{k}={_safe_repr(v)}" for k, v in kwargs.items()) + "}")
    return ", ".join(parts) or "no-args"


def debug_log_call(logger: logging.Logger, *, name: Optional[str] = None) -> Callable[[F], F]:
    """Return a decorator that emits DEBUG logs on entry and exit of a call."""

    def decorator(func: F) -> F:
        if getattr(func, "_debug_logging_wrapped", False):
            return func
        qualname = name or func.__qualname__

        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any):
            traced = logger.isEnabledFor(logging.DEBUG)
            if traced:
                logger.debug("Entering %s (%s)", qualname, _format_arguments(args, kwargs))
            try:
                result = func(*args, **kwargs)
            except Exception:
                if traced:
                    logger.exception("Exception in %s", qualname)
                raise
            if traced:
                logger.debug("Exiting %s -> %s", qualname, _safe_repr(result))
            return result

        setattr(wrapper, "_debug_logging_wrapped", True)
        return cast(F, wrapper)

    return decorator


def apply_debug_logging(namespace: MutableMapping[str, Any], *, logger: Optional[logging.Logger] = None) -> None:
    """Wrap the plain functions defined in a module namespace with DEBUG tracing."""
    module_name = namespace.get("__name__")
    logger = logger or logging.getLogger(module_name or __name__)
    for name, value in list(namespace.items()):
        if inspect.isfunction(value) and value.__module__ == module_name:
            namespace[name] = debug_log_call(logger, name=name)(value)
    logger.debug("Verbose debug logging enabled for %s", module_name)
