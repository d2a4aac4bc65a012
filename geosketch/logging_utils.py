"""Opt-in DEBUG tracing for the sketch pipeline.

Modules call ``apply_debug_logging(globals(), logger=logger)`` at import time.
Wrapped callables cost one ``isEnabledFor`` check unless DEBUG is enabled for
their logger, in which case entry, exit, elapsed time and failures are logged
with compact argument summaries (solver expressions are shown as truncated
s-expressions rather than their full pretty-printed form).
"""

from __future__ import annotations

import inspect
import logging
import reprlib
import time
from functools import wraps
from typing import Any, Callable, Iterable, Mapping, MutableMapping, Optional, Set, TypeVar, cast

import z3

from .entity import EntityId

F = TypeVar("F", bound=Callable[..., Any])

_WRAPPED_MARKER = "_geosketch_traced"
_MAX_EXPR_CHARS = 120

_short = reprlib.Repr()
_short.maxstring = 80
_short.maxother = 120
_short.maxlist = 6
_short.maxtuple = 6
_short.maxdict = 6


def _describe_expr(expr: z3.ExprRef) -> str:
    try:
        body = " ".join(expr.sexpr().split())
    except z3.Z3Exception as exc:  # pragma: no cover - context already released
        return f"<z3-expr unavailable: {exc}>"
    if len(body) > _MAX_EXPR_CHARS:
        body = body[:_MAX_EXPR_CHARS] + "..."
    return f"z3<{expr.sort()}>({body})"


def _join_limited(rendered: Iterable[str], max_items: int) -> str:
    parts = []
    for idx, text in enumerate(rendered):
        if idx >= max_items:
            parts.append("...")
            break
        parts.append(text)
    return ", ".join(parts)


def _safe_repr(value: Any, *, max_items: int = 5, max_length: int = 400) -> str:
    """Short, exception-free rendering of ``value`` for log lines."""

    if z3.is_expr(value):
        return _describe_expr(value)
    if isinstance(value, z3.ModelRef):
        return f"z3.Model(decls={len(value)})"
    if isinstance(value, z3.Solver):
        return f"z3.Solver(assertions={len(value.assertions())})"
    if isinstance(value, z3.Context):
        return "z3.Context"
    if isinstance(value, EntityId):
        return str(value)
    if isinstance(value, Mapping):
        pairs = (f"{_safe_repr(k)}: {_safe_repr(v)}" for k, v in value.items())
        return "{" + _join_limited(pairs, max_items) + "}"
    if isinstance(value, (list, tuple)):
        body = _join_limited((_safe_repr(item) for item in value), max_items)
        return f"({body})" if isinstance(value, tuple) else f"[{body}]"
    if isinstance(value, (set, frozenset)):
        return "{" + _join_limited((_safe_repr(item) for item in value), max_items) + "}"

    try:
        rendered = _short.repr(value)
    except Exception as exc:  # pragma: no cover - broken __repr__ in caller code
        rendered = f"<repr-error {exc!r}>"
    if len(rendered) > max_length:
        rendered = rendered[:max_length] + "... (truncated)"
    return rendered


def _describe_call(args: tuple, kwargs: Mapping[str, Any]) -> str:
    rendered = [_safe_repr(arg) for arg in args]
    rendered.extend(f"{key}={_safe_repr(val)}" for key, val in kwargs.items())
    return ", ".join(rendered)


def debug_log_call(
    logger: logging.Logger, *, name: Optional[str] = None, log_result: bool = True
) -> Callable[[F], F]:
    """Decorate a callable so that each call is traced at DEBUG level."""

    def decorator(func: F) -> F:
        if getattr(func, _WRAPPED_MARKER, False):
            return func
        label = name or getattr(func, "__qualname__", getattr(func, "__name__", "<callable>"))

        @wraps(func)
        def traced(*args: Any, **kwargs: Any):
            if not logger.isEnabledFor(logging.DEBUG):
                return func(*args, **kwargs)
            logger.debug("-> %s(%s)", label, _describe_call(args, kwargs))
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as exc:
                logger.debug(
                    "!! %s raised %s: %s after %.3f ms",
                    label,
                    type(exc).__name__,
                    exc,
                    (time.perf_counter() - started) * 1000.0,
                )
                raise
            elapsed = (time.perf_counter() - started) * 1000.0
            if log_result:
                logger.debug("<- %s = %s (%.3f ms)", label, _safe_repr(result), elapsed)
            else:
                logger.debug("<- %s (%.3f ms)", label, elapsed)
            return result

        setattr(traced, _WRAPPED_MARKER, True)
        return cast(F, traced)

    return decorator


def _trace_class(cls: type, logger: logging.Logger, skip: Set[str]) -> None:
    for attr, member in list(vars(cls).items()):
        label = f"{cls.__name__}.{attr}"
        if attr.startswith("_") or attr in skip or label in skip:
            continue
        if isinstance(member, (staticmethod, classmethod)):
            func = member.__func__
            if func.__module__ == cls.__module__:
                setattr(cls, attr, type(member)(debug_log_call(logger, name=label)(func)))
        elif inspect.isfunction(member) and member.__module__ == cls.__module__:
            setattr(cls, attr, debug_log_call(logger, name=label)(member))


def apply_debug_logging(
    namespace: MutableMapping[str, Any],
    *,
    logger: Optional[logging.Logger] = None,
    skip: Optional[Iterable[str]] = None,
    wrap_methods: bool = True,
) -> None:
    """Trace every public function and class method defined in ``namespace``.

    Only objects whose ``__module__`` is the namespace's own module are
    touched, so re-exported names are left alone.
    """

    module = namespace.get("__name__")
    logger = logger or logging.getLogger(module if isinstance(module, str) else __name__)
    skipped: Set[str] = set(skip or ())

    for attr, member in list(namespace.items()):
        if attr.startswith("_") or attr in skipped:
            continue
        if getattr(member, "__module__", None) != module:
            continue
        if inspect.isfunction(member):
            namespace[attr] = debug_log_call(logger, name=attr)(member)
        elif wrap_methods and inspect.isclass(member):
            _trace_class(member, logger, skipped)
