"""Span decorator and helpers for search tracing.

traced() records the scalar fields of query objects passed to the wrapped
call (org_id, page, sort, ...) but never titles, tags or permission
scopes. Failures mark the span as error and carry the domain error code
when there is one.
"""

import asyncio
from collections.abc import Callable
from dataclasses import fields, is_dataclass
from functools import wraps
from typing import Any, TypeVar

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

T = TypeVar("T")

# Attribute names that may be copied onto spans (case-insensitive).
_SAFE_SPAN_ATTR_KEYS = frozenset({
    "id", "uid", "limit", "page", "type", "sort", "org_id", "user_id",
    "permission", "is_starred", "query_type",
})
# Collections recorded by size only.
_COUNTED_SPAN_ATTR_KEYS = frozenset({"dashboard_ids", "dashboard_uids", "folder_ids", "tags"})


def _span_value(value: Any) -> str | int | float | bool | None:
    if isinstance(value, (bool, int, float, str)):
        return value
    name = getattr(value, "name", None)
    if isinstance(name, str):
        return name
    if value is None:
        return None
    return str(value)


def _record_attrs(span: trace.Span, prefix: str, values: dict[str, Any]) -> None:
    for key, value in values.items():
        lowered = key.lower()
        if lowered in _COUNTED_SPAN_ATTR_KEYS:
            span.set_attribute(f"{prefix}{key}.count", len(value or ()))
        elif lowered in _SAFE_SPAN_ATTR_KEYS:
            attr = _span_value(value)
            if attr is not None:
                span.set_attribute(f"{prefix}{key}", attr)


def _record_call(span: trace.Span, args: tuple, kwargs: dict[str, Any]) -> None:
    """Record safe kwargs and the safe fields of dataclass arguments."""
    _record_attrs(span, "arg.", {k: v for k, v in kwargs.items() if not k.startswith("_")})
    for value in (*args, *kwargs.values()):
        if is_dataclass(value) and not isinstance(value, type):
            prefix = f"{type(value).__name__}."
            _record_attrs(span, prefix, {f.name: getattr(value, f.name) for f in fields(value)})


def _record_error(span: trace.Span, exc: Exception) -> None:
    span.set_status(Status(StatusCode.ERROR, str(exc)))
    span.record_exception(exc)
    error_code = getattr(exc, "error_code", None)
    if isinstance(error_code, str):
        span.set_attribute("error.code", error_code)


def traced(
    operation_name: str | None = None,
    attributes: dict | None = None,
) -> Callable:
    """Decorator to run a function (sync or async) inside a span.

    Args:
        operation_name: Span name (defaults to module.funcname).
        attributes: Optional static attributes set on every span.

    Returns:
        Decorated function.
    """

    def decorator(func: Callable) -> Callable:
        tracer = trace.get_tracer(__name__)
        span_name = operation_name or f"{func.__module__}.{func.__name__}"

        def start(span: trace.Span, args: tuple, kwargs: dict[str, Any]) -> None:
            for key, value in (attributes or {}).items():
                span.set_attribute(key, value)
            if span.is_recording():
                _record_call(span, args, kwargs)

        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            with tracer.start_as_current_span(span_name, record_exception=False) as span:
                start(span, args, kwargs)
                try:
                    result = await func(*args, **kwargs)
                except Exception as e:
                    _record_error(span, e)
                    raise
                span.set_status(Status(StatusCode.OK))
                return result

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> T:
            with tracer.start_as_current_span(span_name, record_exception=False) as span:
                start(span, args, kwargs)
                try:
                    result = func(*args, **kwargs)
                except Exception as e:
                    _record_error(span, e)
                    raise
                span.set_status(Status(StatusCode.OK))
                return result

        if asyncio.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Add attributes to the current span."""
    span = trace.get_current_span()
    if span and span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)


def add_span_event(name: str, attributes: dict | None = None) -> None:
    """Add an event to the current span."""
    span = trace.get_current_span()
    if span and span.is_recording():
        span.add_event(name, attributes=attributes or {})
