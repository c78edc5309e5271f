"""
Utility decorators for logging service operations.
"""

import functools
import inspect
import time
import uuid
from collections.abc import Callable
from typing import Any, TypeVar

from loguru import logger

F = TypeVar("F", bound=Callable[..., Any])


def _serialize_parameter_value(value: Any) -> Any:
    """Serialize parameter value for logging."""
    if hasattr(value, "value") and hasattr(value, "name"):
        return str(value.value)  # Handle enum values
    if isinstance(value, bool | int | float | str) or value is None:
        return value
    return type(value).__name__


def _setup_logging_context(
    func: Callable[..., Any], args: tuple[Any, ...], kwargs: dict[str, Any]
) -> dict[str, Any]:
    """Build logging context from the call arguments."""
    sig = inspect.signature(func)
    bound_args = sig.bind(*args, **kwargs)
    bound_args.apply_defaults()

    context: dict[str, Any] = {"correlation_id": str(uuid.uuid4())[:8]}
    for param_name, value in bound_args.arguments.items():
        if param_name == "self":
            continue
        context[param_name] = _serialize_parameter_value(value)
    return context


def log_operation(func: F) -> F:
    """Decorator to log async portfolio operations with correlation IDs."""

    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        context = _setup_logging_context(func, args, kwargs)
        func_name = func.__name__
        log = logger.bind(**context)

        log.debug(f"Portfolio operation started: {func_name}")
        start_time = time.perf_counter()
        try:
            result = await func(*args, **kwargs)
        except Exception as e:
            execution_time_ms = (time.perf_counter() - start_time) * 1000
            log.error(
                f"Portfolio operation failed: {func_name} "
                f"({type(e).__name__}: {e}) after {execution_time_ms:.2f} ms"
            )
            raise
        execution_time_ms = (time.perf_counter() - start_time) * 1000
        log.info(f"Portfolio operation completed: {func_name} in {execution_time_ms:.2f} ms")
        return result

    return wrapper  # type: ignore
