"""
Error absorption boundaries for the Scoreline data layer.

The HTTP client raises; these helpers are the only places where failures are
turned into neutral values. Each boundary logs what it swallowed.
"""

import asyncio
import logging
import functools
from typing import Any, Awaitable, Callable, Dict, Iterable, List, TypeVar

from .exceptions import ScorelineException

logger = logging.getLogger(__name__)

T = TypeVar('T')
AF = TypeVar('AF', bound=Callable[..., Awaitable[Any]])


def _describe(error: BaseException) -> str:
    if isinstance(error, ScorelineException):
        return str(error)
    return f"{type(error).__name__}: {error}"


def _error_extra(error: BaseException) -> Dict[str, Any]:
    """Structured error payload attached to log records as ``record.error``."""
    if isinstance(error, ScorelineException):
        return {"error": error.to_dict()}
    return {"error": {"error_type": type(error).__name__, "message": str(error), "recoverable": None}}


def with_fallback(fallback_factory: Callable[[], Any], log_fallback: bool = True):
    """
    Decorator that replaces any failure of an async operation with a neutral value.

    Args:
        fallback_factory: Zero-argument callable producing a fresh fallback value
        log_fallback: Whether to log fallback usage
    """
    def decorator(func: AF) -> AF:
        @functools.wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except Exception as e:
                if log_fallback:
                    operation_id = f"{func.__module__}.{func.__qualname__}"
                    logger.warning(
                        f"Operation {operation_id} failed, using fallback value: {_describe(e)}",
                        extra=_error_extra(e),
                    )
                return fallback_factory()

        return wrapper
    return decorator


async def safe_execute(
    operation: Callable[..., Awaitable[T]],
    *args,
    fallback_value: Any = None,
    log_errors: bool = True,
    **kwargs
) -> Any:
    """
    Safely execute an async operation with error handling.

    Returns:
        Operation result or fallback value
    """
    try:
        return await operation(*args, **kwargs)
    except Exception as e:
        if log_errors:
            name = getattr(operation, '__name__', repr(operation))
            logger.warning(f"Safe execute failed for {name}: {_describe(e)}", extra=_error_extra(e))
        return fallback_value


async def _settle(awaitable: Awaitable[T], fallback_factory: Callable[[], T], label: str) -> T:
    try:
        return await awaitable
    except Exception as e:
        logger.warning(
            f"Branch {label} failed, contributing fallback: {_describe(e)}", extra=_error_extra(e)
        )
        return fallback_factory()


async def gather_settled(
    awaitables: Iterable[Awaitable[T]],
    fallback_factory: Callable[[], T],
    labels: Iterable[str] = (),
) -> List[T]:
    """
    Run branches concurrently and wait for all of them to settle.

    A failing branch resolves to ``fallback_factory()``; its siblings keep
    running. Results keep the order of ``awaitables``.
    """
    awaitables = list(awaitables)
    labels = list(labels)
    labels += [f"#{i}" for i in range(len(labels), len(awaitables))]
    return await asyncio.gather(*(
        _settle(awaitable, fallback_factory, label)
        for awaitable, label in zip(awaitables, labels)
    ))
