"""
Decorators for SDK call error handling.
"""
import copy
import functools
from typing import Any, Awaitable, Callable, TypeVar
from botocore.exceptions import BotoCoreError, ClientError
from logger_config import get_logger

logger = get_logger(__name__)

T = TypeVar('T')


def swallow_sdk_errors(
    default: Any = None
) -> Callable[[Callable[..., Awaitable[T]]], Callable[..., Awaitable[T]]]:
    """
    Decorator for async SDK calls whose failures should not fail the caller.

    SDK errors are logged with their traceback and replaced by ``default``.
    A callable default is called per failure, so ``default=list`` gives each
    failed call its own empty list. Other defaults are deep-copied per
    failure, so no two callers share a mutable result. Any other exception
    propagates.

    Args:
        default: Value (or zero-argument factory) returned on failure

    Returns:
        Decorator for an async function
    """
    def decorator(func: Callable[..., Awaitable[T]]) -> Callable[..., Awaitable[T]]:
        @functools.wraps(func)
        async def wrapper(*args: Any, **kwargs: Any) -> T:
            try:
                return await func(*args, **kwargs)
            except (ClientError, BotoCoreError) as e:
                logger.error(
                    f'{func.__name__} failed: {str(e)}',
                    extra={'operation': func.__name__},
                    exc_info=True
                )
                return default() if callable(default) else copy.deepcopy(default)

        return wrapper

    return decorator
