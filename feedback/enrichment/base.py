"""Shared enrichment utilities — fallback decorator."""

import functools
import logging
from typing import Any, Awaitable, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

Generation = Callable[[Any, int, str], Awaitable[T]]


def with_fallback(
    fallback: Callable[[int, str], T],
) -> Callable[[Generation[T]], Generation[T]]:
    """Decorator for ``(self, rating, review)`` generation methods.

    A raised exception, a timeout or an empty result is replaced by
    ``fallback(rating, review)``.
    """

    def decorator(func: Generation[T]) -> Generation[T]:
        @functools.wraps(func)
        async def wrapper(self: Any, rating: int, review: str) -> T:
            try:
                result = await func(self, rating, review)
            except TimeoutError:
                logger.warning("Enrichment call %s timed out", func.__name__)
                return fallback(rating, review)
            except Exception as e:
                logger.exception("Enrichment call %s failed: %s", func.__name__, e)
                return fallback(rating, review)
            if not result:
                logger.warning("Enrichment call %s returned nothing", func.__name__)
                return fallback(rating, review)
            return result

        return wrapper

    return decorator
