import functools
import logging
from typing import Awaitable, Callable, TypeVar

from ..errors import WalletException, translate_error

logger = logging.getLogger(__name__)

R = TypeVar("R")


def translate_errors(
    func: Callable[..., Awaitable[R]],
) -> Callable[..., Awaitable[R]]:
    """
    Decorator converting transport exceptions raised by an RPC coroutine
    into WalletException subclasses. The original exception is chained.
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs) -> R:
        try:
            return await func(*args, **kwargs)
        except WalletException:
            raise
        except Exception as e:
            translated = translate_error(e)
            logger.error(
                "%s failed: %s (%s)", func.__name__, translated.message, translated.code
            )
            raise translated from e

    return wrapper
