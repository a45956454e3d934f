"""Asynchronous operation utilities"""

import asyncio
import functools
from typing import Any, Callable, Coroutine, TypeVar

T = TypeVar('T')


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """
    Run async coroutine in sync context

    Args:
        coro: Coroutine to run

    Returns:
        Coroutine result
    """
    loop = None
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        # No running loop
        pass

    if loop and loop.is_running():
        # Already in async context, run on a fresh loop in another thread
        import threading

        result = None
        exception = None

        def run_in_thread():
            nonlocal result, exception
            try:
                result = asyncio.run(coro)
            except BaseException as e:
                exception = e

        thread = threading.Thread(target=run_in_thread)
        thread.start()
        thread.join()

        if exception:
            raise exception
        return result
    else:
        return asyncio.run(coro)


def sync_to_async(func: Callable[..., T]) -> Callable[..., Coroutine[Any, Any, T]]:
    """
    Decorator to convert sync function to async

    The wrapped function runs in the default executor so blocking I/O
    does not stall the event loop.

    Args:
        func: Sync function

    Returns:
        Async wrapper function
    """

    @functools.wraps(func)
    async def wrapper(*args, **kwargs):
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(
            None, functools.partial(func, *args, **kwargs)
        )

    return wrapper
