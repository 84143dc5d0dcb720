"""Timer based futures running on an asyncio event loop."""

from .futures import Future
from .schedulers import AsyncioScheduler
import asyncio


def sleep(delay, value=None, *, loop=None):
    """Returns future which is accepted with value after delay seconds."""
    loop = loop or asyncio.get_running_loop()

    def start(resolver):
        loop.call_later(delay, resolver.accept, value)

    return Future(start, scheduler=AsyncioScheduler(loop))


def timeout_after(future, delay, *, loop=None):
    """Returns future settled like the provided one, or rejected with
    TimeoutError if it does not settle within delay seconds.

    The original future is left untouched when the timeout expires.
    """
    loop = loop or asyncio.get_running_loop()

    def start(resolver):
        def expire():
            if not resolver.is_resolved:
                resolver.timeout()

        handle = loop.call_later(delay, expire)

        def on_accept(value):
            handle.cancel()
            if not resolver.is_resolved:
                resolver.accept(value)

        def on_reject(error):
            handle.cancel()
            if not resolver.is_resolved:
                resolver.reject(error)

        future.then(on_accept, on_reject)

    return Future(start, scheduler=AsyncioScheduler(loop))
