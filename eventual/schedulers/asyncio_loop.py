from .scheduler_base import SchedulerBase
from ..futures.exceptions import RejectedError
import asyncio
import functools


class AsyncioScheduler(SchedulerBase):
    """Delivers future callbacks on an asyncio event loop.

    Args:
        loop: event loop to schedule on (default - the running loop at the
        time of scheduling).
        threadsafe: use call_soon_threadsafe instead of call_soon.
    """

    def __init__(self, loop=None, *, threadsafe=False):
        self._loop = loop
        self._threadsafe = threadsafe

    @property
    def loop(self):
        return self._loop or asyncio.get_running_loop()

    def __call__(self, fn, *args, **kwargs):
        if kwargs:
            fn = functools.partial(fn, **kwargs)
        if self._threadsafe:
            self.loop.call_soon_threadsafe(fn, *args)
        else:
            self.loop.call_soon(fn, *args)


def to_asyncio_future(future, *, loop=None):
    """Wrap future into asyncio.Future.

    The future should deliver its callbacks on the same loop, e.g. with
    AsyncioScheduler. Rejection payloads which are not exceptions are
    wrapped into RejectedError.
    """
    if loop is None:
        loop = asyncio.get_running_loop()
    new_future = loop.create_future()

    def on_accept(value):
        if not new_future.done():
            new_future.set_result(value)

    def on_reject(error):
        if not new_future.done():
            if not isinstance(error, BaseException):
                error = RejectedError(error)
            new_future.set_exception(error)

    future.then(on_accept, on_reject)
    return new_future
