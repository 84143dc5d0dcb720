from .scheduler_base import SchedulerBase
from .deferred import DeferredScheduler, Deferred
from .asyncio_loop import AsyncioScheduler, to_asyncio_future
