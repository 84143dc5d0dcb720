"""Chainable, event-observable futures resolved through an exclusive resolver.

Callbacks are never invoked synchronously, they are delivered by a
scheduler. Unless a future is given one explicitly, it uses
``Default.CALLBACK_SCHEDULER``, which is the process-wide ``Deferred``
queue. The host application is responsible for draining it::

    Future(lambda r: r.accept(1)).then(print)
    Deferred.run()

Applications running an asyncio event loop can install
``AsyncioScheduler()`` as the default instead.
"""

from .futures import *
from .schedulers import (SchedulerBase,
                         DeferredScheduler,
                         Deferred,
                         AsyncioScheduler,
                         to_asyncio_future)
from .config import Default
