from .future_callbacks import FutureCallbacks
from .future_extensions import FutureExtensions
from .events import FutureEventTarget
from .resolver import Resolver, _TOKEN
from ..config import Default


class Future(FutureEventTarget, FutureExtensions, FutureCallbacks):
    """Single-resolution, read-only handle to an eventual value or error.

    The initializer is called synchronously, before the constructor
    returns, with the Resolver of the new future::

        def get_position(resolver):
            service.request(on_fix=resolver.accept, on_error=resolver.reject)

        f = Future(get_position)
        f.then(show_position).done(None, show_error)

    If the initializer raises before resolving the future, the future is
    rejected with the raised exception.

    Callbacks and listeners are delivered by the scheduler, or by
    ``Default.get_callback_scheduler()`` when none is given. The default
    ``Deferred`` scheduler only delivers when the host calls
    ``Deferred.run()``.
    """

    def __init__(self, initializer, *, scheduler=None):
        FutureCallbacks.__init__(self, scheduler)
        resolver = Resolver(self, _TOKEN)
        try:
            initializer(resolver)
        except Exception as ex:
            if resolver.is_resolved:
                Default.on_unhandled_error(ex)
            else:
                resolver.reject(ex)

    #override
    def _new(self):
        resolvers = []
        f = type(self)(resolvers.append, scheduler=self._scheduler)
        return f, resolvers[0]
