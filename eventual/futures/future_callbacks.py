from .future_base import is_future
from .future_core import FutureCore, PENDING, ACCEPTED, REJECTED
from ..config import Default


# Outcomes of a then() callback.
_RETURNED = 'RETURNED'
_RAISED = 'RAISED'
_NESTED = 'NESTED'


class FutureCallbacks(FutureCore):
    """Implements Future observer queue, delivery and chaining."""

    def __init__(self, scheduler=None):
        """Initialize the future.

        The optional scheduler argument allows to explicitly set the
        scheduler used by the future for delivering callbacks.
        If it's not provided, the future uses the default scheduler.
        """
        FutureCore.__init__(self)
        self._listeners = []
        self._drain_scheduled = False
        self._scheduler = scheduler or Default.get_callback_scheduler()

    def then(self, onaccept=None, onreject=None):
        """Returns future derived from the outcome of provided callbacks.

        Callback matching the disposition of this future is called with its
        value or error once it is resolved, never synchronously. If it is
        missing the disposition is forwarded to the derived future unchanged.
        Derived future is rejected if the callback raises, merged with the
        returned future if it returns one, and accepted with the returned
        value otherwise.

        Args:
            onaccept: function that accepts the value of this future.
            onreject: function that accepts the error of this future.
        """
        assert callable(onaccept) or onaccept is None, "Future.then expects callable or None"
        assert callable(onreject) or onreject is None, "Future.then expects callable or None"

        f, resolver = self._new()
        self._enqueue(self._callbacks, (onaccept, onreject, resolver))
        return f

    def done(self, onaccept=None, onreject=None):
        """Same as then() but terminates the chain.

        Rejections which are not observed by onreject, including exceptions
        raised by the callbacks, are reported to
        ``Default.UNHANDLED_REJECTION_CALLBACK``.
        """
        assert callable(onaccept) or onaccept is None, "Future.done expects callable or None"
        assert callable(onreject) or onreject is None, "Future.done expects callable or None"

        self._enqueue(self._callbacks, (onaccept, onreject, None))

    #virtual
    def _new(self):
        raise NotImplementedError()

    def _enqueue(self, queue, entry):
        queue.append(entry)
        if self._state != PENDING:
            self._schedule_drain()

    #override
    def _on_result_set(self):
        if self._callbacks or self._listeners:
            self._schedule_drain()

    def _schedule_drain(self):
        if not self._drain_scheduled:
            self._drain_scheduled = True
            try:
                self._scheduler(self._drain)
            except Exception:
                self._drain_scheduled = False
                raise

    def _drain(self):
        # entries registered from now on get their own pass
        self._drain_scheduled = False

        callbacks, self._callbacks = self._callbacks, []
        listeners, self._listeners = self._listeners, []

        for onaccept, onreject, resolver in callbacks:
            self._run_callback(onaccept, onreject, resolver)
        for event_type, listener in listeners:
            self._fire_listener(event_type, listener)

    def _run_callback(self, onaccept, onreject, resolver):
        if self._state == ACCEPTED:
            clb, payload = onaccept, self._value
        else:
            self._error_handled()
            clb, payload = onreject, self._error

        if clb is None:
            self._forward(resolver)
            return

        try:
            result = clb(payload)
        except Exception as ex:
            _settle_derived(resolver, _RAISED, ex)
        else:
            if is_future(result):
                _settle_derived(resolver, _NESTED, result)
            else:
                _settle_derived(resolver, _RETURNED, result)

    def _forward(self, resolver):
        if resolver is not None:
            if self._state == ACCEPTED:
                resolver.accept(self._value)
            else:
                resolver.reject(self._error)
        elif self._state == REJECTED:
            Default.on_unhandled_rejection(self._error)

    #virtual
    def _fire_listener(self, event_type, listener):
        pass


def _settle_derived(resolver, outcome, payload):
    if outcome == _RAISED:
        if resolver is None:
            Default.on_unhandled_rejection(payload)
        else:
            resolver.reject(payload)
    elif outcome == _NESTED:
        if resolver is None:
            try:
                payload.then(None, Default.on_unhandled_rejection)
            except Exception as ex:
                Default.on_unhandled_rejection(ex)
        else:
            resolver.resolve(payload)
    else:
        if resolver is not None:
            resolver.accept(payload)
