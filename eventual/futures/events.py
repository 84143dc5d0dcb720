from .future_core import ACCEPTED, REJECTED
from .exceptions import InvalidStateError
from ..config import Default


# Event types.
ACCEPT = 'accept'
REJECT = 'reject'

_EVENT_STATES = {ACCEPT: ACCEPTED, REJECT: REJECTED}


class FutureEvent(object):
    """Notification about future resolution.

    Carries ``value`` for 'accept' events and ``error`` for 'reject' events.
    Future events do not bubble and can not be cancelled.
    """
    bubbles = False
    cancelable = False

    def __init__(self, type, target, value=None, error=None):
        self.type = type
        self.target = target
        self.value = value
        self.error = error

    def __repr__(self):
        if self.type == REJECT:
            return '{}<{}, error={!r}>'.format(self.__class__.__name__, self.type, self.error)
        return '{}<{}, value={!r}>'.format(self.__class__.__name__, self.type, self.value)


def _check_event_type(event_type):
    if event_type not in _EVENT_STATES:
        raise ValueError("Unsupported future event type: {!r}".format(event_type))


class FutureEventTarget(object):
    """Mixin class for event style observation of a future.

    Listeners share the observer queue with then() callbacks and are
    notified after them, in registration order.
    """

    def add_event_listener(self, event_type, listener):
        """Add a listener to be notified when the future is resolved.

        The listener is called with a single FutureEvent argument. If the
        future is already resolved when this is called, the listener is
        scheduled for the next delivery pass.
        """
        _check_event_type(event_type)
        assert callable(listener), "Future.add_event_listener expects callable"
        entry = (event_type, listener)
        if entry not in self._listeners:
            self._enqueue(self._listeners, entry)

    def remove_event_listener(self, event_type, listener):
        """Remove listener which was not notified yet.

        Returns the number of listeners removed.
        """
        filtered_listeners = [(t, l) for t, l in self._listeners
                              if t != event_type or l != listener]
        removed_count = len(self._listeners) - len(filtered_listeners)
        if removed_count:
            self._listeners[:] = filtered_listeners
        return removed_count

    def dispatch_event(self, event):
        """Resolution events are dispatched only by the future itself.

        Raises:
            InvalidStateError: for 'accept' and 'reject' events, future state
            can not be changed from outside.
            ValueError: for any other event type.
        """
        _check_event_type(event.type)
        raise InvalidStateError("'{}' event can not be dispatched, future state "
                                "is not externally mutable".format(event.type))

    #override
    def _fire_listener(self, event_type, listener):
        if self._state != _EVENT_STATES[event_type]:
            return

        if event_type == REJECT:
            self._error_handled()
            event = FutureEvent(event_type, self, error=self._error)
        else:
            event = FutureEvent(event_type, self, value=self._value)

        try:
            listener(event)
        except Exception as ex:
            Default.on_unhandled_error(ex)
