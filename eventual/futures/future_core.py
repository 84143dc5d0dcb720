from .future_base import FutureBase
from ..config import Default


# States for Future.
PENDING = 'pending'
ACCEPTED = 'accepted'
REJECTED = 'rejected'


class FutureCore(FutureBase):
    """Encapsulates Future resolution state."""
    _state = PENDING
    _value = None
    _error = None
    _log_rejection = False

    def __init__(self):
        self._callbacks = []

    def __del__(self):
        if self._log_rejection and Default is not None:
            Default.on_unhandled_rejection(self._error)

    def __repr__(self):
        res = self.__class__.__name__
        if self._state == ACCEPTED:
            res += '<value={!r}>'.format(self._value)
        elif self._state == REJECTED:
            res += '<error={!r}>'.format(self._error)
        elif self._callbacks:
            size = len(self._callbacks)
            if size > 2:
                res += '<{}, [{}, <{} more>, {}]>'.format(
                    self._state, self._callbacks[0],
                    size - 2, self._callbacks[-1])
            else:
                res += '<{}, {}>'.format(self._state, self._callbacks)
        else:
            res += '<{}>'.format(self._state)
        return res

    @property
    def state(self):
        """Return 'pending', 'accepted' or 'rejected'."""
        return self._state

    @property
    def value(self):
        """Return the value this future was accepted with.

        Returns None unless the future is accepted.
        """
        return self._value

    @property
    def error(self):
        """Return the payload this future was rejected with.

        Returns None unless the future is rejected. Reading the error counts
        as handling the rejection.
        """
        self._error_handled()
        return self._error

    def _try_set_result(self, state, value):
        if self._state != PENDING:
            return False
        self._state = state
        if state == REJECTED:
            self._error = value
            self._log_rejection = True
        else:
            self._value = value
        self._on_result_set()
        return True

    def _error_handled(self):
        self._log_rejection = False

    #virtual
    def _on_result_set(self):
        pass
