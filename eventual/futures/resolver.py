from .future_base import is_future
from .future_core import ACCEPTED, REJECTED
from .exceptions import AlreadyResolvedError, CancelledError, TimeoutError
from ..config import Default


_TOKEN = object()


class Resolver(object):
    """Resolver is the capability to settle exactly one future.

    It is handed to the initializer of a Future during construction and can
    not be obtained any other way. Only the first call to any of its methods
    takes effect, every following call raises AlreadyResolvedError.
    """

    def __init__(self, future, token=None):
        if token is not _TOKEN:
            raise TypeError("Resolver can only be obtained from a Future initializer")
        self._future = future
        self._resolved = False

    def __repr__(self):
        return '{}<{!r}>'.format(self.__class__.__name__, self._future)

    @property
    def future(self):
        """Returns associated future instance."""
        return self._future

    @property
    def is_resolved(self):
        """Returns True if one of the resolver methods was already called."""
        return self._resolved

    def accept(self, value):
        """Accepts associated future with provided value.

        Args:
            value: Value to accept future with.

        Raises:
            AlreadyResolvedError: If future was already resolved.
        """
        self._commit()
        self._accept(value)

    def reject(self, error):
        """Rejects associated future with provided error.

        Args:
            error: Rejection payload, usually an Exception but any value is
            allowed.

        Raises:
            AlreadyResolvedError: If future was already resolved.
        """
        self._commit()
        self._reject(error)

    def resolve(self, value):
        """Accepts associated future with provided value, or merges it with
        the outcome of provided future.

        When value is a future this resolver commits to it: associated future
        stays pending until value settles and then adopts its outcome.

        Raises:
            AlreadyResolvedError: If future was already resolved.
        """
        self._commit()
        if is_future(value):
            if value is self._future:
                self._reject(TypeError("Future cannot be resolved with itself"))
            else:
                try:
                    value.then(self._accept, self._reject)
                except Exception as ex:
                    if not self._future._try_set_result(REJECTED, ex):
                        Default.on_unhandled_error(ex)
        else:
            self._accept(value)

    def cancel(self):
        """Rejects associated future with CancelledError."""
        self.reject(CancelledError('Cancel'))

    def timeout(self):
        """Rejects associated future with TimeoutError."""
        self.reject(TimeoutError('Timeout'))

    def _commit(self):
        if self._resolved:
            raise AlreadyResolvedError("future was already resolved")
        self._resolved = True

    def _accept(self, value):
        if not self._future._try_set_result(ACCEPTED, value):
            raise AlreadyResolvedError("future was already resolved")

    def _reject(self, error):
        if not self._future._try_set_result(REJECTED, error):
            raise AlreadyResolvedError("future was already resolved")
