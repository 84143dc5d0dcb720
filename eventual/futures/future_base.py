import abc


_CONTRACT = ('state', 'value', 'error', 'then')


class FutureBase(metaclass=abc.ABCMeta):
    """Observable resolution contract of a future.

    Any class exposing ``state``, ``value``, ``error`` and ``then`` is
    recognized as a virtual subclass, so futures from other implementations
    can be merged into a chain.
    """

    @property
    @abc.abstractmethod
    def state(self):
        """One of 'pending', 'accepted' or 'rejected'."""
        pass

    @property
    @abc.abstractmethod
    def value(self):
        """Value the future was accepted with, None otherwise."""
        pass

    @property
    @abc.abstractmethod
    def error(self):
        """Payload the future was rejected with, None otherwise."""
        pass

    @abc.abstractmethod
    def then(self, onaccept=None, onreject=None):
        """Register callbacks and return a future derived from their outcome."""
        pass

    @classmethod
    def __subclasshook__(cls, C):
        if cls is FutureBase:
            if all(any(attr in B.__dict__ for B in C.__mro__)
                   for attr in _CONTRACT):
                return True
        return NotImplemented

def is_future(obj):
    """Returns True if obj exposes the observable resolution contract,
    either through its class or through instance attributes."""
    if isinstance(obj, type):
        return False
    return isinstance(obj, FutureBase) or all(hasattr(obj, attr) for attr in _CONTRACT)
