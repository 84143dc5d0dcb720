"""Single-resolution futures with chaining and event style observation."""

__all__ = ['FutureBase', 'Future', 'Resolver', 'FutureEvent',
           'PENDING', 'ACCEPTED', 'REJECTED', 'ACCEPT', 'REJECT',
           'Error', 'CancelledError', 'TimeoutError', 'InvalidStateError',
           'AlreadyResolvedError', 'RejectedError',
]

from .future_base import FutureBase
from .future_core import PENDING, ACCEPTED, REJECTED
from .future import Future
from .resolver import Resolver
from .events import FutureEvent, ACCEPT, REJECT
from .exceptions import (Error,
                         CancelledError,
                         TimeoutError,
                         InvalidStateError,
                         AlreadyResolvedError,
                         RejectedError)
