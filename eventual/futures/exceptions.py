class Error(Exception):
    """Base class for all future-related exceptions."""
    name = 'Error'


class CancelledError(Error):
    """The Future was cancelled by its resolver."""
    name = 'Cancel'


class TimeoutError(Error):
    """The Future was timed out by its resolver."""
    name = 'Timeout'


class InvalidStateError(Error):
    """The operation is not allowed in this state."""


class AlreadyResolvedError(InvalidStateError):
    """A resolver method was called after the future was resolved."""


class RejectedError(Error):
    """Carries a rejection payload which is not an exception instance."""

    def __init__(self, payload):
        super().__init__(payload)
        self.payload = payload
