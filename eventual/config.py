import traceback
import logging

logger = logging.getLogger(__package__)


def log_error_handler(cls, tb):
    try:
        logger.error('Future rejection was never handled:\n%s',
                     ''.join(tb))
    except Exception:
        pass


def _format_rejection(error):
    if isinstance(error, BaseException):
        return type(error), traceback.format_exception(
            type(error), error, error.__traceback__)
    # rejections may carry any value, not only exceptions
    return type(error), ['Rejected with {!r}\n'.format(error)]


class Default(object):
    # Called when rejection of the future was not handled by any callback
    # This includes exceptions in then() callbacks observed by done()
    UNHANDLED_REJECTION_CALLBACK = staticmethod(log_error_handler)

    # Default scheduler for future callbacks
    CALLBACK_SCHEDULER = None

    @staticmethod
    def get_callback_scheduler():
        if not Default.CALLBACK_SCHEDULER:
            from .schedulers.deferred import Deferred

            Default.CALLBACK_SCHEDULER = Deferred
        return Default.CALLBACK_SCHEDULER

    @staticmethod
    def on_unhandled_rejection(error):
        cls, tb = _format_rejection(error)
        Default.UNHANDLED_REJECTION_CALLBACK(cls, tb)

    @staticmethod
    def on_unhandled_error(exc):
        tb = traceback.format_exception(exc.__class__, exc,
                                        exc.__traceback__)
        Default.UNHANDLED_REJECTION_CALLBACK(exc.__class__, tb)
