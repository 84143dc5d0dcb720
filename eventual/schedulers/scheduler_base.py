import abc


class SchedulerBase(metaclass=abc.ABCMeta):

    @abc.abstractmethod
    def __call__(self, fn, *args, **kwargs):
        """Schedule fn to run on a later turn, never synchronously.
        This method is intended to allow using schedulers for delivering
        Future callbacks"""

    def submit(self, fn, *args, **kwargs):
        """Schedule execution of specified function and return a Future
        resolved from its outcome"""
        from ..futures import Future

        def start(resolver):
            def run():
                try:
                    result = fn(*args, **kwargs)
                except Exception as ex:
                    resolver.reject(ex)
                else:
                    resolver.resolve(result)

            self(run)

        return Future(start, scheduler=self)
