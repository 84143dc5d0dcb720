from .future_base import is_future
import functools


class FutureExtensions(object):
    """Mixin class for Future factories and combination functions."""

    @classmethod
    def accepted(cls, value=None, *, scheduler=None):
        """Returns accepted future.

        Args:
            value: value to accept future with.
            scheduler: default scheduler to use for delivering callbacks.
        """
        return cls(lambda r: r.accept(value), scheduler=scheduler)

    @classmethod
    def rejected(cls, error, *, scheduler=None):
        """Returns rejected future.

        Args:
            error: payload to reject future with.
            scheduler: default scheduler to use for delivering callbacks.
        """
        return cls(lambda r: r.reject(error), scheduler=scheduler)

    @classmethod
    def resolved(cls, value=None, *, scheduler=None):
        """Returns future accepted with value, or merged with it if value is
        a future itself."""
        return cls(lambda r: r.resolve(value), scheduler=scheduler)

    def catch(self, onreject):
        """Same as then(None, onreject)."""
        return self.then(None, onreject)

    @classmethod
    def any(cls, futures, *, scheduler=None):
        """Returns future which will be settled like the first of provided
        futures to settle, either accepted or rejected.

        Args:
            futures: list of futures or plain values to combine.
            scheduler: default scheduler to use for delivering callbacks.
        """
        if not futures:
            return cls.accepted(None, scheduler=scheduler)

        futures = [cls._convert(fi, scheduler) for fi in futures]

        def start(resolver):
            def on_accept(value):
                if not resolver.is_resolved:
                    resolver.accept(value)

            def on_reject(error):
                if not resolver.is_resolved:
                    resolver.reject(error)

            for fi in futures:
                fi.done(on_accept, on_reject)

        return cls(start, scheduler=scheduler)

    @classmethod
    def every(cls, futures, *, scheduler=None):
        """Transforms list of futures into one future that will contain list
        of values in the order of the original sequence. In case of any
        rejection future will be rejected with the first error to occur.

        Args:
            futures: list of futures or plain values to combine.
            scheduler: default scheduler to use for delivering callbacks.
        """
        if not futures:
            return cls.accepted([], scheduler=scheduler)

        futures = [cls._convert(fi, scheduler) for fi in futures]

        def start(resolver):
            values = [None] * len(futures)
            left = len(futures)

            def on_accept(i, value):
                nonlocal left
                values[i] = value
                left -= 1
                if not left and not resolver.is_resolved:
                    resolver.accept(values)

            def on_reject(error):
                if not resolver.is_resolved:
                    resolver.reject(error)

            for i, fi in enumerate(futures):
                fi.done(functools.partial(on_accept, i), on_reject)

        return cls(start, scheduler=scheduler)

    @classmethod
    def some(cls, futures, *, scheduler=None):
        """Returns future which will be accepted with the value of the first
        of provided futures to be accepted. If all of them are rejected the
        future is rejected with the list of their errors, in the order of the
        original sequence.

        Args:
            futures: list of futures or plain values to combine.
            scheduler: default scheduler to use for delivering callbacks.
        """
        if not futures:
            return cls.rejected([], scheduler=scheduler)

        futures = [cls._convert(fi, scheduler) for fi in futures]

        def start(resolver):
            errors = [None] * len(futures)
            left = len(futures)

            def on_accept(value):
                if not resolver.is_resolved:
                    resolver.accept(value)

            def on_reject(i, error):
                nonlocal left
                errors[i] = error
                left -= 1
                if not left and not resolver.is_resolved:
                    resolver.reject(errors)

            for i, fi in enumerate(futures):
                fi.done(on_accept, functools.partial(on_reject, i))

        return cls(start, scheduler=scheduler)

    @classmethod
    def _convert(cls, value, scheduler=None):
        if isinstance(value, cls):
            return value
        if is_future(value):
            return cls.resolved(value, scheduler=scheduler)
        return cls.accepted(value, scheduler=scheduler)
