from .test_base import FutureTestBase
from eventual.futures import *
import gc


class FutureChainingTest(FutureTestBase):
    def _pending(self):
        resolvers = []
        f = Future(resolvers.append)
        return f, resolvers[0]

    def test_then_returns_pending_future(self):
        f = Future.accepted(1)
        f2 = f.then(lambda v: v + 1)
        self.assertIsInstance(f2, Future)
        self.assertIsNot(f, f2)
        self.assertEqual(PENDING, f2.state)

    def test_then_value(self):
        f1, r = self._pending()
        f2 = f1.then(lambda x: x * x)
        f3 = f2.then(lambda x: x * 2)

        r.accept(5)
        self.scheduler.run()
        self.assertEqual(50, f3.value)

    def test_fast_forward_rejection(self):
        f, r = self._pending()
        ex = TypeError()
        self.clb_called = False

        def on_accept(value):
            self.clb_called = True

        f2 = f.then(on_accept)
        r.reject(ex)
        self.scheduler.run()

        self.assertFalse(self.clb_called)
        self.assertEqual(REJECTED, f2.state)
        self.assertIs(ex, f2.error)

    def test_fast_forward_acceptance(self):
        f = Future.accepted(5)
        f2 = f.then(None, lambda _: self.fail('reject callback called on accept'))
        self.scheduler.run()
        self.assertEqual(5, f2.value)

    def test_fast_forward_through_many_links(self):
        f = Future.rejected(KeyError())
        f2 = f.then(lambda v: v).then(lambda v: v).then(lambda v: v)
        self.scheduler.run()
        self.assertIsInstance(f2.error, KeyError)

    def test_recover_with_reject_callback(self):
        f = Future.rejected(TypeError())
        f2 = f.then(None, lambda _: 'recovered')
        self.scheduler.run()
        self.assertEqual(ACCEPTED, f2.state)
        self.assertEqual('recovered', f2.value)

    def test_raise_rejects_derived(self):
        ex = AttributeError()
        f = Future.accepted(1)
        f2 = f.then(lambda _: self._raise(ex))
        self.scheduler.run()
        self.assertEqual(REJECTED, f2.state)
        self.assertIs(ex, f2.error)

    def test_raise_in_reject_callback(self):
        ex = AttributeError()
        f = Future.rejected(TypeError())
        f2 = f.then(None, lambda _: self._raise(ex))
        self.scheduler.run()
        self.assertIs(ex, f2.error)

    def test_merge_accepted(self):
        g, rg = self._pending()
        f = Future.accepted(1)
        f2 = f.then(lambda _: g)
        self.scheduler.run()
        self.assertEqual(PENDING, f2.state)

        rg.accept(25)
        self.scheduler.run()
        self.assertEqual(25, f2.value)

    def test_merge_rejected(self):
        g, rg = self._pending()
        err = IOError()
        f = Future.accepted(1)
        f2 = f.then(lambda _: g)
        self.scheduler.run()
        self.assertEqual(PENDING, f2.state)

        rg.reject(err)
        self.scheduler.run()
        self.assertEqual(REJECTED, f2.state)
        self.assertIs(err, f2.error)

    def test_merge_is_deferred(self):
        g = Future.accepted(3)
        f = Future.accepted(1)
        f2 = f.then(lambda _: g)

        self.scheduler.run_once()
        self.assertEqual(PENDING, f2.state)

        self.scheduler.run()
        self.assertEqual(3, f2.value)

    def test_merge_foreign_future(self):
        class Foreign(object):
            state = ACCEPTED
            value = 'foreign'
            error = None

            def then(self, onaccept=None, onreject=None):
                onaccept(self.value)

        f = Future.accepted(1)
        f2 = f.then(lambda _: Foreign())
        self.scheduler.run()
        self.assertEqual('foreign', f2.value)

    def test_merge_future_with_instance_attributes(self):
        class Shaped(object):
            def __init__(self, value):
                self.state = ACCEPTED
                self.value = value
                self.error = None

            def then(self, onaccept=None, onreject=None):
                onaccept(self.value)

        f = Future.accepted(3)
        f2 = f.then(lambda v: Shaped(v * v))
        self.scheduler.run()
        self.assertEqual(9, f2.value)

    def test_merge_foreign_future_failing_then(self):
        class Broken(object):
            state = PENDING
            value = None
            error = None

            def then(self, onaccept=None, onreject=None):
                raise RuntimeError('broken')

        self.recv = []
        f = Future.accepted(1)
        f2 = f.then(lambda _: Broken())
        f.then(self.recv.append)
        self.scheduler.run()

        self.assertIsInstance(f2.error, RuntimeError)
        self.assertListEqual([1], self.recv)
        self.assertEqual([], self.unhandled)

    def test_done_foreign_future_failing_then(self):
        class Broken(object):
            state = PENDING
            value = None
            error = None

            def then(self, onaccept=None, onreject=None):
                raise RuntimeError('broken')

        self.recv = []
        f = Future.accepted(1)
        f.done(lambda _: Broken())
        f.done(self.recv.append)
        self.scheduler.run()

        self.assertListEqual([1], self.recv)
        self.assertEqual([RuntimeError], self.unhandled)

    def test_raise_then_fast_forward_to_done(self):
        ex = ValueError('boom')
        f = Future.accepted(1)
        self.recv = None

        def on_reject(error):
            self.recv = error

        f.then(lambda v: self._raise(ex)) \
            .then(lambda _: self.fail('accept callback called on reject')) \
            .done(None, on_reject)
        self.scheduler.run()

        self.assertIs(ex, self.recv)
        self.assertEqual([], self.unhandled)

    def test_unhandled_chain_reported_once(self):
        f = Future.rejected(TypeError())
        f.then(lambda v: v).then(lambda v: v).done()
        self.scheduler.run()
        gc.collect()
        self.assertEqual([TypeError], self.unhandled)

    def test_unhandled_chain_reported_on_collect(self):
        f = Future.rejected(TypeError())
        f2 = f.then(lambda v: v).then(lambda v: v)
        self.scheduler.run()
        self.assertEqual([], self.unhandled)

        del f2
        gc.collect()
        self.assertEqual([TypeError], self.unhandled)

    def test_catch(self):
        f = Future.rejected(TypeError())
        f2 = f.catch(lambda ex: type(ex).__name__)
        self.scheduler.run()
        self.assertEqual('TypeError', f2.value)

    def test_derived_inherits_scheduler(self):
        from eventual.schedulers import DeferredScheduler

        other = DeferredScheduler()
        f = Future(lambda r: r.accept(1), scheduler=other)
        f2 = f.then(lambda v: v + 1)
        f3 = f2.then(lambda v: v + 1)

        other.run()
        self.assertEqual(3, f3.value)
        self.assertEqual(0, self.scheduler.pending)


if __name__ == '__main__':
    import unittest
    unittest.main()
