from .scheduler_base import SchedulerBase
from ..config import Default
from collections import deque


class DeferredScheduler(SchedulerBase):
    """Keeps scheduled functions in an explicit FIFO task queue.

    Nothing runs until the owner of the scheduler drains the queue with
    run() or run_once(), which makes every delivery happen strictly after
    the synchronous code that triggered it.
    """

    def __init__(self):
        self._tasks = deque()

    def __call__(self, fn, *args, **kwargs):
        self._tasks.append((fn, args, kwargs))

    @property
    def pending(self):
        """Number of tasks waiting in the queue."""
        return len(self._tasks)

    def run_once(self):
        """Run tasks queued before this call, leaving tasks they schedule
        for the next turn.

        Returns the number of tasks executed.
        """
        ran = 0
        for _ in range(len(self._tasks)):
            if not self._tasks:
                break
            self._run_task(*self._tasks.popleft())
            ran += 1
        return ran

    def run(self):
        """Run tasks until the queue is empty, including the ones scheduled
        while running.

        Returns the number of tasks executed.
        """
        ran = 0
        while self._tasks:
            self._run_task(*self._tasks.popleft())
            ran += 1
        return ran

    def _run_task(self, fn, args, kwargs):
        try:
            fn(*args, **kwargs)
        except Exception as ex:
            Default.on_unhandled_error(ex)


# alias
Deferred = DeferredScheduler()
