"""A fixed-size pool of worker threads draining a task queue."""

from __future__ import annotations

import functools
import logging
import threading
from collections import deque
from typing import Any, Callable, Deque

_log = logging.getLogger(__name__)


class ThreadPool:
    """Runs queued callables on ``size`` worker threads.

    ``shutdown`` lets the workers finish every queued task, then joins them.
    """

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError("thread pool size must be at least 1")
        self._tasks: Deque[Callable[[], Any]] = deque()
        self._condition = threading.Condition()
        self._stopping = False
        self._threads = [
            threading.Thread(target=self._work, name=f"pool-worker-{n}", daemon=True)
            for n in range(size)
        ]
        for thread in self._threads:
            thread.start()

    def __enter__(self) -> "ThreadPool":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.shutdown()

    def queue_task(self, func: Callable[..., Any], *args: Any, **kwargs: Any) -> None:
        with self._condition:
            if self._stopping:
                raise RuntimeError("cannot queue a task on a pool that is shut down")
            self._tasks.append(functools.partial(func, *args, **kwargs))
            self._condition.notify()

    def shutdown(self) -> None:
        with self._condition:
            self._stopping = True
            self._condition.notify_all()
        current = threading.current_thread()
        for thread in self._threads:
            if thread is not current:
                thread.join()

    def _work(self) -> None:
        while True:
            with self._condition:
                self._condition.wait_for(lambda: self._stopping or bool(self._tasks))
                if not self._tasks:
                    return
                task = self._tasks.popleft()
            try:
                task()
            except Exception:
                _log.exception("Task raised an exception")