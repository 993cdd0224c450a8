"""A loop that runs submitted tasks one at a time on a dedicated thread."""

from __future__ import annotations

import logging
import threading
from collections import deque
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from .errors import ClosedError

_log = logging.getLogger(__name__)


@dataclass(eq=False)
class _Task:
    fn: Callable[[TaskLoop], Any]
    done: threading.Event = field(default_factory=threading.Event)
    result: Any = None
    error: BaseException | None = None
    cancelled: bool = False


class TaskLoop:
    """Runs tasks serially in a dedicated thread.

    Each task is called with the loop itself, so a long task can check
    ``is_closed()`` to stop early. Closing finishes the current task; pending
    tasks are not executed and their callers get ClosedError.
    """

    def __init__(self, on_close: Callable[[], None] | None = None) -> None:
        self._on_close = on_close
        self._cond = threading.Condition()
        self._tasks: deque[_Task] = deque()
        self._closed = False
        self._finished = threading.Event()
        self._thread = threading.Thread(
            target=self._run_loop, name="ice-taskloop", daemon=True
        )
        self._thread.start()

    def __enter__(self) -> TaskLoop:
        return self

    def __exit__(self, *exc_info: object) -> None:
        if not self.is_closed():
            self.close()

    def _run_loop(self) -> None:
        try:
            while True:
                with self._cond:
                    while not self._tasks and not self._closed:
                        self._cond.wait()
                    if self._closed:
                        break
                    item = self._tasks.popleft()
                try:
                    item.result = item.fn(self)
                except BaseException as exc:  # handed back to the caller of run()
                    item.error = exc
                finally:
                    item.done.set()
        finally:
            with self._cond:
                leftovers = list(self._tasks)
                self._tasks.clear()
            for item in leftovers:
                item.cancelled = True
                item.done.set()
            try:
                if self._on_close is not None:
                    self._on_close()
            except Exception:
                _log.exception("on_close callback failed")
            finally:
                self._finished.set()

    def run(self, task: Callable[[TaskLoop], Any]) -> Any:
        """Run task on the loop thread, wait for it and return its result.

        Exceptions raised by the task are re-raised here. Raises ClosedError
        when the loop is closed before the task could run.
        """
        if threading.get_ident() == self._thread.ident:
            raise RuntimeError("run() called from within a task would deadlock")
        item = _Task(task)
        with self._cond:
            if self._closed:
                raise ClosedError()
            self._tasks.append(item)
            self._cond.notify_all()
        item.done.wait()
        if item.cancelled:
            raise ClosedError()
        if item.error is not None:
            raise item.error
        return item.result

    def close(self) -> None:
        """Stop the loop after the current task; raises ClosedError if closed."""
        with self._cond:
            if self._closed:
                raise ClosedError()
            self._closed = True
            self._cond.notify_all()
        if threading.get_ident() != self._thread.ident:
            self._finished.wait()

    def is_closed(self) -> bool:
        """True once close() has been called."""
        with self._cond:
            return self._closed

    def wait_closed(self, timeout: float | None = None) -> bool:
        """Wait until the loop has stopped; return whether it has."""
        return self._finished.wait(timeout)