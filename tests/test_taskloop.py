import threading
import time

import pytest

from icecore.errors import ClosedError
from icecore.taskloop import TaskLoop


def test_run_returns_task_result():
    loop = TaskLoop()
    try:
        assert loop.run(lambda lp: 40 + 2) == 42
    finally:
        loop.close()


def test_task_receives_loop_and_runs_on_other_thread():
    loop = TaskLoop()
    seen = {}

    def task(lp):
        seen["loop"] = lp
        seen["thread"] = threading.get_ident()
        return lp.is_closed()

    try:
        assert loop.run(task) is False
        assert seen["loop"] is loop
        assert seen["thread"] != threading.get_ident()
    finally:
        loop.close()


def test_tasks_run_serially_on_one_thread():
    loop = TaskLoop()
    active = [0]
    max_active = [0]
    threads = set()
    counter = [0]
    results = []
    results_lock = threading.Lock()

    def task(_):
        active[0] += 1
        max_active[0] = max(max_active[0], active[0])
        threads.add(threading.get_ident())
        time.sleep(0.001)
        counter[0] += 1
        value = counter[0]
        active[0] -= 1
        return value

    def submit():
        value = loop.run(task)
        with results_lock:
            results.append(value)

    workers = [threading.Thread(target=submit) for _ in range(20)]
    for w in workers:
        w.start()
    for w in workers:
        w.join()

    assert loop.run(task) == 21
    loop.close()

    assert sorted(results) == list(range(1, 21))
    assert max_active[0] == 1
    assert len(threads) == 1


def test_task_exception_propagates_and_loop_keeps_running():
    loop = TaskLoop()

    def failing(_):
        raise ValueError("boom")

    try:
        with pytest.raises(ValueError, match="boom"):
            loop.run(failing)
        assert loop.run(lambda _: "still alive") == "still alive"
    finally:
        loop.close()


def test_close_calls_on_close_once():
    calls = []
    loop = TaskLoop(on_close=lambda: calls.append(1))
    loop.close()
    assert calls == [1]
    assert loop.is_closed() is True
    assert loop.wait_closed(1.0) is True


def test_close_twice_raises():
    loop = TaskLoop()
    loop.close()
    with pytest.raises(ClosedError):
        loop.close()


def test_run_after_close_raises():
    loop = TaskLoop()
    loop.close()
    with pytest.raises(ClosedError, match="the agent is closed"):
        loop.run(lambda _: None)


def test_wait_closed_times_out_while_open():
    loop = TaskLoop()
    try:
        assert loop.wait_closed(0.01) is False
    finally:
        loop.close()


def test_pending_task_is_not_run_after_close():
    loop = TaskLoop()
    release = threading.Event()
    started = threading.Event()
    second_ran = []
    outcome = {}

    def blocking(_):
        started.set()
        release.wait(5)

    first = threading.Thread(target=loop.run, args=(blocking,))
    first.start()
    assert started.wait(5)

    def submit_second():
        try:
            loop.run(lambda _: second_ran.append(True))
        except ClosedError as exc:
            outcome["error"] = exc

    second = threading.Thread(target=submit_second)
    second.start()
    closer = threading.Thread(target=loop.close)
    closer.start()

    deadline = time.monotonic() + 5
    while not loop.is_closed() and time.monotonic() < deadline:
        time.sleep(0.001)
    assert loop.is_closed()
    release.set()

    for t in (first, second, closer):
        t.join(5)

    assert second_ran == []
    assert isinstance(outcome.get("error"), ClosedError)
    assert loop.wait_closed(1.0) is True


def test_run_from_within_task_is_refused():
    loop = TaskLoop()
    try:
        with pytest.raises(RuntimeError):
            loop.run(lambda lp: lp.run(lambda _: None))
    finally:
        loop.close()


def test_context_manager_closes():
    with TaskLoop() as loop:
        assert loop.run(lambda _: "x") == "x"
    assert loop.is_closed() is True
    with pytest.raises(ClosedError):
        loop.run(lambda _: None)