import threading
import time

import pytest

from hellokit.promise import Promise, PromiseCancelled


def later(action, delay=0.05):
    thread = threading.Thread(target=lambda: (time.sleep(delay), action()))
    thread.start()
    return thread


def test_resolve_from_other_thread():
    p = Promise()
    thread = later(lambda: p.resolve("okxxx"))
    assert p.get(timeout=5) == "okxxx"
    thread.join()


def test_reject_raises_error():
    p = Promise()
    thread = later(lambda: p.reject(ValueError("failed")))
    with pytest.raises(ValueError, match="failed"):
        p.get(timeout=5)
    thread.join()


def test_cancel_raises_cancelled():
    p = Promise()
    thread = later(p.cancel)
    with pytest.raises(PromiseCancelled) as info:
        p.get(timeout=5)
    assert str(info.value) == "Task be cancelled"
    thread.join()


def test_callbacks_on_resolve():
    done, always, fail = [], [], []
    p = Promise()
    p.on_success(done.append).on_complete(always.append).on_failure(fail.append)
    p.resolve("ok")
    assert p.get() == "ok"
    assert done == ["ok"]
    assert always == ["ok"]
    assert fail == []


def test_callbacks_on_reject():
    done, always, fail = [], [], []
    p = Promise()
    error = ValueError("bad")
    p.on_success(done.append).on_complete(always.append).on_failure(fail.append)
    p.reject(error)
    assert done == []
    assert always == [error]
    assert fail == [error]


def test_callback_registered_after_completion_runs_now():
    p = Promise()
    p.resolve(3)
    seen = []
    assert p.on_success(seen.append) is p
    assert seen == [3]


def test_callback_runs_when_resolved_in_thread():
    p = Promise()
    event = threading.Event()
    p.on_success(lambda v: event.set())
    thread = later(lambda: p.resolve("ok"))
    assert event.wait(5)
    thread.join()


def test_get_timeout():
    p = Promise()
    with pytest.raises(TimeoutError):
        p.get(timeout=0.01)
    assert not p.done


def test_second_completion_raises():
    p = Promise()
    p.resolve(1)
    with pytest.raises(RuntimeError):
        p.resolve(2)
    with pytest.raises(RuntimeError):
        p.cancel()
    assert p.get() == 1


def test_reject_needs_exception():
    p = Promise()
    with pytest.raises(TypeError):
        p.reject("failed")


def test_failing_callback_does_not_break_others():
    p = Promise()
    seen = []

    def boom(value):
        raise RuntimeError("boom")

    p.on_success(boom).on_success(seen.append)
    p.resolve(7)
    assert seen == [7]