from __future__ import annotations

import threading
import time
from concurrent.futures import ThreadPoolExecutor

import pytest

from syncbridge.core.runtime.bridge import await_result
from syncbridge.core.runtime.errors import OperationFailure, TimeoutFailure
from syncbridge.core.runtime.outcome import Failure, Success


def _delayed(delay: float, outcome):
    def launch(done):
        timer = threading.Timer(delay, done, args=(outcome,))
        timer.daemon = True
        timer.start()

    return launch


def _settle(launcher, deadline):
    try:
        return "ok", await_result(launcher, deadline=deadline)
    except OperationFailure as exc:
        return "failure", exc.error
    except TimeoutFailure:
        return "timeout", None


def test_concurrent_calls_resolve_independently():
    err = ValueError("b failed")
    jobs = {
        "a": (_delayed(0.15, Success("a-value")), 2.0),
        "b": (_delayed(0.05, Failure(err)), 2.0),
        "c": (lambda done: None, 0.3),
        "d": (_delayed(0.6, Success("too slow")), 0.2),
    }

    with ThreadPoolExecutor(max_workers=len(jobs)) as pool:
        futures = {name: pool.submit(_settle, launcher, deadline) for name, (launcher, deadline) in jobs.items()}
        results = {name: fut.result(timeout=5) for name, fut in futures.items()}

    assert results["a"] == ("ok", "a-value")
    assert results["b"] == ("failure", err)
    assert results["c"] == ("timeout", None)
    assert results["d"] == ("timeout", None)


def test_late_deliveries_do_not_leak_into_later_calls():
    with pytest.raises(TimeoutFailure):
        await_result(_delayed(0.2, Success("stale")), deadline=0.05)

    value = await_result(_delayed(0.3, Success("current")), deadline=2)
    assert value == "current"


def test_nested_callback_chain_reads_linearly():
    def lookup_user(name, done):
        threading.Timer(0.01, done, args=(Success({"name": name, "id": 9}),)).start()

    def lookup_orders(user_id, done):
        threading.Timer(0.01, done, args=(Success([user_id * 10, user_id * 11]),)).start()

    started = time.monotonic()
    user = await_result(lambda done: lookup_user("ada", done), deadline=1)
    orders = await_result(lambda done: lookup_orders(user["id"], done), deadline=1)
    assert orders == [90, 99]
    assert time.monotonic() - started < 1.0
