from __future__ import annotations

import functools
from collections.abc import Callable
from concurrent.futures import CancelledError, Future
from typing import Any

from syncbridge.core.runtime.bridge import Completion, Launcher, await_result
from syncbridge.core.runtime.outcome import Failure, Success
from syncbridge.core.runtime.timeouts import DeadlineLike


def launcher_from_future(future: Future) -> Launcher:
    def launch(complete: Completion) -> None:
        def on_done(done: Future) -> None:
            if done.cancelled():
                complete(Failure(CancelledError()))
                return
            exc = done.exception()
            if exc is not None:
                complete(Failure(exc))
            else:
                complete(Success(done.result()))

        future.add_done_callback(on_done)

    return launch


def launcher_from_pair_callback(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Launcher:
    """Adapt ``fn(*args, callback, **kwargs)`` where ``callback(value, error)`` reports the result."""

    def launch(complete: Completion) -> None:
        def callback(value: Any, error: Any = None) -> None:
            if error is not None:
                complete(Failure(error))
            else:
                complete(Success(value))

        fn(*args, callback, **kwargs)

    return launch


def bridged(fn: Callable[..., Any], *, timeout: DeadlineLike = None) -> Callable[..., Any]:
    """Turn ``fn(*args, completion, **kwargs)`` into a blocking ``wrapped(*args, **kwargs)``.

    ``completion`` is appended as the last positional argument.
    """

    @functools.wraps(fn)
    def wrapped(*args: Any, **kwargs: Any) -> Any:
        return await_result(lambda complete: fn(*args, complete, **kwargs), deadline=timeout)

    return wrapped
