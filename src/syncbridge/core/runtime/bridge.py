"""Blocking bridge over callback-completed asynchronous operations.

A *launcher* starts some asynchronous work and hands it a completion callback.
The work calls that callback once, from any thread, with ``Success(value)`` or
``Failure(error)``. :func:`await_result` blocks the calling thread until that
happens or the deadline passes::

    def launch(done):
        client.fetch_user(42, on_done=lambda user: done(Success(user)),
                          on_error=lambda err: done(Failure(err)))

    user = await_result(launch, deadline=5)

The bridge never cancels the underlying work. On timeout it only stops
waiting; a completion that arrives afterwards lands in a slot nobody reads.
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from time import perf_counter
from typing import Any, TypeVar

from syncbridge.core.config.schema import BridgeConfig
from syncbridge.core.runtime.errors import OperationFailure, TimeoutFailure, describe_error
from syncbridge.core.runtime.outcome import Failure, Outcome, Success
from syncbridge.core.runtime.timeouts import DeadlineLike, resolve_deadline
from syncbridge.core.telemetry.logging import build_logger, level_number

T = TypeVar("T")

Completion = Callable[[Outcome[Any, Any]], bool]
Launcher = Callable[[Completion], None]

_MAX_WAIT_CHUNK_SECONDS = min(threading.TIMEOUT_MAX, 86400.0)


def _debug_enabled(logger) -> bool:
    is_enabled_for = getattr(logger, "is_enabled_for", None)
    if is_enabled_for is None:
        return True
    return bool(is_enabled_for(logging.DEBUG))


class CompletionSlot:
    """Per-call wait handle plus the captured outcome.

    Writes happen under ``_lock`` before ``_event`` is set, so a reader that
    observed the event (or timed out and then took the lock) sees the latest
    accepted outcome.
    """

    def __init__(self, *, single: bool = True) -> None:
        self._event = threading.Event()
        self._lock = threading.Lock()
        self._outcome: Outcome[Any, Any] | None = None
        self._single = single

    def deliver(self, outcome: Outcome[Any, Any]) -> bool:
        if not isinstance(outcome, (Success, Failure)):
            raise TypeError(f"completion expects Success or Failure, got {type(outcome).__name__}")
        with self._lock:
            if self._single and self._outcome is not None:
                return False
            self._outcome = outcome
        self._event.set()
        return True

    def wait(self, timeout: float) -> bool:
        # Event.wait overflows on very large timeouts, so long waits go in chunks
        remaining = timeout
        while remaining > _MAX_WAIT_CHUNK_SECONDS:
            if self._event.wait(_MAX_WAIT_CHUNK_SECONDS):
                return True
            remaining -= _MAX_WAIT_CHUNK_SECONDS
        return self._event.wait(remaining)

    def snapshot(self) -> Outcome[Any, Any] | None:
        with self._lock:
            return self._outcome


class SyncBridge:
    def __init__(self, config: BridgeConfig | None = None, logger=None) -> None:
        self.config = config or BridgeConfig()
        telemetry = self.config.telemetry
        if logger is None:
            self.logger = build_logger("syncbridge.bridge", log_level=telemetry.log_level, json_logs=telemetry.json_logs)
            self.debug_enabled = level_number(telemetry.log_level) <= logging.DEBUG
        else:
            self.logger = logger
            self.debug_enabled = _debug_enabled(logger)

    def run(self, launcher: Launcher, deadline: DeadlineLike = None) -> Any:
        runtime = self.config.runtime
        limit = resolve_deadline(deadline, default_seconds=runtime.default_timeout_seconds)
        slot = CompletionSlot(single=runtime.enforce_single_completion)
        logger = self.logger

        def complete(outcome: Outcome[Any, Any]) -> bool:
            accepted = slot.deliver(outcome)
            if not accepted:
                logger.debug("late_completion_ignored", outcome=type(outcome).__name__)
            return accepted

        started = perf_counter()
        launcher(complete)
        slot.wait(limit.remaining())
        outcome = slot.snapshot()
        elapsed_ms = int((perf_counter() - started) * 1000)

        if isinstance(outcome, Failure):
            error = outcome.error
            if self.debug_enabled:
                logger.debug(
                    "bridge_call",
                    status="failure",
                    elapsed_ms=elapsed_ms,
                    timeout_seconds=limit.timeout_seconds,
                    error_summary=describe_error(error),
                )
            failure = OperationFailure(error)
            if isinstance(error, BaseException):
                raise failure from error
            raise failure
        if isinstance(outcome, Success):
            logger.debug("bridge_call", status="ok", elapsed_ms=elapsed_ms, timeout_seconds=limit.timeout_seconds)
            return outcome.value

        logger.debug("bridge_call", status="timeout", elapsed_ms=elapsed_ms, timeout_seconds=limit.timeout_seconds)
        raise TimeoutFailure(limit.timeout_seconds)


_DEFAULT_BRIDGE = SyncBridge()


def await_result(launcher: Launcher, deadline: DeadlineLike = None) -> Any:
    """Start ``launcher`` and block until its outcome arrives or ``deadline`` passes.

    Returns the success value unchanged. Raises :class:`OperationFailure`
    carrying the operation's error, or :class:`TimeoutFailure` when nothing
    arrived in time. ``deadline`` defaults to 10 seconds from now.
    """
    return _DEFAULT_BRIDGE.run(launcher, deadline)
