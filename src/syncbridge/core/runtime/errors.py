from __future__ import annotations

import re
from typing import Any


class BridgeError(Exception):
    """Base class for failures surfaced by a blocking bridge call."""


class OperationFailure(BridgeError):
    """The wrapped operation reported failure; ``error`` is its value, untouched."""

    def __init__(self, error: Any) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return f"operation failed: {describe_error(self.error)}"


class TimeoutFailure(BridgeError, TimeoutError):
    def __init__(self, timeout: float | None = None) -> None:
        super().__init__(timeout)
        self.timeout = timeout

    def __str__(self) -> str:
        if self.timeout is None:
            return "operation did not complete before the deadline"
        return f"operation did not complete within {self.timeout:g}s"


def _compact_message(message: str, max_len: int = 220) -> str:
    msg = message.lower()
    msg = re.sub(r"\s+", " ", msg)
    return msg.strip()[:max_len]


def describe_error(error: Any, max_len: int = 220) -> str:
    if isinstance(error, BaseException):
        return compact_error_summary(error, max_len=max_len)
    return _compact_message(repr(error), max_len=max_len)


def compact_error_summary(exc: BaseException, max_len: int = 220) -> str:
    return f"{exc.__class__.__name__}: {_compact_message(str(exc), max_len=max_len)}"
