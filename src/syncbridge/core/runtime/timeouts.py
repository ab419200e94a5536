from __future__ import annotations

import time
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Union

DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True, slots=True)
class Deadline:
    """A point on the monotonic clock after which waiting stops."""

    expires_at: float
    timeout_seconds: float

    @staticmethod
    def _now() -> float:
        return time.monotonic()

    @classmethod
    def after(cls, seconds: float) -> Deadline:
        seconds = max(0.0, float(seconds))
        return cls(expires_at=cls._now() + seconds, timeout_seconds=seconds)

    @classmethod
    def at(cls, when: datetime) -> Deadline:
        if when.tzinfo is None:
            raise ValueError("absolute deadline must be timezone-aware")
        return cls.after((when - datetime.now(timezone.utc)).total_seconds())

    def remaining(self) -> float:
        return max(0.0, self.expires_at - self._now())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0.0


DeadlineLike = Union[None, int, float, timedelta, datetime, Deadline]


def resolve_deadline(deadline: DeadlineLike, *, default_seconds: float = DEFAULT_TIMEOUT_SECONDS) -> Deadline:
    if deadline is None:
        return Deadline.after(default_seconds)
    if isinstance(deadline, Deadline):
        return deadline
    # bool is an int subclass and never a meaningful timeout
    if isinstance(deadline, bool):
        raise TypeError("deadline must be seconds, timedelta, datetime or Deadline, not bool")
    if isinstance(deadline, (int, float)):
        return Deadline.after(deadline)
    if isinstance(deadline, timedelta):
        return Deadline.after(deadline.total_seconds())
    if isinstance(deadline, datetime):
        return Deadline.at(deadline)
    raise TypeError(f"unsupported deadline type: {type(deadline).__name__}")
