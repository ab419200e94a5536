from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Success(Generic[T]):
    value: T

    @property
    def is_success(self) -> bool:
        return True


@dataclass(frozen=True, slots=True)
class Failure(Generic[E]):
    error: E

    @property
    def is_success(self) -> bool:
        return False


Outcome = Union[Success[T], Failure[E]]


def outcome_of(fn: Callable[..., T], *args: Any, **kwargs: Any) -> Outcome[T, Exception]:
    """Run ``fn`` and capture its return value or raised exception as an Outcome."""
    try:
        return Success(fn(*args, **kwargs))
    except Exception as exc:  # noqa: BLE001
        return Failure(exc)
