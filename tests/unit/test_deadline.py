from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from syncbridge.core.runtime.timeouts import DEFAULT_TIMEOUT_SECONDS, Deadline, resolve_deadline


def test_none_resolves_to_default():
    d = resolve_deadline(None)
    assert d.timeout_seconds == DEFAULT_TIMEOUT_SECONDS == 10.0
    assert 9.0 < d.remaining() <= 10.0


def test_numeric_and_timedelta_durations():
    assert resolve_deadline(3).timeout_seconds == 3.0
    assert resolve_deadline(0.5).timeout_seconds == 0.5
    assert resolve_deadline(timedelta(milliseconds=250)).timeout_seconds == 0.25


def test_absolute_datetime():
    d = resolve_deadline(datetime.now(timezone.utc) + timedelta(seconds=5))
    assert 4.0 < d.remaining() <= 5.0


def test_past_values_are_already_expired():
    assert resolve_deadline(-1).expired is True
    assert resolve_deadline(datetime.now(timezone.utc) - timedelta(seconds=5)).remaining() == 0.0


def test_deadline_instance_passes_through():
    d = Deadline.after(2)
    assert resolve_deadline(d) is d


def test_invalid_deadlines():
    with pytest.raises(ValueError, match="timezone-aware"):
        resolve_deadline(datetime.now())
    with pytest.raises(TypeError):
        resolve_deadline("10")
    with pytest.raises(TypeError):
        resolve_deadline(True)
