r"""Unit tests for ConstantBackoff strategy."""

from __future__ import annotations

from datetime import timedelta

import pytest

from abackoff.backoff.constant import ConstantBackoff
from abackoff.utils.duration import MILLISECOND, SECOND


def test_constant_backoff_basic() -> None:
    """Test that every call returns the configured delay."""
    backoff = ConstantBackoff(500 * MILLISECOND)
    for _ in range(10):
        assert backoff.next() == 500 * MILLISECOND


@pytest.mark.parametrize("duration", [0, 1, -1, -5 * SECOND, 3 * SECOND, 2**70])
def test_constant_backoff_accepts_any_int(duration: int) -> None:
    """Test that zero, negative and large delays are returned unchanged."""
    backoff = ConstantBackoff(duration)
    assert backoff.duration == duration
    assert backoff.next() == duration
    assert backoff.next() == duration


def test_constant_backoff_float_seconds() -> None:
    """Test that a float delay is interpreted as seconds."""
    assert ConstantBackoff(0.5).next() == 500 * MILLISECOND


def test_constant_backoff_timedelta() -> None:
    """Test that a timedelta delay is converted to nanoseconds."""
    assert ConstantBackoff(timedelta(seconds=2)).next() == 2 * SECOND


def test_constant_backoff_invalid_type() -> None:
    """Test that an unsupported delay type raises TypeError."""
    with pytest.raises(TypeError, match=r"duration must be an int, float or timedelta"):
        ConstantBackoff("1s")  # type: ignore[arg-type]


def test_constant_backoff_repr() -> None:
    """Test the string representation."""
    assert repr(ConstantBackoff(5)) == "ConstantBackoff(duration=5)"


@pytest.mark.parametrize("duration", [float("inf"), float("-inf"), float("nan"), 1e300])
def test_constant_backoff_non_finite_float(duration: float) -> None:
    """Test that a float delay that cannot be expressed in nanoseconds raises
    ValueError."""
    with pytest.raises(ValueError, match=r"seconds must be finite"):
        ConstantBackoff(duration)
