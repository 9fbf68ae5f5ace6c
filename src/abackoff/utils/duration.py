r"""Duration units and conversion helpers.

All strategies in ``abackoff`` measure delays as integer nanoseconds,
the same unit as ``time.monotonic_ns()``. This module provides unit
constants and helpers to convert from and to seconds and
``datetime.timedelta``.
"""

from __future__ import annotations

__all__ = [
    "HOUR",
    "MICROSECOND",
    "MILLISECOND",
    "MINUTE",
    "NANOSECOND",
    "SECOND",
    "as_duration",
    "from_seconds",
    "from_timedelta",
    "to_seconds",
    "to_timedelta",
]

import math
from datetime import timedelta

NANOSECOND = 1
MICROSECOND = 1_000 * NANOSECOND
MILLISECOND = 1_000 * MICROSECOND
SECOND = 1_000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE


def from_seconds(seconds: float) -> int:
    """Convert seconds to a duration in nanoseconds.

    Args:
        seconds: The number of seconds, possibly fractional.

    Returns:
        The duration rounded to the nearest nanosecond.

    Raises:
        ValueError: If seconds is infinite, NaN, or too large to
            express in nanoseconds.

    Example:
        ```pycon
        >>> from abackoff.utils.duration import from_seconds
        >>> from_seconds(1.5)
        1500000000
        >>> from_seconds(0.25)
        250000000

        ```
    """
    nanoseconds = seconds * SECOND
    # Also catches finite values that overflow once scaled
    if not math.isfinite(nanoseconds):
        msg = f"seconds must be finite, got {seconds}"
        raise ValueError(msg)
    return round(nanoseconds)


def to_seconds(duration: int) -> float:
    """Convert a duration in nanoseconds to seconds.

    Example:
        ```pycon
        >>> from abackoff.utils.duration import SECOND, to_seconds
        >>> to_seconds(3 * SECOND)
        3.0

        ```
    """
    return duration / SECOND


def from_timedelta(value: timedelta) -> int:
    """Convert a ``timedelta`` to a duration in nanoseconds.

    The conversion uses integer arithmetic only, so it is exact.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from abackoff.utils.duration import from_timedelta
        >>> from_timedelta(timedelta(milliseconds=500))
        500000000

        ```
    """
    return (value.days * 86_400 + value.seconds) * SECOND + value.microseconds * MICROSECOND


def to_timedelta(duration: int) -> timedelta:
    """Convert a duration in nanoseconds to a ``timedelta``.

    ``timedelta`` has microsecond resolution, so the sub-microsecond part
    is rounded down.

    Example:
        ```pycon
        >>> from abackoff.utils.duration import SECOND, to_timedelta
        >>> to_timedelta(2 * SECOND)
        datetime.timedelta(seconds=2)

        ```
    """
    return timedelta(microseconds=duration // MICROSECOND)


def as_duration(value: int | float | timedelta) -> int:
    """Normalize a user-supplied delay to integer nanoseconds.

    Args:
        value: The delay. An ``int`` is taken as nanoseconds, a ``float``
            as seconds and a ``timedelta`` as itself.

    Returns:
        The delay in nanoseconds.

    Raises:
        TypeError: If the value is a ``bool`` or an unsupported type.
        ValueError: If a float value is infinite or NaN.

    Example:
        ```pycon
        >>> from datetime import timedelta
        >>> from abackoff.utils.duration import as_duration
        >>> as_duration(1_000)
        1000
        >>> as_duration(0.5)
        500000000
        >>> as_duration(timedelta(seconds=1))
        1000000000

        ```
    """
    # bool is a subclass of int
    if isinstance(value, bool):
        msg = f"duration must be an int, float or timedelta, got {type(value).__name__}"
        raise TypeError(msg)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return from_seconds(value)
    if isinstance(value, timedelta):
        return from_timedelta(value)
    msg = f"duration must be an int, float or timedelta, got {type(value).__name__}"
    raise TypeError(msg)
