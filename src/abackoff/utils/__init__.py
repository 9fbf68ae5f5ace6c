r"""Utility helpers shared by the backoff strategies.

This package provides the duration units, the conversions between
nanoseconds, seconds and ``datetime.timedelta``, and the parameter
validation used by the strategy constructors.
"""

from __future__ import annotations

__all__ = [
    "BACKOFF_KINDS",
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
    "validate_delay_range",
    "validate_kind",
    "validate_non_negative",
]

from abackoff.utils.duration import (
    HOUR,
    MICROSECOND,
    MILLISECOND,
    MINUTE,
    NANOSECOND,
    SECOND,
    as_duration,
    from_seconds,
    from_timedelta,
    to_seconds,
    to_timedelta,
)
from abackoff.utils.validation import (
    BACKOFF_KINDS,
    validate_delay_range,
    validate_kind,
    validate_non_negative,
)
