r"""Parameter validation utilities for backoff strategies.

This module provides the validation functions used by the strategy
constructors and by ``BackoffConfig`` to reject invalid static
configuration before any delay is produced.
"""

from __future__ import annotations

__all__ = ["BACKOFF_KINDS", "validate_delay_range", "validate_kind", "validate_non_negative"]

# Names accepted by BackoffConfig.kind
BACKOFF_KINDS = ("constant", "exponential", "uniform")


def validate_non_negative(value: int, *, name: str) -> None:
    """Validate that a delay is non-negative.

    Args:
        value: The delay in nanoseconds. Must be >= 0.
        name: The parameter name, used in the error message.

    Raises:
        ValueError: If the delay is negative.

    Example:
        ```pycon
        >>> from abackoff.utils.validation import validate_non_negative
        >>> validate_non_negative(0, name="initial_delay")
        >>> validate_non_negative(-1, name="initial_delay")
        Traceback (most recent call last):
        ...
        ValueError: initial_delay must be non-negative, got -1

        ```
    """
    if value < 0:
        msg = f"{name} must be non-negative, got {value}"
        raise ValueError(msg)


def validate_delay_range(lower: int, upper: int, *, lower_name: str, upper_name: str) -> None:
    """Validate that a delay range is correctly ordered.

    Args:
        lower: The lower bound of the range, in nanoseconds.
        upper: The upper bound of the range, in nanoseconds.
            Must be >= lower.
        lower_name: The parameter name of the lower bound, used in the
            error message.
        upper_name: The parameter name of the upper bound, used in the
            error message.

    Raises:
        ValueError: If upper is smaller than lower.

    Example:
        ```pycon
        >>> from abackoff.utils.validation import validate_delay_range
        >>> validate_delay_range(1, 10, lower_name="min_delay", upper_name="max_delay")
        >>> validate_delay_range(5, 5, lower_name="min_delay", upper_name="max_delay")
        >>> validate_delay_range(10, 1, lower_name="min_delay", upper_name="max_delay")
        Traceback (most recent call last):
        ...
        ValueError: max_delay must be >= min_delay, got max_delay=1 and min_delay=10

        ```
    """
    if upper < lower:
        msg = (
            f"{upper_name} must be >= {lower_name}, "
            f"got {upper_name}={upper} and {lower_name}={lower}"
        )
        raise ValueError(msg)


def validate_kind(kind: str) -> None:
    """Validate a backoff strategy name.

    Args:
        kind: The strategy name. Must be one of ``BACKOFF_KINDS``.

    Raises:
        ValueError: If the name is unknown.

    Example:
        ```pycon
        >>> from abackoff.utils.validation import validate_kind
        >>> validate_kind("exponential")
        >>> validate_kind("fibonacci")  # doctest: +SKIP

        ```
    """
    if kind not in BACKOFF_KINDS:
        msg = f"kind must be one of {BACKOFF_KINDS}, got {kind!r}"
        raise ValueError(msg)
