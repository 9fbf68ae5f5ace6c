r"""Constant backoff strategy."""

from __future__ import annotations

__all__ = ["ConstantBackoff"]

from typing import TYPE_CHECKING

from abackoff.backoff.base import BaseBackoffStrategy
from abackoff.utils.duration import as_duration

if TYPE_CHECKING:
    from datetime import timedelta


class ConstantBackoff(BaseBackoffStrategy):
    """Constant/fixed backoff strategy.

    Returns the same delay on every call. Any value is accepted,
    including zero and negative delays.

    Args:
        duration: The fixed delay. An ``int`` is taken as nanoseconds,
            a ``float`` as seconds and a ``timedelta`` as itself.

    Example:
        ```pycon
        >>> from abackoff.backoff import ConstantBackoff
        >>> from abackoff.utils.duration import MILLISECOND
        >>> backoff = ConstantBackoff(500 * MILLISECOND)
        >>> backoff.next()
        500000000
        >>> backoff.next()
        500000000

        ```
    """

    def __init__(self, duration: int | float | timedelta) -> None:
        self.duration = as_duration(duration)

    def __repr__(self) -> str:
        return f"{self.__class__.__qualname__}(duration={self.duration})"

    def next(self) -> int:
        return self.duration
