r"""Uniform random backoff strategy."""

from __future__ import annotations

__all__ = ["UniformBackoff"]

import logging
import threading
from typing import TYPE_CHECKING

from abackoff.backoff.base import BaseBackoffStrategy, _default_rng
from abackoff.utils.duration import as_duration
from abackoff.utils.validation import validate_delay_range

if TYPE_CHECKING:
    import random
    from datetime import timedelta

logger: logging.Logger = logging.getLogger(__name__)


class UniformBackoff(BaseBackoffStrategy):
    """Uniform random backoff strategy.

    Each call returns an independent delay drawn uniformly from the
    half-open range ``[min_delay, max_delay)``. When both bounds are
    equal, ``min_delay`` is returned.

    Args:
        min_delay: The smallest delay returned. An ``int`` is taken as
            nanoseconds, a ``float`` as seconds and a ``timedelta`` as
            itself.
        max_delay: The exclusive upper bound. Must be >= min_delay.
        rng: Optional random source owned by this strategy. Defaults to
            a new generator seeded from the current time.

    Raises:
        ValueError: If max_delay is smaller than min_delay.

    Example:
        ```pycon
        >>> import random
        >>> from abackoff.backoff import UniformBackoff
        >>> from abackoff.utils.duration import SECOND
        >>> backoff = UniformBackoff(SECOND, 10 * SECOND, rng=random.Random(42))
        >>> SECOND <= backoff.next() < 10 * SECOND
        True

        ```
    """

    def __init__(
        self,
        min_delay: int | float | timedelta,
        max_delay: int | float | timedelta,
        *,
        rng: random.Random | None = None,
    ) -> None:
        min_delay = as_duration(min_delay)
        max_delay = as_duration(max_delay)
        validate_delay_range(min_delay, max_delay, lower_name="min_delay", upper_name="max_delay")

        self.min_delay = min_delay
        self.max_delay = max_delay
        self._rng = rng if rng is not None else _default_rng()
        self._lock = threading.Lock()
        logger.debug(f"Created uniform backoff (min_delay={min_delay}ns, max_delay={max_delay}ns)")

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(min_delay={self.min_delay}, "
            f"max_delay={self.max_delay})"
        )

    def next(self) -> int:
        span = self.max_delay - self.min_delay
        if span == 0:
            return self.min_delay
        with self._lock:
            draw = self._rng.randrange(span)
        return self.min_delay + draw
