r"""Exponential backoff strategy with jitter."""

from __future__ import annotations

__all__ = ["ExponentialBackoff"]

import logging
import threading
from typing import TYPE_CHECKING

from abackoff.backoff.base import BaseBackoffStrategy, _default_rng
from abackoff.utils.duration import as_duration
from abackoff.utils.validation import validate_delay_range, validate_non_negative

if TYPE_CHECKING:
    import random
    from datetime import timedelta

logger: logging.Logger = logging.getLogger(__name__)


class ExponentialBackoff(BaseBackoffStrategy):
    """Exponential backoff strategy with 25% jitter.

    The first call returns ``initial_delay``. Each call then doubles the
    internal delay and adds a random jitter drawn uniformly from
    ``[-delay // 4, delay // 4]``, capped at ``max_delay``. Once the cap
    is reached every further call returns exactly ``max_delay``.

    The jitter bound uses integer division, so delays below 4ns grow
    without jitter.

    Instances are safe to share between threads: the random draw and
    the state update of each call happen under a per-instance lock.

    Args:
        initial_delay: The first delay returned. Must be >= 0. An
            ``int`` is taken as nanoseconds, a ``float`` as seconds and a
            ``timedelta`` as itself.
        max_delay: The cap on the delay. Must be >= initial_delay.
        rng: Optional random source owned by this strategy. Pass a seeded
            ``random.Random`` for reproducible sequences. Defaults to a
            new generator seeded from the current time.

    Raises:
        ValueError: If initial_delay is negative or max_delay is smaller
            than initial_delay.

    Example:
        ```pycon
        >>> import random
        >>> from abackoff.backoff import ExponentialBackoff
        >>> from abackoff.utils.duration import SECOND
        >>> backoff = ExponentialBackoff(SECOND, 10 * SECOND, rng=random.Random(42))
        >>> backoff.next()  # First call returns the initial delay
        1000000000
        >>> 1_750_000_000 <= backoff.next() <= 2_250_000_000
        True
        >>> for _ in range(10):
        ...     _ = backoff.next()
        ...
        >>> backoff.next()  # Saturated
        10000000000

        ```
    """

    def __init__(
        self,
        initial_delay: int | float | timedelta,
        max_delay: int | float | timedelta,
        *,
        rng: random.Random | None = None,
    ) -> None:
        initial_delay = as_duration(initial_delay)
        max_delay = as_duration(max_delay)
        validate_non_negative(initial_delay, name="initial_delay")
        validate_delay_range(
            initial_delay, max_delay, lower_name="initial_delay", upper_name="max_delay"
        )

        self.initial_delay = initial_delay
        self.max_delay = max_delay
        self._current = initial_delay
        self._rng = rng if rng is not None else _default_rng()
        self._lock = threading.Lock()
        logger.debug(
            f"Created exponential backoff (initial_delay={initial_delay}ns, max_delay={max_delay}ns)"
        )

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__qualname__}(initial_delay={self.initial_delay}, "
            f"max_delay={self.max_delay})"
        )

    def next(self) -> int:
        """Return the current delay and advance the sequence.

        Returns:
            The delay in nanoseconds. The first call returns
            ``initial_delay`` and no value exceeds ``max_delay``.
        """
        with self._lock:
            delay = self._current
            jitter_bound = delay // 4
            jitter = self._rng.randint(0, 2 * jitter_bound) - jitter_bound
            self._current = min(delay * 2 + jitter, self.max_delay)
            saturated = delay != self.max_delay and self._current == self.max_delay

        if saturated:
            logger.debug(f"Exponential backoff reached max_delay={self.max_delay}ns")
        return delay
