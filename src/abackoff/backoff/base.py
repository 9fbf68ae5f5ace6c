r"""Abstract base class for backoff strategies."""

from __future__ import annotations

__all__ = ["BaseBackoffStrategy"]

import random
import time
from abc import ABC, abstractmethod


class BaseBackoffStrategy(ABC):
    """Abstract base class for backoff strategies.

    A backoff strategy answers the question "how long should I wait
    before the next attempt?". Each call to ``next`` returns the next
    delay in nanoseconds according to the strategy's policy. Invalid
    configuration is rejected by the constructor, so ``next`` never
    raises.

    A strategy is also an infinite iterator over its delays.

    Example:
        ```pycon
        >>> from itertools import islice
        >>> from abackoff.backoff import ConstantBackoff
        >>> list(islice(ConstantBackoff(5), 3))
        [5, 5, 5]

        ```
    """

    @abstractmethod
    def next(self) -> int:
        """Return the next delay.

        Returns:
            The delay in nanoseconds to wait before the next attempt.
        """

    def __iter__(self) -> BaseBackoffStrategy:
        return self

    def __next__(self) -> int:
        return self.next()


def _default_rng() -> random.Random:
    # Instances created within the same nanosecond share a seed.
    return random.Random(time.time_ns())  # noqa: S311
