r"""Configuration dataclass and defaults for backoff strategies.

This module provides configuration constants and a dataclass-based
configuration object that describes a backoff strategy declaratively,
for example when the strategy is read from application settings.
"""

from __future__ import annotations

__all__ = [
    "BackoffConfig",
    "DEFAULT_DELAY",
    "DEFAULT_KIND",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_MIN_DELAY",
    "create_backoff",
]

import logging
import random
from dataclasses import dataclass, replace
from datetime import timedelta
from typing import Any

from abackoff.backoff.constant import ConstantBackoff
from abackoff.backoff.exponential import ExponentialBackoff
from abackoff.backoff.uniform import UniformBackoff
from abackoff.utils.duration import SECOND, as_duration
from abackoff.utils.validation import (
    validate_delay_range,
    validate_kind,
    validate_non_negative,
)

logger: logging.Logger = logging.getLogger(__name__)

# Default strategy
DEFAULT_KIND = "exponential"

# Fixed delay used by the constant strategy
DEFAULT_DELAY = SECOND

# Lower bound of the uniform strategy, initial delay of the exponential one
DEFAULT_MIN_DELAY = SECOND

# Upper bound shared by the exponential and uniform strategies
DEFAULT_MAX_DELAY = 10 * SECOND


@dataclass
class BackoffConfig:
    """Declarative configuration of a backoff strategy.

    Delays accept an ``int`` (nanoseconds), a ``float`` (seconds) or a
    ``timedelta``.

    Args:
        kind: The strategy name: ``"constant"``, ``"exponential"`` or
            ``"uniform"``.
        delay: The fixed delay of the constant strategy.
        min_delay: The initial delay of the exponential strategy, or the
            lower bound of the uniform strategy.
        max_delay: The cap of the exponential strategy, or the exclusive
            upper bound of the uniform strategy. Must be >= min_delay.
        seed: Optional seed for the strategy's random source. Set it to
            get reproducible delay sequences.

    Example:
        ```pycon
        >>> from abackoff.core.config import BackoffConfig
        >>> config = BackoffConfig(kind="constant", delay=0.5)
        >>> config.build().next()
        500000000
        >>> merged = config.merge(delay=2.0)
        >>> merged.build().next()
        2000000000
        >>> config.delay  # Original unchanged
        0.5

        ```
    """

    kind: str = DEFAULT_KIND
    delay: int | float | timedelta = DEFAULT_DELAY
    min_delay: int | float | timedelta = DEFAULT_MIN_DELAY
    max_delay: int | float | timedelta = DEFAULT_MAX_DELAY
    seed: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration parameters after initialization.

        Raises:
            ValueError: If the kind is unknown, the delay range is
                inverted, or the exponential initial delay is negative.
            TypeError: If a delay has an unsupported type.
        """
        validate_kind(self.kind)
        if self.kind == "constant":
            as_duration(self.delay)
        else:
            min_delay = as_duration(self.min_delay)
            if self.kind == "exponential":
                validate_non_negative(min_delay, name="min_delay")
            validate_delay_range(
                min_delay,
                as_duration(self.max_delay),
                lower_name="min_delay",
                upper_name="max_delay",
            )

    def merge(self, **overrides: Any) -> BackoffConfig:
        """Create a new config with specified parameters overridden.

        Only non-None override values are applied.

        Args:
            **overrides: Keyword arguments for parameters to override.

        Returns:
            A new BackoffConfig instance with overrides applied.

        Example:
            ```pycon
            >>> from abackoff.core.config import BackoffConfig
            >>> config = BackoffConfig(kind="uniform")
            >>> config.merge(kind="exponential", seed=None).kind
            'exponential'

            ```
        """
        filtered_overrides = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **filtered_overrides)

    def build(self) -> ConstantBackoff | ExponentialBackoff | UniformBackoff:
        """Create the configured backoff strategy.

        Each call returns a new, independent strategy. With a seed, two
        strategies built from the same config produce the same delays.

        Returns:
            The backoff strategy.
        """
        logger.debug(f"Building {self.kind} backoff from {self}")
        if self.kind == "constant":
            return ConstantBackoff(self.delay)

        rng = random.Random(self.seed) if self.seed is not None else None  # noqa: S311
        if self.kind == "exponential":
            return ExponentialBackoff(self.min_delay, self.max_delay, rng=rng)
        return UniformBackoff(self.min_delay, self.max_delay, rng=rng)


def create_backoff(
    kind: str = DEFAULT_KIND, **kwargs: Any
) -> ConstantBackoff | ExponentialBackoff | UniformBackoff:
    """Create a backoff strategy from its name and parameters.

    Args:
        kind: The strategy name: ``"constant"``, ``"exponential"`` or
            ``"uniform"``.
        **kwargs: The other ``BackoffConfig`` fields.

    Returns:
        The backoff strategy.

    Raises:
        ValueError: If the configuration is invalid.

    Example:
        ```pycon
        >>> from abackoff.core.config import create_backoff
        >>> from abackoff.utils.duration import SECOND
        >>> backoff = create_backoff("exponential", min_delay=SECOND, max_delay=4 * SECOND, seed=0)
        >>> backoff.next()
        1000000000

        ```
    """
    return BackoffConfig(kind=kind, **kwargs).build()
