r"""abackoff - Pluggable retry-delay strategies.

This package answers the question "how long should I wait before the
next attempt?" for retry loops, reconnect logic and rate-limited
clients. A strategy object returns successive delays, in nanoseconds,
according to its policy. It does not sleep, retry or decide when to
stop.

Key Features:
    - Constant, exponential (with 25% jitter and a cap) and uniform
      random strategies behind a common ``BaseBackoffStrategy`` interface
    - Thread-safe strategies with per-instance random sources
    - Injectable random sources for reproducible sequences
    - Declarative configuration with ``BackoffConfig``

Example:
    ```pycon
    >>> from abackoff import ConstantBackoff, ExponentialBackoff, UniformBackoff
    >>> from abackoff.utils.duration import MILLISECOND, SECOND
    >>> ConstantBackoff(500 * MILLISECOND).next()
    500000000
    >>> backoff = ExponentialBackoff(SECOND, 10 * SECOND)
    >>> backoff.next()
    1000000000
    >>> SECOND <= UniformBackoff(SECOND, 10 * SECOND).next() < 10 * SECOND
    True

    ```
"""

from __future__ import annotations

__all__ = [
    "BackoffConfig",
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "UniformBackoff",
    "__version__",
    "create_backoff",
]

from importlib.metadata import PackageNotFoundError, version

from abackoff.backoff import (
    BaseBackoffStrategy,
    ConstantBackoff,
    ExponentialBackoff,
    UniformBackoff,
)
from abackoff.core.config import BackoffConfig, create_backoff

try:
    __version__ = version(__name__)
except PackageNotFoundError:  # pragma: no cover
    # Package is not installed, fallback if needed
    __version__ = "0.0.0"
