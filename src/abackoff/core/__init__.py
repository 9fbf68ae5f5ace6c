r"""Configuration layer for building backoff strategies from settings."""

from __future__ import annotations

__all__ = [
    "DEFAULT_DELAY",
    "DEFAULT_KIND",
    "DEFAULT_MAX_DELAY",
    "DEFAULT_MIN_DELAY",
    "BackoffConfig",
    "create_backoff",
]

from abackoff.core.config import (
    DEFAULT_DELAY,
    DEFAULT_KIND,
    DEFAULT_MAX_DELAY,
    DEFAULT_MIN_DELAY,
    BackoffConfig,
    create_backoff,
)
