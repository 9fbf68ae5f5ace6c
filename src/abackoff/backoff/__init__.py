r"""Backoff strategies for retry delays.

This package provides the constant, exponential (with jitter) and
uniform random backoff strategies, together with their common abstract
base class.
"""

from __future__ import annotations

__all__ = [
    "BaseBackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "UniformBackoff",
]

from abackoff.backoff.base import BaseBackoffStrategy
from abackoff.backoff.constant import ConstantBackoff
from abackoff.backoff.exponential import ExponentialBackoff
from abackoff.backoff.uniform import UniformBackoff
