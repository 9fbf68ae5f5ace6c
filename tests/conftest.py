from __future__ import annotations

import random

import pytest


class MidpointRandom(random.Random):
    """Random source whose draws always return the middle of the range.

    With this source the exponential jitter is always zero and the uniform
    draw is always ``span // 2``.
    """

    def randint(self, a: int, b: int) -> int:
        return (a + b) // 2

    def randrange(self, start: int, stop: int | None = None, step: int = 1) -> int:  # noqa: ARG002
        if stop is None:
            start, stop = 0, start
        return (start + stop) // 2


@pytest.fixture
def rng() -> random.Random:
    """Create a deterministic random source for testing."""
    return random.Random(42)


@pytest.fixture
def midpoint_rng() -> random.Random:
    """Create a random source that always draws the middle of the range."""
    return MidpointRandom(0)
