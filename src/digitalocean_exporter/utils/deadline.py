"""
A per-call time budget shared by every request a single collection makes.

Each collector creates a fresh Deadline on every scrape; paginated listings
spend the remaining budget page by page, and each response body is read
chunk by chunk against it, so the whole listing is bounded by the configured
timeout rather than each request on its own.
"""

import time
from typing import Callable

import httpx

from ..core.exceptions import APITimeoutError


class Deadline:
    def __init__(self, seconds: float, clock: Callable[[], float] = time.monotonic):
        self._clock = clock
        self.seconds = seconds
        self.expires_at = clock() + seconds

    def remaining(self) -> float:
        return max(0.0, self.expires_at - self._clock())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0

    def timeout(self) -> httpx.Timeout:
        """
        Returns an httpx timeout bounded by what is left of the budget.

        Raises:
            APITimeoutError: If the deadline has already passed.
        """
        remaining = self.remaining()
        if remaining <= 0:
            raise APITimeoutError(f"deadline of {self.seconds:.3f}s exceeded")
        return httpx.Timeout(remaining)

    def __repr__(self) -> str:
        return f"Deadline(seconds={self.seconds}, remaining={self.remaining():.3f})"
