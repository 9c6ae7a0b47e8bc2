"""Token bucket rate limiter for Todoist API calls.

The bucket refills lazily on each admission check, so no background timer is
needed. Admission never waits: a denied call is the caller's problem.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from threading import Lock

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class RateLimitConfig(BaseModel):
    """Request quota: ``capacity`` requests per ``window_seconds``."""

    capacity: int = Field(default=1000, ge=1)
    window_seconds: float = Field(default=900.0, gt=0)

    @property
    def refill_rate(self) -> float:
        """Tokens added per second."""
        return self.capacity / self.window_seconds


class TokenBucket:
    """
    Token bucket admission gate.

    Args:
        capacity: Maximum balance (burst size).
        refill_rate: Tokens added per second of elapsed time.
        clock: Monotonic time source in seconds.
    """

    def __init__(
        self,
        capacity: float = 1000,
        refill_rate: float = 1000 / 900,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        if refill_rate < 0:
            raise ValueError("refill_rate must not be negative")
        self.capacity = float(capacity)
        self.refill_rate = float(refill_rate)
        self._clock = clock
        self._tokens = self.capacity
        self._last_refill = clock()
        self._lock = Lock()

    @classmethod
    def from_config(
        cls,
        config: RateLimitConfig,
        *,
        clock: Callable[[], float] = time.monotonic,
    ) -> TokenBucket:
        return cls(config.capacity, config.refill_rate, clock=clock)

    def try_consume(self, tokens: float = 1) -> bool:
        """
        Take ``tokens`` from the bucket if the balance allows it.

        Returns True if admitted. On denial the balance is left untouched.
        """
        if tokens <= 0:
            raise ValueError("tokens must be positive")

        with self._lock:
            self._refill()

            if self._tokens >= tokens:
                self._tokens -= tokens
                return True

            available = self._tokens

        logger.warning(
            "rate limit denial: requested %s, available %.2f", tokens, available
        )
        return False

    def _refill(self) -> None:
        """Refill tokens based on elapsed time. Caller holds the lock."""
        now = self._clock()
        elapsed = max(0.0, now - self._last_refill)
        self._last_refill = now

        self._tokens = min(self.capacity, self._tokens + elapsed * self.refill_rate)

    @property
    def available_tokens(self) -> float:
        """Current balance, after accounting for elapsed time."""
        with self._lock:
            self._refill()
            return self._tokens

    def reset(self) -> None:
        """Refill the bucket to capacity."""
        with self._lock:
            self._tokens = self.capacity
            self._last_refill = self._clock()
