# docgen/rate_limiter.py

"""
Spacing of LLM calls to stay under a calls-per-minute budget.
"""

import time
import logging
import threading
from typing import Optional

logger = logging.getLogger(__name__)


class RateLimiter:
    """Enforces a minimum interval between calls across threads."""

    def __init__(self, calls_per_minute: int = 20):
        """
        Initialize the rate limiter.

        Args:
            calls_per_minute: Maximum calls per minute; 0 or less disables limiting
        """
        self.calls_per_minute = calls_per_minute
        self.min_interval = 60.0 / calls_per_minute if calls_per_minute > 0 else 0.0
        self.next_slot: Optional[float] = None
        self.call_count = 0
        self._lock = threading.Lock()

        logger.info(f"Rate limiter initialized: {calls_per_minute} calls/minute "
                    f"(min interval: {self.min_interval:.2f}s)")

    def wait_if_needed(self) -> float:
        """
        Block until the caller may make its call.

        Slots are reserved under the lock and slept on outside it, so
        concurrent callers queue up one interval apart.

        Returns:
            Seconds waited
        """
        with self._lock:
            self.call_count += 1
            if self.min_interval <= 0:
                return 0.0
            now = time.monotonic()
            slot = now if self.next_slot is None else max(now, self.next_slot)
            self.next_slot = slot + self.min_interval

        wait_time = slot - now
        if wait_time > 0:
            logger.debug(f"Rate limit: waiting {wait_time:.2f}s before next call")
            time.sleep(wait_time)
        return wait_time

    def reset(self) -> None:
        with self._lock:
            self.next_slot = None
            self.call_count = 0
        logger.debug("Rate limiter reset")

    def get_stats(self) -> dict:
        return {
            'calls_per_minute': self.calls_per_minute,
            'min_interval': self.min_interval,
            'total_calls': self.call_count,
        }
