"""Reconnect back-off policy: fixed, linear or exponential delays."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

DEFAULT_RECONNECT_MIN_DELAY = 1000  # ms
DEFAULT_RECONNECT_MAX_DELAY = 60000  # ms
DEFAULT_RECONNECT_DELAY_POLICY = 2  # exponential

FIXED = 0
LINEAR = 1


@dataclass
class ReconnectSetting:
    """State of a reconnect schedule.

    ``delay_policy`` selects how the delay evolves: 0 keeps it fixed at
    ``min_delay``, 1 adds ``min_delay`` each time, any other value
    multiplies the delay by itself. The delay is always clamped to
    ``[min_delay, max_delay]``. ``max_retry_cnt`` of ``None`` retries forever.
    """

    min_delay: int = DEFAULT_RECONNECT_MIN_DELAY
    max_delay: int = DEFAULT_RECONNECT_MAX_DELAY
    cur_delay: int = 0
    delay_policy: int = DEFAULT_RECONNECT_DELAY_POLICY
    max_retry_cnt: Optional[int] = None
    cur_retry_cnt: int = 0

    def reset(self) -> None:
        """Start the schedule over."""
        self.cur_delay = 0
        self.cur_retry_cnt = 0

    def can_retry(self) -> bool:
        """Count one more attempt and report whether it is allowed."""
        self.cur_retry_cnt += 1
        return self.max_retry_cnt is None or self.cur_retry_cnt < self.max_retry_cnt

    def calc_delay(self) -> int:
        """Advance the schedule and return the next delay in milliseconds."""
        if self.delay_policy == FIXED:
            delay = self.min_delay
        elif self.delay_policy == LINEAR:
            delay = self.cur_delay + self.min_delay
        else:
            delay = self.cur_delay * self.delay_policy
        delay = max(delay, self.min_delay)
        self.cur_delay = min(delay, self.max_delay)
        return self.cur_delay