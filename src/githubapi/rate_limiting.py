"""GitHub API rate limit accounting."""

import time
from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class RateLimit:
    """Rate limit quota reported by a GitHub API response."""

    limit: int
    remaining: int
    reset: int

    def __post_init__(self) -> None:
        """Reject counters that cannot come from a consistent quota."""
        if self.limit < 0 or self.remaining < 0 or self.reset < 0:
            raise ValueError("Rate limit counters must be non-negative")
        if self.remaining > self.limit:
            raise ValueError(
                f"Remaining calls ({self.remaining}) exceed limit ({self.limit})"
            )

    @property
    def reset_datetime(self) -> datetime:
        """Get reset time as datetime."""
        return datetime.fromtimestamp(self.reset)

    @property
    def seconds_until_reset(self) -> float:
        """Get seconds until rate limit resets."""
        return max(0, self.reset - time.time())

    @property
    def is_exceeded(self) -> bool:
        """Check if rate limit is exceeded."""
        return self.remaining <= 0

    @property
    def usage_percentage(self) -> float:
        """Get percentage of rate limit used."""
        if self.limit == 0:
            return 0.0
        return ((self.limit - self.remaining) / self.limit) * 100
