"""
Unit tests for GitHub rate limit accounting.

Why: Rate limit counters are reported to callers on every response, so the
     value object must never hold an inconsistent quota.

What: Tests RateLimit construction, invariants, and derived properties.

How: Builds RateLimit values directly and patches time for reset math.
"""

import time
from unittest.mock import patch

import pytest

from githubapi.rate_limiting import RateLimit


class TestRateLimit:
    """Test RateLimit data class."""

    def test_rate_limit_creation(self) -> None:
        """Test basic RateLimit creation."""
        rate_limit = RateLimit(limit=5000, remaining=4500, reset=1700000000)

        assert rate_limit.limit == 5000
        assert rate_limit.remaining == 4500
        assert rate_limit.reset == 1700000000

    def test_rate_limit_is_immutable(self) -> None:
        """Test RateLimit cannot be modified after construction."""
        rate_limit = RateLimit(limit=60, remaining=59, reset=1700000000)

        with pytest.raises(AttributeError):
            rate_limit.remaining = 10  # type: ignore[misc]

    def test_remaining_above_limit_rejected(self) -> None:
        """
        Why: A quota with more remaining calls than its ceiling cannot come
             from a consistent server response.
        What: Tests that remaining > limit raises ValueError.
        How: Constructs RateLimit with remaining one above limit.
        """
        with pytest.raises(ValueError, match="exceed limit"):
            RateLimit(limit=60, remaining=61, reset=1700000000)

    def test_negative_counters_rejected(self) -> None:
        """Test negative counters raise ValueError."""
        with pytest.raises(ValueError):
            RateLimit(limit=-1, remaining=0, reset=0)

    def test_reset_datetime_property(self) -> None:
        """Test reset_datetime property."""
        reset_time = int(time.time()) + 3600
        rate_limit = RateLimit(limit=5000, remaining=4500, reset=reset_time)

        assert rate_limit.reset_datetime.timestamp() == reset_time

    def test_seconds_until_reset(self) -> None:
        """Test seconds_until_reset calculation."""
        with patch("githubapi.rate_limiting.time.time", return_value=1000.0):
            rate_limit = RateLimit(limit=5000, remaining=10, reset=1300)
            assert rate_limit.seconds_until_reset == 300

    def test_seconds_until_reset_past(self) -> None:
        """Test seconds_until_reset is zero once the reset time has passed."""
        with patch("githubapi.rate_limiting.time.time", return_value=2000.0):
            rate_limit = RateLimit(limit=5000, remaining=10, reset=1300)
            assert rate_limit.seconds_until_reset == 0

    def test_is_exceeded(self) -> None:
        """Test is_exceeded property."""
        assert RateLimit(limit=60, remaining=0, reset=0).is_exceeded
        assert not RateLimit(limit=60, remaining=1, reset=0).is_exceeded

    def test_usage_percentage(self) -> None:
        """Test usage_percentage calculation."""
        rate_limit = RateLimit(limit=5000, remaining=1000, reset=0)

        assert rate_limit.usage_percentage == 80.0

    def test_usage_percentage_zero_limit(self) -> None:
        """Test usage_percentage with zero limit."""
        assert RateLimit(limit=0, remaining=0, reset=0).usage_percentage == 0.0
