"""
Deterministic time mocking utilities for tests.

Provides a controllable clock so TTL expiry can be tested without sleeping.
"""


class FrozenTime:
    """
    Time controller for deterministic testing.

    Instances are callable, so they can be passed anywhere a
    ``time.time``-style clock is expected.
    """

    def __init__(self, initial_timestamp: float = 1000.0):
        self._timestamp = initial_timestamp

    def __call__(self) -> float:
        return self._timestamp

    def now(self) -> float:
        """Get current frozen timestamp."""
        return self._timestamp

    def advance(self, seconds: float) -> None:
        """Advance time by specified seconds."""
        self._timestamp += seconds

    def set_time(self, timestamp: float) -> None:
        """Set time to specific timestamp."""
        self._timestamp = timestamp


# Predefined time scenarios for common test cases
TIMESTAMP_START = 1000.0
ONE_HOUR = 3600.0
