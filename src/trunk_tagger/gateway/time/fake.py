"""Fake time implementation for testing."""

from trunk_tagger.gateway.time.abc import Time


class FakeTime(Time):
    """Test implementation that records sleeps without delaying.

    The fake clock starts at ``start`` and advances by exactly the amount
    passed to sleep(), so deadline arithmetic is deterministic.

    Mutation Tracking:
    -----------------
    - sleep_calls: List of durations passed to sleep()
    """

    def __init__(self, *, start: float = 0.0) -> None:
        self._now = start
        self._sleep_calls: list[float] = []

    def sleep(self, seconds: float) -> None:
        self._sleep_calls.append(seconds)
        self._now += seconds

    def monotonic(self) -> float:
        return self._now

    def advance(self, seconds: float) -> None:
        """Move the clock forward without recording a sleep (simulates slow calls)."""
        self._now += seconds

    @property
    def sleep_calls(self) -> list[float]:
        """Durations passed to sleep(), in call order.

        This property is for test assertions only.
        """
        return self._sleep_calls.copy()
