"""Clock implementations."""

from datetime import datetime, timedelta, timezone

from pvz_service.interfaces.clock import Clock

# pylint: disable=too-few-public-methods


class SystemClock(Clock):
    """Wall-clock time in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedStepClock(Clock):
    """Deterministic clock advancing by a fixed step on every call.

    Note:
        Intended for tests and demos where timestamps must be predictable.
    """

    def __init__(
        self,
        start: datetime = datetime(2025, 1, 1, tzinfo=timezone.utc),
        step: timedelta = timedelta(seconds=1),
    ) -> None:
        self._current = start
        self._step = step

    def now(self) -> datetime:
        current = self._current
        self._current += self._step
        return current
