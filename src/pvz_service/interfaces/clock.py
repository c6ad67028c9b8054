"""Interface for clocks."""

import abc
from datetime import datetime

# pylint: disable=too-few-public-methods


class Clock(abc.ABC):
    """Source of the current time."""

    @abc.abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
