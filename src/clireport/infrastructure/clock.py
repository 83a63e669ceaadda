"""Wall-clock access for timestamp lines"""

from datetime import datetime
from typing import Protocol


class Clock(Protocol):
    """Source of the current time, formatted by a strftime pattern."""

    def strftime(self, pattern: str) -> str:
        ...


class SystemClock:
    """Local wall clock"""

    def strftime(self, pattern: str) -> str:
        return datetime.now().strftime(pattern)


class FixedClock:
    """Clock frozen at a given moment"""

    def __init__(self, moment: datetime):
        self.moment = moment

    def strftime(self, pattern: str) -> str:
        return self.moment.strftime(pattern)
