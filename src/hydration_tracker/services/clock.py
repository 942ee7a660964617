"""Clock abstractions."""

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol
from zoneinfo import ZoneInfo


class Clock(Protocol):
    """Source of the current local time."""

    def now(self) -> datetime:
        """Return the current local datetime."""

    def today(self) -> date:
        """Return the current local calendar day."""


@dataclass
class SystemClock(Clock):
    """Wall clock in a fixed IANA timezone."""

    timezone_name: str = "UTC"

    def now(self) -> datetime:
        """Return the current time in the configured timezone."""
        return datetime.now(tz=ZoneInfo(self.timezone_name))

    def today(self) -> date:
        """Return today's date in the configured timezone."""
        return self.now().date()
