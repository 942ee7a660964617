"""Domain models for reminder checks."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ReminderDecision:
    """Outcome of a single reminder check."""

    checked_at: datetime
    quiet_hours: bool
    expected_progress: int
    actual_progress: int
    fired: bool
