"""Domain models for hydration tracking."""

from dataclasses import dataclass
from datetime import date
from enum import Enum

DEFAULT_GOAL_OZ = 64
DEFAULT_CUP_SIZE_OZ = 8


class IncrementType(Enum):
    """Kind of the last add action, kept by the caller between requests."""

    FULL = "full"
    QUARTER = "quarter"


@dataclass(frozen=True)
class IntakeEvent:
    """A signed volume delta appended to the ledger."""

    id: int
    day: date
    amount_oz: int


@dataclass(frozen=True)
class GoalSetting:
    """Daily goal that applies from its effective date onward."""

    effective_date: date
    goal_oz: int


@dataclass(frozen=True)
class DailyTotal:
    """Sum of all intake events for a day."""

    day: date
    total_oz: int


@dataclass(frozen=True)
class DailyProgress:
    """Snapshot of a day's intake against its active goal."""

    day: date
    total_oz: int
    cups: float
    goal_oz: int
    percentage_complete: int
    cup_size_oz: int
    drink_count: int


@dataclass(frozen=True)
class HistoryEntry:
    """One day of history joined with the goal active on that day."""

    day: date
    total_oz: int
    cups: float
    percentage_complete: int
    goal_oz: int


@dataclass
class HistorySummary:
    """History entries with range statistics."""

    entries: list[HistoryEntry]
    average_oz: int
    days_on_target: int
    percent_on_target: int
