"""Aggregation of ledger events into daily totals and progress."""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Protocol

from hydration_tracker.domain.errors import StoreUnavailable
from hydration_tracker.domain.hydration import (
    DEFAULT_GOAL_OZ,
    DailyProgress,
    DailyTotal,
    GoalSetting,
    IntakeEvent,
)
from hydration_tracker.services.preferences import PreferenceService

logger = logging.getLogger(__name__)


class LedgerRepository(Protocol):
    """Persistence interface for intake events and goal settings."""

    def append(self, day: date, amount_oz: int) -> IntakeEvent:
        """Append an intake event and return it with its assigned id."""

    def sum_by_date(self, day: date) -> int | None:
        """Return the sum of amounts for a day, or None without events."""

    def logs_for(self, day: date) -> list[IntakeEvent]:
        """Return the day's events ordered by id."""

    def latest_goal_as_of(self, day: date) -> GoalSetting | None:
        """Return the goal with the latest effective date on or before day."""

    def upsert_goal(self, goal: GoalSetting) -> None:
        """Insert a goal, replacing any goal with the same effective date."""

    def range_grouped_totals(self, start: date, end: date) -> list[DailyTotal]:
        """Return per-day totals for days in the range that have events."""


def cups_for(total_oz: int, cup_size_oz: int) -> float:
    """Convert ounces to cups with the divisor clamped to 1."""
    return total_oz / max(cup_size_oz, 1)


def percentage_of_goal(total_oz: int, goal_oz: int) -> int:
    """Return the truncated percentage of goal, clamped to [0, 100]."""
    if goal_oz <= 0:
        return 0
    return min(max(total_oz * 100 // goal_oz, 0), 100)


@dataclass
class AggregationService:
    """Read projections over the ledger, recomputed on every call."""

    repository: LedgerRepository
    preferences: PreferenceService

    def total_ounces_for_date(self, day: date) -> int:
        """Return the day's total ounces, 0 when nothing is logged."""
        try:
            return self.repository.sum_by_date(day) or 0
        except StoreUnavailable:
            logger.exception("Error getting total ounces", extra={"day": str(day)})
            return 0

    def total_cups_for_date(self, day: date) -> float:
        """Return the day's total expressed in cups of the current size."""
        try:
            total = self.repository.sum_by_date(day) or 0
        except StoreUnavailable:
            logger.exception("Error getting total cups", extra={"day": str(day)})
            return 0.0
        return cups_for(total, self.current_cup_size())

    def active_goal_for_date(self, day: date) -> int:
        """Return the goal in effect on day, or the default goal."""
        try:
            goal = self.repository.latest_goal_as_of(day)
        except StoreUnavailable:
            logger.exception("Error getting active goal", extra={"day": str(day)})
            return DEFAULT_GOAL_OZ
        return goal.goal_oz if goal else DEFAULT_GOAL_OZ

    def current_cup_size(self) -> int:
        """Return the cup size used to express totals in cups."""
        return self.preferences.get_cup_size()

    def progress_percentage(self, day: date) -> int:
        """Return progress towards the day's goal as an integer percentage."""
        return percentage_of_goal(
            self.total_ounces_for_date(day), self.active_goal_for_date(day)
        )

    def logs_for_date(self, day: date) -> list[IntakeEvent]:
        """Return the raw events logged for a day."""
        try:
            return self.repository.logs_for(day)
        except StoreUnavailable:
            logger.exception("Error getting water logs", extra={"day": str(day)})
            return []

    def progress_for_date(self, day: date) -> DailyProgress:
        """Return a display snapshot of the day's progress."""
        total = self.total_ounces_for_date(day)
        goal = self.active_goal_for_date(day)
        cup_size = self.current_cup_size()
        return DailyProgress(
            day=day,
            total_oz=total,
            cups=cups_for(total, cup_size),
            goal_oz=goal,
            percentage_complete=percentage_of_goal(total, goal),
            cup_size_oz=cup_size,
            drink_count=total // max(cup_size, 1),
        )
