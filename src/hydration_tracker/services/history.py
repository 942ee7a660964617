"""History summaries over a range of days."""

import logging
from dataclasses import dataclass
from datetime import date, timedelta

from hydration_tracker.domain.errors import StoreUnavailable
from hydration_tracker.domain.hydration import HistoryEntry, HistorySummary
from hydration_tracker.services.aggregation import (
    AggregationService,
    LedgerRepository,
    cups_for,
    percentage_of_goal,
)
from hydration_tracker.services.clock import Clock

DEFAULT_HISTORY_DAYS = 30

logger = logging.getLogger(__name__)


@dataclass
class HistoryService:
    """Joins daily totals with the goal active on each day."""

    repository: LedgerRepository
    aggregation: AggregationService
    clock: Clock

    def history_for_range(self, start: date, end: date) -> list[HistoryEntry]:
        """Return entries for logged days in [start, end], newest first."""
        try:
            totals = self.repository.range_grouped_totals(start, end)
        except StoreUnavailable:
            logger.exception(
                "Error getting history for date range",
                extra={"start": str(start), "end": str(end)},
            )
            return []

        cup_size = self.aggregation.current_cup_size()
        entries = []
        for total in totals:
            goal = self.aggregation.active_goal_for_date(total.day)
            entries.append(
                HistoryEntry(
                    day=total.day,
                    total_oz=total.total_oz,
                    cups=cups_for(total.total_oz, cup_size),
                    percentage_complete=percentage_of_goal(total.total_oz, goal),
                    goal_oz=goal,
                )
            )
        return sorted(entries, key=lambda entry: entry.day, reverse=True)

    def recent_history(self, days: int = DEFAULT_HISTORY_DAYS) -> HistorySummary:
        """Return the summary for the last ``days`` days including today."""
        end = self.clock.today()
        start = end - timedelta(days=max(days, 1) - 1)
        return summarize(self.history_for_range(start, end))


def summarize(entries: list[HistoryEntry]) -> HistorySummary:
    """Compute the average intake and share of days on target."""
    count = len(entries)
    if count == 0:
        return HistorySummary(
            entries=[], average_oz=0, days_on_target=0, percent_on_target=0
        )
    days_on_target = sum(1 for entry in entries if entry.percentage_complete >= 100)
    return HistorySummary(
        entries=entries,
        average_oz=sum(entry.total_oz for entry in entries) // count,
        days_on_target=days_on_target,
        percent_on_target=days_on_target * 100 // count,
    )
