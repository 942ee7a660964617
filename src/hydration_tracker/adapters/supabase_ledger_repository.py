"""Supabase repository for the water log ledger and daily goals."""

from dataclasses import dataclass
from datetime import date

from supabase import Client

from hydration_tracker.adapters.supabase_errors import execute_query
from hydration_tracker.domain.errors import StoreUnavailable
from hydration_tracker.domain.hydration import DailyTotal, GoalSetting, IntakeEvent
from hydration_tracker.services.aggregation import LedgerRepository


@dataclass
class SupabaseLedgerRepository(LedgerRepository):
    """Supabase implementation for intake events and goals."""

    client: Client

    def append(self, day: date, amount_oz: int) -> IntakeEvent:
        """Insert a water log row and return it."""
        response = execute_query(
            self.client.table("water_logs").insert(
                {"date": day.isoformat(), "amount_oz": amount_oz}
            ),
            "append water log",
        )
        if not response.data:
            raise StoreUnavailable("Failed to append water log")
        return _parse_event(response.data[0])

    def sum_by_date(self, day: date) -> int | None:
        """Return the sum of amounts logged on a day."""
        response = execute_query(
            self.client.table("water_logs")
            .select("amount_oz")
            .eq("date", day.isoformat()),
            "sum water logs",
        )
        rows = response.data or []
        if not rows:
            return None
        return sum(int(row.get("amount_oz", 0)) for row in rows)

    def logs_for(self, day: date) -> list[IntakeEvent]:
        """Return the day's water logs in insertion order."""
        response = execute_query(
            self.client.table("water_logs")
            .select("id, date, amount_oz")
            .eq("date", day.isoformat())
            .order("id", desc=False),
            "list water logs",
        )
        return [_parse_event(row) for row in response.data or []]

    def latest_goal_as_of(self, day: date) -> GoalSetting | None:
        """Return the most recent goal starting on or before a day."""
        response = execute_query(
            self.client.table("daily_goals")
            .select("start_date, goal_oz")
            .lte("start_date", day.isoformat())
            .order("start_date", desc=True)
            .limit(1),
            "load daily goal",
        )
        if not response.data:
            return None
        row = response.data[0]
        return GoalSetting(
            effective_date=date.fromisoformat(str(row["start_date"])),
            goal_oz=int(row["goal_oz"]),
        )

    def upsert_goal(self, goal: GoalSetting) -> None:
        """Insert a goal, replacing the row for the same start date."""
        execute_query(
            self.client.table("daily_goals").upsert(
                {
                    "start_date": goal.effective_date.isoformat(),
                    "goal_oz": goal.goal_oz,
                },
                on_conflict="start_date",
            ),
            "save daily goal",
        )

    def range_grouped_totals(self, start: date, end: date) -> list[DailyTotal]:
        """Return per-day totals for logged days in the range, newest first."""
        response = execute_query(
            self.client.table("water_logs")
            .select("date, amount_oz")
            .gte("date", start.isoformat())
            .lte("date", end.isoformat()),
            "load water log history",
        )
        totals: dict[date, int] = {}
        for row in response.data or []:
            day = date.fromisoformat(str(row["date"]))
            totals[day] = totals.get(day, 0) + int(row.get("amount_oz", 0))
        return [
            DailyTotal(day=day, total_oz=total)
            for day, total in sorted(totals.items(), reverse=True)
        ]


def _parse_event(row: dict[str, object]) -> IntakeEvent:
    return IntakeEvent(
        id=int(row["id"]),
        day=date.fromisoformat(str(row["date"])),
        amount_oz=int(row["amount_oz"]),
    )
