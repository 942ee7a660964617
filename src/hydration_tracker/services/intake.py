"""Intake recording service."""

import logging
import threading
import weakref
from dataclasses import dataclass, field
from datetime import date

from hydration_tracker.domain.errors import InvalidGoal
from hydration_tracker.domain.hydration import GoalSetting, IncrementType, IntakeEvent
from hydration_tracker.services.aggregation import LedgerRepository
from hydration_tracker.services.preferences import PreferenceService

logger = logging.getLogger(__name__)


@dataclass
class IntakeService:
    """Validates intake deltas and appends them to the ledger.

    Removals never take a day's total below zero: a delta larger than the
    current total is clamped to zero it out instead of being rejected. The
    read-then-append for removals is serialized per day within this process
    only; concurrent writers in other processes can still race. A day's lock
    is dropped once no removal holds it.
    """

    repository: LedgerRepository
    preferences: PreferenceService
    _day_locks: weakref.WeakValueDictionary[date, threading.Lock] = field(
        default_factory=weakref.WeakValueDictionary, init=False, repr=False
    )
    _locks_guard: threading.Lock = field(
        default_factory=threading.Lock, init=False, repr=False
    )

    def add_intake(self, day: date, amount_oz: int) -> IntakeEvent:
        """Append a signed delta, clamping removals at a zero total."""
        if amount_oz >= 0:
            return self.repository.append(day, amount_oz)

        with self._lock_for(day):
            current_total = self.repository.sum_by_date(day) or 0
            if current_total + amount_oz < 0:
                logger.info(
                    "Clamping removal to current total",
                    extra={
                        "day": str(day),
                        "requested_oz": amount_oz,
                        "current_oz": current_total,
                    },
                )
                amount_oz = -current_total
            return self.repository.append(day, amount_oz)

    def add_full_cup(self, day: date) -> IntakeEvent | None:
        """Log one cup; does nothing when the stored cup size is not positive."""
        cup_size = self.preferences.get_cup_size()
        if cup_size <= 0:
            return None
        return self.add_intake(day, cup_size)

    def add_quarter_cup(self, day: date) -> IntakeEvent | None:
        """Log a quarter cup; does nothing when the cup is under 4 oz."""
        quarter = self.preferences.get_cup_size() // 4
        if quarter <= 0:
            return None
        return self.add_intake(day, quarter)

    def remove_last_increment(
        self, day: date, last_increment: IncrementType = IncrementType.FULL
    ) -> IntakeEvent | None:
        """Remove one increment of the kind the caller added last.

        Does nothing when the increment is not a positive amount.
        """
        cup_size = self.preferences.get_cup_size()
        if last_increment is IncrementType.QUARTER:
            amount = cup_size // 4
        else:
            amount = cup_size
        if amount <= 0:
            return None
        return self.add_intake(day, -amount)

    def set_daily_goal(self, day: date, goal_oz: int) -> GoalSetting:
        """Set the goal effective from day, replacing one set for that day."""
        if goal_oz <= 0:
            raise InvalidGoal(goal_oz)
        goal = GoalSetting(effective_date=day, goal_oz=goal_oz)
        self.repository.upsert_goal(goal)
        return goal

    def get_cup_size(self) -> int:
        """Return the current cup size in ounces."""
        return self.preferences.get_cup_size()

    def set_cup_size(self, ounces: int) -> None:
        """Change the cup size used by later increments."""
        self.preferences.set_cup_size(ounces)

    def _lock_for(self, day: date) -> threading.Lock:
        with self._locks_guard:
            lock = self._day_locks.get(day)
            if lock is None:
                lock = threading.Lock()
                self._day_locks[day] = lock
            return lock
