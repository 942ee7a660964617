"""Behind-schedule reminder heuristic."""

import logging
from dataclasses import dataclass
from datetime import time
from typing import Protocol

from hydration_tracker.domain.reminders import ReminderDecision
from hydration_tracker.services.aggregation import AggregationService
from hydration_tracker.services.clock import Clock

DAY_START = time(7, 0)
DAY_END = time(22, 0)
BEHIND_THRESHOLD = 20

REMINDER_TITLE = "Hydration Reminder"
REMINDER_BODY = (
    "You're a bit behind on your water intake goal today. Time for a drink!"
)

logger = logging.getLogger(__name__)


class Notifier(Protocol):
    """Interface for delivering one-shot notifications."""

    async def notify(self, title: str, body: str) -> None:
        """Deliver a notification."""


def _minutes(moment: time) -> int:
    return moment.hour * 60 + moment.minute


def is_quiet_hours(now: time) -> bool:
    """Return True before 07:00 or after 22:00."""
    return now < DAY_START or now > DAY_END


def expected_progress(now: time) -> int:
    """Return the expected percentage on a linear ramp from 07:00 to 22:00."""
    if now < DAY_START:
        return 0
    if now > DAY_END:
        return 100
    elapsed = _minutes(now) - _minutes(DAY_START)
    span = _minutes(DAY_END) - _minutes(DAY_START)
    return min(max(elapsed * 100 // span, 0), 100)


def should_remind(actual_progress: int, expected: int) -> bool:
    """Return True when more than the threshold behind schedule."""
    return actual_progress < expected - BEHIND_THRESHOLD


@dataclass
class ReminderService:
    """Runs a reminder check against today's progress."""

    aggregation: AggregationService
    notifier: Notifier
    clock: Clock

    async def run_check(self) -> ReminderDecision:
        """Notify once if the user is behind for the time of day."""
        now = self.clock.now()
        local_time = now.time()
        if is_quiet_hours(local_time):
            return ReminderDecision(
                checked_at=now,
                quiet_hours=True,
                expected_progress=expected_progress(local_time),
                actual_progress=0,
                fired=False,
            )

        actual = self.aggregation.progress_percentage(now.date())
        expected = expected_progress(local_time)
        fired = should_remind(actual, expected)
        if fired:
            logger.info(
                "Sending hydration reminder",
                extra={"expected": expected, "actual": actual},
            )
            await self.notifier.notify(REMINDER_TITLE, REMINDER_BODY)
        return ReminderDecision(
            checked_at=now,
            quiet_hours=False,
            expected_progress=expected,
            actual_progress=actual,
            fired=fired,
        )
