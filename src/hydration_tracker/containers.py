"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from hydration_tracker.adapters.supabase_ledger_repository import (
    SupabaseLedgerRepository,
)
from hydration_tracker.adapters.supabase_preference_repository import (
    SupabasePreferenceRepository,
)
from hydration_tracker.adapters.telegram_notifier import (
    HttpxTelegramNotifier,
    LoggingNotifier,
)
from hydration_tracker.config import Settings
from hydration_tracker.services.aggregation import AggregationService
from hydration_tracker.services.clock import Clock, SystemClock
from hydration_tracker.services.history import HistoryService
from hydration_tracker.services.intake import IntakeService
from hydration_tracker.services.preferences import PreferenceService
from hydration_tracker.services.reminders import Notifier, ReminderService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    clock: Clock
    notifier: Notifier
    preference_service: PreferenceService
    aggregation_service: AggregationService
    intake_service: IntakeService
    history_service: HistoryService
    reminder_service: ReminderService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    ledger_repository = SupabaseLedgerRepository(supabase_client)
    preference_repository = SupabasePreferenceRepository(supabase_client)
    clock = SystemClock(resolved_settings.timezone)
    if resolved_settings.telegram_enabled:
        notifier: HttpxTelegramNotifier | LoggingNotifier = (
            HttpxTelegramNotifier.create(
                bot_token=str(resolved_settings.telegram_bot_token),
                chat_id=str(resolved_settings.telegram_chat_id),
            )
        )
    else:
        notifier = LoggingNotifier()

    preference_service = PreferenceService(preference_repository)
    aggregation_service = AggregationService(
        repository=ledger_repository,
        preferences=preference_service,
    )
    intake_service = IntakeService(
        repository=ledger_repository,
        preferences=preference_service,
    )
    history_service = HistoryService(
        repository=ledger_repository,
        aggregation=aggregation_service,
        clock=clock,
    )
    reminder_service = ReminderService(
        aggregation=aggregation_service,
        notifier=notifier,
        clock=clock,
    )

    async def close_resources() -> None:
        await notifier.close()

    return AppContainer(
        settings=resolved_settings,
        clock=clock,
        notifier=notifier,
        preference_service=preference_service,
        aggregation_service=aggregation_service,
        intake_service=intake_service,
        history_service=history_service,
        reminder_service=reminder_service,
        close_resources=close_resources,
    )
