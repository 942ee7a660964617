"""Supabase repository for scalar preferences."""

from dataclasses import dataclass
from datetime import UTC, datetime

from supabase import Client

from hydration_tracker.adapters.supabase_errors import execute_query
from hydration_tracker.services.preferences import PreferenceRepository


@dataclass
class SupabasePreferenceRepository(PreferenceRepository):
    """Supabase implementation for key/value preferences."""

    client: Client

    def get_int(self, key: str, default: int) -> int:
        """Return the stored value for a key, or the default."""
        response = execute_query(
            self.client.table("preferences").select("value").eq("key", key).limit(1),
            "load preference",
        )
        if not response.data:
            return default
        value = response.data[0].get("value")
        return int(value) if value is not None else default

    def set_int(self, key: str, value: int) -> None:
        """Insert or update the value for a key."""
        execute_query(
            self.client.table("preferences").upsert(
                {
                    "key": key,
                    "value": value,
                    "updated_at": datetime.now(tz=UTC).isoformat(),
                },
                on_conflict="key",
            ),
            "save preference",
        )
