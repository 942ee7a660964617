"""Error translation for Supabase queries."""

import httpx
from postgrest.exceptions import APIError

from hydration_tracker.domain.errors import StoreUnavailable


def execute_query(query, action: str):  # type: ignore[no-untyped-def]
    """Execute a query builder, raising StoreUnavailable on failure."""
    try:
        return query.execute()
    except (APIError, httpx.HTTPError) as exc:
        raise StoreUnavailable(f"Failed to {action}") from exc
