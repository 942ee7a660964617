"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from datetime import date, timedelta

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse

from hydration_tracker.api.jobs import router as jobs_router
from hydration_tracker.api.schemas import (
    CupSizeRequest,
    DayRequest,
    GoalRequest,
    IntakeRequest,
    UndoRequest,
)
from hydration_tracker.app_logging import configure_logging
from hydration_tracker.containers import AppContainer
from hydration_tracker.domain.errors import (
    InvalidCupSize,
    InvalidGoal,
    StoreUnavailable,
)
from hydration_tracker.domain.hydration import DailyProgress
from hydration_tracker.services.history import summarize


def create_app(container: AppContainer) -> FastAPI:  # noqa: PLR0915
    """Create a FastAPI app configured with dependencies."""
    configure_logging()
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        yield
        await app.state.container.close_resources()

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(jobs_router)

    @app.exception_handler(StoreUnavailable)
    async def store_unavailable_handler(
        request: Request, exc: StoreUnavailable
    ) -> JSONResponse:
        logger.warning("Store unavailable: %s", exc, extra={"path": request.url.path})
        return JSONResponse(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            content={"detail": str(exc)},
        )

    async def invalid_setting_handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": str(exc)},
        )

    app.add_exception_handler(InvalidGoal, invalid_setting_handler)
    app.add_exception_handler(InvalidCupSize, invalid_setting_handler)

    def _container(request: Request) -> AppContainer:
        return request.app.state.container

    def _progress(state_container: AppContainer, day: date) -> DailyProgress:
        return state_container.aggregation_service.progress_for_date(day)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/today")
    async def today(request: Request, day: date | None = None) -> dict[str, object]:
        """Return the progress snapshot for today or a given day."""
        state_container = _container(request)
        resolved_day = day or state_container.clock.today()
        return {"progress": _progress(state_container, resolved_day)}

    @app.get("/days/{day}/logs")
    async def day_logs(day: date, request: Request) -> dict[str, object]:
        """Return the raw intake events for a day."""
        state_container = _container(request)
        return {"logs": state_container.aggregation_service.logs_for_date(day)}

    @app.post("/intake")
    async def add_intake(payload: IntakeRequest, request: Request) -> dict[str, object]:
        """Log a signed intake delta."""
        state_container = _container(request)
        day = payload.day or state_container.clock.today()
        event = state_container.intake_service.add_intake(day, payload.amount_oz)
        return {"event": event, "progress": _progress(state_container, day)}

    @app.post("/intake/full-cup")
    async def add_full_cup(payload: DayRequest, request: Request) -> dict[str, object]:
        """Log one full cup."""
        state_container = _container(request)
        day = payload.day or state_container.clock.today()
        event = state_container.intake_service.add_full_cup(day)
        return {"event": event, "progress": _progress(state_container, day)}

    @app.post("/intake/quarter-cup")
    async def add_quarter_cup(
        payload: DayRequest, request: Request
    ) -> dict[str, object]:
        """Log a quarter cup."""
        state_container = _container(request)
        day = payload.day or state_container.clock.today()
        event = state_container.intake_service.add_quarter_cup(day)
        return {"event": event, "progress": _progress(state_container, day)}

    @app.post("/intake/undo")
    async def undo_increment(
        payload: UndoRequest, request: Request
    ) -> dict[str, object]:
        """Remove one increment of the kind added last."""
        state_container = _container(request)
        day = payload.day or state_container.clock.today()
        event = state_container.intake_service.remove_last_increment(
            day, payload.last_increment
        )
        return {"event": event, "progress": _progress(state_container, day)}

    @app.get("/history")
    async def history(
        request: Request, start: date | None = None, end: date | None = None
    ) -> dict[str, object]:
        """Return per-day history and range statistics."""
        state_container = _container(request)
        if start is None and end is None:
            return {
                "history": state_container.history_service.recent_history(
                    state_container.settings.history_days
                )
            }
        resolved_end = end or state_container.clock.today()
        resolved_start = start or resolved_end - timedelta(
            days=state_container.settings.history_days - 1
        )
        if resolved_start > resolved_end:
            raise HTTPException(
                status_code=422,
                detail="start must not be after end",
            )
        entries = state_container.history_service.history_for_range(
            resolved_start, resolved_end
        )
        return {"history": summarize(entries)}

    @app.get("/settings")
    async def get_settings(request: Request) -> dict[str, int]:
        """Return the cup size and today's active goal."""
        state_container = _container(request)
        return {
            "cup_size_oz": state_container.intake_service.get_cup_size(),
            "goal_oz": state_container.aggregation_service.active_goal_for_date(
                state_container.clock.today()
            ),
        }

    @app.put("/settings/cup-size")
    async def set_cup_size(
        payload: CupSizeRequest, request: Request
    ) -> dict[str, int]:
        """Update the cup size preference."""
        state_container = _container(request)
        state_container.intake_service.set_cup_size(payload.cup_size_oz)
        return {"cup_size_oz": state_container.intake_service.get_cup_size()}

    @app.put("/settings/goal")
    async def set_goal(payload: GoalRequest, request: Request) -> dict[str, object]:
        """Set the daily goal from an effective date onward."""
        state_container = _container(request)
        effective_date = payload.effective_date or state_container.clock.today()
        goal = state_container.intake_service.set_daily_goal(
            effective_date, payload.goal_oz
        )
        return {"goal": goal}

    return app
