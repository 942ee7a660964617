"""Background job endpoints protected by a shared token."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Header, HTTPException, Request, status

if TYPE_CHECKING:
    from hydration_tracker.containers import AppContainer

router = APIRouter(prefix="/jobs", tags=["jobs"])


def _get_job_token(request: Request) -> str:
    container: AppContainer = request.app.state.container
    return container.settings.job_token


async def require_job_token(
    x_job_token: str | None = Header(default=None),
    job_token: str = Depends(_get_job_token),
) -> None:
    """Ensure requests include a valid job token."""
    if not x_job_token or x_job_token != job_token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)


@router.post("/reminder", dependencies=[Depends(require_job_token)])
async def reminder_check(request: Request) -> dict[str, object]:
    """Run the behind-schedule reminder check once."""
    container: AppContainer = request.app.state.container
    decision = await container.reminder_service.run_check()
    return {"decision": decision}
