"""Pydantic request models for the HTTP API."""

from datetime import date

from pydantic import BaseModel

from hydration_tracker.domain.hydration import IncrementType


class DayRequest(BaseModel):
    """Request targeting a single day, today when omitted."""

    day: date | None = None


class IntakeRequest(DayRequest):
    """Signed intake delta in ounces."""

    amount_oz: int


class UndoRequest(DayRequest):
    """Undo one increment of the last kind added."""

    last_increment: IncrementType = IncrementType.FULL


class CupSizeRequest(BaseModel):
    """New cup size preference."""

    cup_size_oz: int


class GoalRequest(BaseModel):
    """New daily goal, effective today when no date is given."""

    goal_oz: int
    effective_date: date | None = None
