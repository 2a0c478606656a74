"""Budget router — breakdowns, strategy estimates and industry comparison."""

import logging
from decimal import Decimal

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from eventplanner.schemas.budget import BudgetOptions
from eventplanner.schemas.enums import EventType
from eventplanner.schemas.requirement import Requirement
from eventplanner.services.budget_engine import (
    compare_budget_to_industry_average,
    generate_budget_breakdown,
    get_estimator,
)

logger = logging.getLogger(__name__)

router = APIRouter()


class BreakdownRequest(BaseModel):
    event_type: EventType
    attendee_count: int = Field(ge=0)
    requirements: list[Requirement] = []
    options: BudgetOptions = BudgetOptions()


class EstimateRequest(BaseModel):
    strategy: str = "planned"  # planned | exploratory
    event_type: EventType
    attendee_count: int = Field(ge=0)
    requirements: list[Requirement] = []
    options: dict = {}


class CompareRequest(BaseModel):
    event_type: EventType
    attendee_count: int = Field(ge=0)
    budget: Decimal


@router.post("/breakdown")
async def budget_breakdown(req: BreakdownRequest):
    """Requirement-based breakdown with category allocations and surcharges."""
    return generate_budget_breakdown(req.event_type, req.attendee_count, req.requirements, req.options)


@router.post("/estimate")
async def budget_estimate(req: EstimateRequest):
    try:
        estimator = get_estimator(req.strategy)
        estimate = estimator.estimate(req.event_type, req.attendee_count, req.requirements, req.options)
    except ValueError as e:
        raise HTTPException(status_code=422, detail=str(e))
    return estimate.to_dict()


@router.post("/compare")
async def budget_compare(req: CompareRequest):
    return compare_budget_to_industry_average(req.event_type, req.attendee_count, req.budget).to_dict()
