import uuid
from datetime import date
from decimal import Decimal

from pydantic import BaseModel, Field

from eventplanner.schemas.common import UtcDatetime
from eventplanner.schemas.enums import EventType, RequirementPriority, RequirementStatus


class Requirement(BaseModel):
    """An externally tracked need. `category` is free text so foreign categories survive."""

    id: str = Field(default_factory=lambda: uuid.uuid4().hex)
    title: str = ""
    description: str = ""
    category: str
    priority: RequirementPriority = RequirementPriority.MEDIUM
    status: RequirementStatus = RequirementStatus.PENDING
    estimated_cost: Decimal | None = None
    responsible: str | None = None
    due_date: date | None = None
    notes: str | None = None


class EventRequirements(BaseModel):
    event_id: str
    event_type: EventType
    venue_id: str
    attendee_count: int = Field(ge=0)
    requirements: list[Requirement] = []
    budget: Decimal | None = None
    start_date: UtcDatetime | None = None
    end_date: UtcDatetime | None = None
