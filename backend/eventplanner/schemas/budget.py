import uuid
from decimal import Decimal

from pydantic import BaseModel, Field

OTHER_CATEGORY = "other"


class BudgetItem(BaseModel):
    id: str = Field(default_factory=lambda: "bid_" + uuid.uuid4().hex[:12])
    category: str
    title: str = ""
    description: str = ""
    estimated_cost: Decimal = Decimal("0")
    actual_cost: Decimal | None = None
    vendor: str | None = None
    notes: str | None = None
    requirement_id: str | None = None
    is_required: bool = False


class CategoryBudget(BaseModel):
    budgeted: Decimal = Decimal("0.00")  # share of the baseline assigned to the category
    allocation: Decimal = Decimal("0.00")  # sum of item estimated costs
    percentage: float = 0.0  # allocation as % of the baseline
    unallocated: Decimal = Decimal("0.00")  # budgeted share no item absorbed
    items: list[BudgetItem] = []


class BudgetBreakdown(BaseModel):
    total_budget: Decimal
    categories: dict[str, CategoryBudget]
    service_fees: Decimal = Decimal("0.00")
    taxes: Decimal = Decimal("0.00")
    contingency: Decimal = Decimal("0.00")
    grand_total: Decimal

    @property
    def unallocated_total(self) -> Decimal:
        return sum((c.unallocated for c in self.categories.values()), Decimal("0.00"))


class BudgetOptions(BaseModel):
    region: str | None = None  # key of REGION_MULTIPLIERS
    season: str | None = None  # key of SEASON_MULTIPLIERS
    include_service_fee: bool = False
    include_tax: bool = False
    include_contingency: bool = False
    custom_per_person_cost: dict[str, Decimal] | None = None  # event type → cost
    custom_category_allocation: dict[str, Decimal] | None = None  # category → share (0-1)
    additional_items: list[BudgetItem] = []


class EventTypeEstimateOptions(BaseModel):
    venue_size: str | None = None  # small | medium | large
    duration_hours: Decimal | None = None
    amenities: list[str] = []
    region: str | None = None
    season: str | None = None
